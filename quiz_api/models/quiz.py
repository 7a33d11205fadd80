from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Topic(BaseModel):
    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def _trim(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name ne peut pas être vide")
        return v


class Question(BaseModel):
    """
    Question QCM telle que stockée dans la collection `questions`.
    La cohérence `answer` / `options` n'est vérifiée qu'au moment de noter
    (voir services.scoring.check_answer_key) : la lecture renvoie le document tel quel.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="ObjectId Mongo (en texte)")
    topic: str
    question: str
    options: List[str]
    answer: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: Any) -> str:
        return str(v)

    @field_validator("topic")
    @classmethod
    def _trim_topic(cls, v: str) -> str:
        return v.strip()


class AnswerRecord(BaseModel):
    question: str
    selected: str
    correct: bool


class QuizResponse(BaseModel):
    """
    Document de la collection `responses` (une soumission, jamais modifiée).
    """

    user: str
    topic: str
    score: int = Field(..., ge=0)
    answers: List[AnswerRecord]
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# -------------------
# API
# -------------------
class SubmitRequest(BaseModel):
    # champs optionnels ici : l'absence est signalée par un 400 "Missing required fields"
    user: Optional[str] = None
    topic: Optional[str] = None
    answers: Optional[Dict[str, str]] = None


class AnswerResult(AnswerRecord):
    correctAnswer: str


class SubmitResult(BaseModel):
    score: int
    total: int
    percentage: int
    results: List[AnswerResult]


class HealthResponse(BaseModel):
    status: str
    database: str
    timestamp: datetime
    version: str
