from functools import wraps
from typing import List, Optional

from pydantic import ValidationError
from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError

from quiz_api.core.config import Settings
from quiz_api.core.errors import InvalidQuestionError, StoreError
from quiz_api.models.quiz import Question, QuizResponse, Topic
from quiz_api.utils.text_utils import exact_ci_pattern


def create_client(settings: Settings) -> MongoClient:
    """
    Client unique (pool de connexions) partagé par toutes les requêtes.
    """
    return MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )


def _driver_errors(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    return wrapper


def _ci_match(value: str) -> dict:
    return {"$regex": exact_ci_pattern(value), "$options": "i"}


class QuizStore:
    """
    Accès Mongo aux collections topics / questions / responses.

    Les routers ne dépendent que de ces méthodes : un autre backend
    (ou un store mémoire en test) n'a qu'à les reproduire.
    """

    def __init__(self, client: MongoClient, db_name: str) -> None:
        self.client = client
        self.db = client[db_name]

    @_driver_errors
    def ensure_indexes(self) -> None:
        self.db.topics.create_index([("name", ASCENDING)], unique=True)

    def is_connected(self) -> bool:
        """
        Etat courant vu par le monitoring du driver, sans aller-retour réseau :
        aucun serveur joignable -> False, immédiatement.
        """
        return bool(self.client.nodes)

    @_driver_errors
    def list_topic_names(self) -> List[str]:
        return [d["name"] for d in self.db.topics.find({}, {"name": 1, "_id": 0})]

    @_driver_errors
    def find_topic(self, name: str) -> Optional[Topic]:
        doc = self.db.topics.find_one({"name": _ci_match(name)}, {"_id": 0})
        return Topic(**doc) if doc else None

    @_driver_errors
    def find_questions(self, topic: str) -> List[Question]:
        questions: List[Question] = []
        for doc in self.db.questions.find({"topic": _ci_match(topic)}, {"__v": 0}):
            try:
                questions.append(Question.model_validate(doc))
            except ValidationError as e:
                raise InvalidQuestionError(f"Question {doc.get('_id')} invalide: {e.errors()[0]['msg']}") from e
        return questions

    @_driver_errors
    def save_response(self, response: QuizResponse) -> str:
        result = self.db.responses.insert_one(response.model_dump())
        return str(result.inserted_id)

    def close(self) -> None:
        self.client.close()
