import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from quiz_api.core.deps import get_store
from quiz_api.core.errors import MissingFieldsError, NoQuestionsError, StoreError, store_failure
from quiz_api.db.mongo import QuizStore
from quiz_api.models.quiz import AnswerRecord, QuizResponse, SubmitRequest, SubmitResult
from quiz_api.services.scoring import score_answers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submit", tags=["submit"])


@router.post("", response_model=SubmitResult)
def submit(body: Optional[SubmitRequest] = Body(default=None), store: QuizStore = Depends(get_store)):
    # corps absent ou vide : traité comme {}
    if body is None:
        body = SubmitRequest()
    # answers == {} est accepté, user/topic vides ne le sont pas
    if not body.user or not body.topic or body.answers is None:
        raise MissingFieldsError()

    try:
        questions = store.find_questions(body.topic)
        if not questions:
            raise NoQuestionsError()

        result = score_answers(questions, body.answers)

        store.save_response(
            QuizResponse(
                user=body.user,
                topic=body.topic,
                score=result.score,
                answers=[AnswerRecord(question=r.question, selected=r.selected, correct=r.correct) for r in result.results],
            )
        )
    except StoreError as e:
        logger.exception("Error submitting quiz for %r: %s", body.topic, e)
        raise store_failure("Failed to submit quiz", e)

    logger.info("Quiz submitted: user=%s topic=%s score=%d/%d", body.user, body.topic, result.score, result.total)
    return SubmitResult(
        score=result.score,
        total=result.total,
        percentage=result.percentage,
        results=result.results,
    )
