import logging
from typing import List

from fastapi import APIRouter, Depends

from quiz_api.core.deps import get_store
from quiz_api.core.errors import NoQuestionsError, StoreError, TopicNotFoundError, store_failure
from quiz_api.db.mongo import QuizStore
from quiz_api.models.quiz import Question
from quiz_api.utils.text_utils import clean_path_value

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("/{topic}", response_model=List[Question])
def questions_by_topic(topic: str, store: QuizStore = Depends(get_store)):
    """
    Deux étapes distinctes : sujet inconnu (404 + suggestions)
    puis sujet connu mais sans questions (404 + nom du sujet).
    """
    name = clean_path_value(topic)
    try:
        found = store.find_topic(name)
        if found is None:
            raise TopicNotFoundError(suggestions=store.list_topic_names())

        questions = store.find_questions(found.name)
    except StoreError as e:
        logger.exception("Error fetching questions for %r: %s", name, e)
        raise store_failure("Failed to fetch questions", e)

    if not questions:
        raise NoQuestionsError(topic=found.name)
    return questions
