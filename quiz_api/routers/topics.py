import logging
from typing import List

from fastapi import APIRouter, Depends

from quiz_api.core.deps import get_store
from quiz_api.core.errors import StoreError, store_failure
from quiz_api.db.mongo import QuizStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=List[str])
def list_topics(store: QuizStore = Depends(get_store)):
    try:
        return store.list_topic_names()
    except StoreError as e:
        logger.exception("Error fetching topics: %s", e)
        raise store_failure("Failed to fetch topics", e)
