from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from quiz_api.core.config import get_settings
from quiz_api.core.deps import get_store
from quiz_api.db.mongo import QuizStore
from quiz_api.models.quiz import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health(store: QuizStore = Depends(get_store)):
    s = get_settings()
    return HealthResponse(
        status="OK",
        database="Connected" if store.is_connected() else "Disconnected",
        timestamp=datetime.now(timezone.utc),
        version=s.APP_VERSION,
    )


@router.get("/version")
def version():
    s = get_settings()
    return {"name": s.APP_NAME, "version": s.APP_VERSION, "env": s.APP_ENV}
