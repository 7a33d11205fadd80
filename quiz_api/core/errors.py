import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Erreur renvoyée au client sous la forme {"error": ..., **extra}.
    """

    def __init__(self, status_code: int, error: str, **extra: Any) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.extra = extra

    def to_content(self) -> dict:
        return {"error": self.error, **self.extra}


class MissingFieldsError(ApiError):
    def __init__(self) -> None:
        super().__init__(HTTP_400_BAD_REQUEST, "Missing required fields")


class TopicNotFoundError(ApiError):
    def __init__(self, suggestions: list[str]) -> None:
        super().__init__(HTTP_404_NOT_FOUND, "Topic not found", suggestions=suggestions)


class NoQuestionsError(ApiError):
    def __init__(self, topic: str | None = None) -> None:
        extra = {"topic": topic} if topic is not None else {}
        super().__init__(HTTP_404_NOT_FOUND, "No questions found for this topic", **extra)


class StoreError(Exception):
    """
    Échec côté base (connexion, requête, document illisible).
    """


class InvalidQuestionError(StoreError):
    """
    Question stockée dont la réponse ne figure pas dans les options.
    """


def store_failure(error: str, exc: StoreError) -> ApiError:
    return ApiError(HTTP_500_INTERNAL_SERVER_ERROR, error, details=str(exc))


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "details": details},
    )


async def _catch_unhandled_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": str(exc)},
        )


def register_error_handlers(app: FastAPI) -> None:
    """
    A appeler avant d'ajouter le CORS : le middleware catch-all doit rester
    sous CORSMiddleware pour que les 500 portent aussi les en-têtes CORS.
    """
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.middleware("http")(_catch_unhandled_errors)
