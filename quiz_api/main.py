import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pymongo.errors import PyMongoError

from quiz_api.core.config import get_settings
from quiz_api.core.errors import register_error_handlers
from quiz_api.core.logging import setup_logging
from quiz_api.db.mongo import QuizStore, create_client
from quiz_api.routers import questions, submit, system, topics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connexion Mongo au démarrage. Si la base est injoignable, le démarrage échoue
    (pas de mode dégradé).
    """
    settings = get_settings()
    owned = app.state.store is None
    if owned:
        client = create_client(settings)
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error("MongoDB connection error (%s): %s", settings.MONGODB_URI, e)
            client.close()
            raise
        app.state.store = QuizStore(client, settings.MONGODB_DB)
        app.state.store.ensure_indexes()
        logger.info("MongoDB connected: %s/%s", settings.MONGODB_URI, settings.MONGODB_DB)

    yield

    if owned:
        app.state.store.close()
        app.state.store = None


def create_app(store: Optional[QuizStore] = None) -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API de quiz : sujets, questions QCM, soumission et score",
        lifespan=lifespan,
    )
    # store fourni (tests, intégration) : le lifespan ne crée pas de client
    app.state.store = store

    register_error_handlers(app)

    # Middleware CORS
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    logger.info("CORS enabled for: %s", ", ".join(origins) or "(none)")

    # Routers
    app.include_router(system.router)
    app.include_router(topics.router)
    app.include_router(questions.router)
    app.include_router(submit.router)

    # Redirect root → docs
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return app


app = create_app()
