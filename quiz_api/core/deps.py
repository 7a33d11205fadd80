from fastapi import Request

from quiz_api.db.mongo import QuizStore


def get_store(request: Request) -> QuizStore:
    """
    Fournit le store partagé (créé au démarrage de l'app) en dépendance (DI).
    """
    return request.app.state.store
