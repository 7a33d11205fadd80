from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from quiz_api.core.config import get_settings
from quiz_api.core.errors import StoreError
from quiz_api.main import create_app
from quiz_api.models.quiz import Question, QuizResponse, Topic


class MemoryStore:
    """
    Store en mémoire avec les mêmes méthodes que QuizStore.
    `fail=True` simule une base injoignable.
    """

    def __init__(self) -> None:
        self.topics: List[Topic] = []
        self.questions: List[Question] = []
        self.responses: List[QuizResponse] = []
        self.fail = False
        self.up = True

    # helpers de test
    def add_topic(self, name: str) -> None:
        self.topics.append(Topic(name=name))

    def add_question(self, qid: str, topic: str, question: str, options: List[str], answer: str) -> None:
        self.questions.append(
            Question(_id=qid, topic=topic, question=question, options=options, answer=answer)
        )

    def _check(self) -> None:
        if self.fail:
            raise StoreError("connection refused")

    # interface QuizStore
    def is_connected(self) -> bool:
        return self.up

    def list_topic_names(self) -> List[str]:
        self._check()
        return [t.name for t in self.topics]

    def find_topic(self, name: str) -> Optional[Topic]:
        self._check()
        return next((t for t in self.topics if t.name.lower() == name.lower()), None)

    def find_questions(self, topic: str) -> List[Question]:
        self._check()
        return [q for q in self.questions if q.topic.lower() == topic.lower()]

    def save_response(self, response: QuizResponse) -> str:
        self._check()
        self.responses.append(response)
        return str(len(self.responses))


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def test_client(store, monkeypatch):
    """
    TestClient branché sur un store mémoire (pas de Mongo),
    avec quelques variables d'env forcées pour les tests.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "Quiz API (tests)")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000")

    # IMPORTANT: vider le cache des settings pour prendre en compte les env
    get_settings.cache_clear()

    app = create_app(store=store)
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    get_settings.cache_clear()


@pytest.fixture
def math_store(store) -> MemoryStore:
    store.add_topic("Math")
    store.add_topic("History")
    store.add_question("q1", "Math", "2 + 2 ?", ["2", "3", "4", "5"], "4")
    return store
