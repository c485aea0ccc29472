import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from flashgen.api.deps import get_content_generator, get_session_factory
from flashgen.constants.statuses import FlashcardStatus
from flashgen.core.config import settings
from flashgen.db.base import Base
from flashgen.generation.types import FlashcardProposal
from flashgen.main import app

BASE_SENTENCE = (
    "The mitochondria is the powerhouse of the cell, producing most of the chemical energy "
    "needed to power the biochemical reactions of the cell. "
)


def make_source_text(length: int) -> str:
    """Repeated prose cut to exactly `length` characters."""
    reps = length // len(BASE_SENTENCE) + 1
    return (BASE_SENTENCE * reps)[:length]


class ScriptedContentGenerator:
    """
    Plays back a script, one step per call: an exception is raised, an int
    returns that many proposals. Once the script runs out every call succeeds
    with `default_count` proposals.
    """

    def __init__(self, *steps, default_count: int = 3):
        self.steps = list(steps)
        self.default_count = default_count
        self.calls = 0

    async def generate(self, text, model, status=FlashcardStatus.PENDING):
        self.calls += 1
        step = self.steps.pop(0) if self.steps else self.default_count
        if isinstance(step, BaseException):
            raise step
        return [
            FlashcardProposal(front=f"Question {i + 1}", back=f"Answer {i + 1}", status=status)
            for i in range(step)
        ]


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def count_rows(session_factory):
    def _count(model) -> int:
        with session_factory() as db:
            return db.scalar(select(func.count()).select_from(model))

    return _count


@pytest.fixture(autouse=True)
def no_retry_backoff(monkeypatch):
    monkeypatch.setattr(settings, "GENERATION_RETRY_BACKOFF_SECONDS", 0.0)


@pytest.fixture
def generator():
    return ScriptedContentGenerator()


@pytest.fixture
def client(session_factory, generator):
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_content_generator] = lambda: generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
