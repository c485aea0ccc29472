import random
import uuid
from functools import lru_cache
from typing import Callable, Generator

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from flashgen.core.config import Settings, settings
from flashgen.db.session import SessionLocal
from flashgen.generation.base import ContentGenerator
from flashgen.generation.chaos import FailureInjectingGenerator
from flashgen.generation.providers import MockContentGenerator, PerformanceTestGenerator
from flashgen.services.flashcard_service import FlashcardService
from flashgen.services.generation_service import GenerationService
from flashgen.services.record_store import GenerationRecordStore
from flashgen.validations.performance_validators import PerformanceOptions


def get_session_factory() -> sessionmaker:
    """Session factory for the request; the error-log sink opens its own sessions from it."""
    return SessionLocal


def get_db(factory: sessionmaker = Depends(get_session_factory)) -> Generator[Session, None, None]:
    """
    Yields a DB session per request.
    Ensures the session is closed even on exceptions.
    """
    db = factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id() -> uuid.UUID:
    """
    Identity resolver. Single-user until auth lands; override in tests or
    swap for a token-backed resolver.
    """
    return settings.DEFAULT_USER_ID


def build_content_generator(cfg: Settings) -> ContentGenerator:
    generator: ContentGenerator = MockContentGenerator(
        min_proposals=cfg.GENERATOR_MIN_PROPOSALS,
        max_proposals=cfg.GENERATOR_MAX_PROPOSALS,
        min_latency_ms=cfg.GENERATOR_MIN_LATENCY_MS,
        max_latency_ms=cfg.GENERATOR_MAX_LATENCY_MS,
        seed=cfg.GENERATOR_SEED,
    )
    if cfg.GENERATOR_FAILURE_RATE > 0:
        generator = FailureInjectingGenerator(
            generator,
            failure_rate=cfg.GENERATOR_FAILURE_RATE,
            rng=random.Random(cfg.GENERATOR_SEED),
        )
    return generator


@lru_cache(maxsize=1)
def get_content_generator() -> ContentGenerator:
    """
    One generator per process so a seeded RNG advances across requests.
    Using Depends(get_content_generator) lets tests swap in a scripted double.
    """
    return build_content_generator(settings)


def get_record_store(
    db: Session = Depends(get_db),
    factory: sessionmaker = Depends(get_session_factory),
) -> GenerationRecordStore:
    return GenerationRecordStore(db, factory)


def get_generation_service(
    store: GenerationRecordStore = Depends(get_record_store),
    generator: ContentGenerator = Depends(get_content_generator),
) -> GenerationService:
    return GenerationService(store=store, generator=generator)


def get_flashcard_service(db: Session = Depends(get_db)) -> FlashcardService:
    return FlashcardService(db=db)


PerformanceGeneratorFactory = Callable[[PerformanceOptions], ContentGenerator]


def build_performance_generator(options: PerformanceOptions) -> ContentGenerator:
    return PerformanceTestGenerator(
        response_delay_ms=options.response_delay_ms,
        failure_rate=options.failure_rate,
        cpu_intensity=options.cpu_intensity,
        variable_latency=options.variable_latency,
        flashcard_count=options.flashcard_count,
    )


def get_performance_generator_factory() -> PerformanceGeneratorFactory:
    return build_performance_generator
