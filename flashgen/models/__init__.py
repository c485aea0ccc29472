"""
models package
- Purpose: Import all ORM models so Alembic autogenerate discovers them.
"""

from flashgen.models.generation import Generation
from flashgen.models.flashcard import Flashcard
from flashgen.models.generation_error_log import GenerationErrorLog

__all__ = [
    "Generation",
    "Flashcard",
    "GenerationErrorLog",
]
