"""
db/base.py
- Purpose: Single import point for the metadata Alembic migrates.
- Importing flashgen.models registers every table on Base.metadata.
"""

import flashgen.models  # noqa: F401
from flashgen.models.base import Base

metadata = Base.metadata

__all__ = ["Base", "metadata"]
