"""
health.py
- Purpose: Liveness and database reachability checks.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flashgen.api.deps import get_db
from flashgen.core import AppError, ErrorCode, ErrorReason
from flashgen.core.errors import reason_text

logger = logging.getLogger("flashgen.health")

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/db/health")
def db_health(db: Session = Depends(get_db)):
    try:
        db.execute(text("select 1"))
    except SQLAlchemyError as e:
        logger.warning("db_health.failed", extra={"error_type": type(e).__name__})
        raise AppError(
            code=ErrorCode.DATABASE_CONNECTION,
            reason=reason_text(ErrorReason.DATABASE_UNAVAILABLE),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        ) from e
    return {"status": "ok", "db": "connected"}
