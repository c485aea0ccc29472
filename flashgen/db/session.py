from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from flashgen.core.config import settings

# SQLite sessions hop between threadpool workers
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
