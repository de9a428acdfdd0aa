"""SQLite database and session."""
import sys
from pathlib import Path

# Ensure project root is on path for hangul, game, storage
ROOT = Path(__file__).resolve().parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import DATABASE_URL


def engine_connect_args(url: str) -> dict:
    """check_same_thread is understood by the sqlite driver only."""
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


engine = create_engine(DATABASE_URL, connect_args=engine_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db() -> None:
    from . import models  # noqa: F401  registers tables

    Base.metadata.create_all(bind=engine)
