"""
Persistence port backed by the app database.
Each store is scoped to one player; rows are keyed by (player_id, key).
"""

import sys
import uuid
from pathlib import Path
from typing import Callable, Optional

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.orm import Session

from storage import KeyValueStore

from ..database import SessionLocal
from ..models import StoredValue


class SqlAlchemyStore(KeyValueStore):
    """KeyValueStore over the stored_values table. Opens a DB session per call."""

    def __init__(self, player_id: str, session_factory: Callable[[], Session] = SessionLocal):
        self._player_id = player_id
        self._session_factory = session_factory

    @property
    def player_id(self) -> str:
        return self._player_id

    def _row(self, db: Session, key: str) -> Optional[StoredValue]:
        return (
            db.query(StoredValue)
            .filter(StoredValue.player_id == self._player_id, StoredValue.key == key)
            .first()
        )

    def get(self, key: str) -> Optional[str]:
        db = self._session_factory()
        try:
            row = self._row(db, key)
            return row.value if row else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            row = self._row(db, key)
            if row is None:
                db.add(StoredValue(id=str(uuid.uuid4()), player_id=self._player_id, key=key, value=value))
            else:
                row.value = value
            db.commit()
        finally:
            db.close()

    def delete(self, key: str) -> None:
        db = self._session_factory()
        try:
            db.query(StoredValue).filter(
                StoredValue.player_id == self._player_id, StoredValue.key == key
            ).delete()
            db.commit()
        finally:
            db.close()
