"""
Per-player game sessions: one GameSession per player id, kept in memory.
Progress lives in the database through SqlAlchemyStore; the catalog is
loaded once per process.
"""

import logging
import random
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

ROOT = Path(__file__).resolve().parent.parent.parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from game import WORDS, GameMode, GameSession, GuessOutcome, WordEntry, load_catalog
from game.feedback import DAILY_ALREADY_SOLVED, ROUND_CLEARED

from ..config import CATALOG_PATH, RANDOM_SEED, configure_logging
from ..database import init_db
from .store_service import SqlAlchemyStore

logger = logging.getLogger(__name__)

# player_id -> GameSession (in-memory only)
_sessions: Dict[str, GameSession] = {}
_catalog: Optional[Tuple[WordEntry, ...]] = None
_db_ready = False


def get_catalog() -> Tuple[WordEntry, ...]:
    """Configured catalog, or the built-in words when no path is set."""
    global _catalog
    if _catalog is None:
        if CATALOG_PATH:
            _catalog = load_catalog(Path(CATALOG_PATH))
            logger.info("Loaded %d catalog entries from %s", len(_catalog), CATALOG_PATH)
        else:
            _catalog = WORDS
    return _catalog


def _ensure_ready() -> None:
    global _db_ready
    if not _db_ready:
        configure_logging()
        init_db()
        _db_ready = True


def get_session(player_id: str, rng: Optional[random.Random] = None) -> GameSession:
    """Get or create the GameSession for this player."""
    if player_id not in _sessions:
        _ensure_ready()
        if rng is None:
            rng = random.Random(RANDOM_SEED)
        _sessions[player_id] = GameSession(SqlAlchemyStore(player_id), get_catalog(), rng=rng)
    return _sessions[player_id]


def drop_session(player_id: str) -> None:
    """Forget the in-memory session; stored progress is kept."""
    _sessions.pop(player_id, None)


def reset_session(player_id: str) -> GameSession:
    """Clear stored progress for this player and return to today's Daily round."""
    session = get_session(player_id)
    session.reset()
    return session


def submit_guess(player_id: str, raw: str) -> GuessOutcome:
    """Submit for this player; closed rounds are answered with feedback instead of scoring."""
    session = get_session(player_id)
    if session.round.is_cleared():
        return GuessOutcome(ROUND_CLEARED, None)
    if not session.can_submit():
        return GuessOutcome(DAILY_ALREADY_SOLVED, None)
    return session.submit_guess(raw)


def set_mode(player_id: str, mode: str) -> GameSession:
    session = get_session(player_id)
    session.set_mode(GameMode(mode))
    return session


def get_session_summary(player_id: str) -> dict:
    """Snapshot for display: round, hints, best scores and progress rates."""
    session = get_session(player_id)
    rnd = session.round
    best = rnd.best
    stats = session.tracker.stats
    return {
        "mode": session.mode.value,
        "status": rnd.status.value,
        "prompt": rnd.prompt,
        "can_submit": session.can_submit(),
        "is_daily_solved": session.is_daily_solved(),
        "guess_count": rnd.guess_count,
        "guesses": [
            {"value": g.value, "normalized": g.normalized, "breakdown": g.breakdown._asdict()}
            for g in rnd.guesses
        ],
        "hints": [
            {"label": h.label, "value": h.value if h.unlocked else None, "unlock_at": h.unlock_at, "unlocked": h.unlocked}
            for h in rnd.hints()
        ],
        "best": best._asdict(),
        "progress": rnd.progress,
        "description": rnd.revealed_description,
        "conquest_rate": session.conquest_rate(),
        "solved_count": len(session.tracker.solved_terms),
        "remaining_count": session.remaining_count(),
        "total_words": len(session.catalog),
        "total_guesses": stats.total_guesses,
        "correct_answers": stats.correct_answers,
        "success_rate": session.success_rate(),
        "last_reset": stats.last_reset.isoformat(),
    }
