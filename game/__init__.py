"""Round state machine, target selection and persisted session progress."""

from .catalog import (
    WordEntry,
    CatalogEmptyError,
    DuplicateTermError,
    validate_catalog,
    load_catalog,
)
from .feedback import FeedbackTone, Feedback, format_feedback
from .round import (
    GameMode,
    RoundStatus,
    Guess,
    Hint,
    InvalidGuessError,
    RoundClosedError,
    GameRound,
)
from .selection import daily_key, daily_hash, daily_entry, pick_next_entry
from .session import SessionStats, SessionTracker, GuessOutcome, GameSession
from .words import WORDS

__all__ = [
    "WordEntry",
    "CatalogEmptyError",
    "DuplicateTermError",
    "validate_catalog",
    "load_catalog",
    "FeedbackTone",
    "Feedback",
    "format_feedback",
    "GameMode",
    "RoundStatus",
    "Guess",
    "Hint",
    "InvalidGuessError",
    "RoundClosedError",
    "GameRound",
    "daily_key",
    "daily_hash",
    "daily_entry",
    "pick_next_entry",
    "SessionStats",
    "SessionTracker",
    "GuessOutcome",
    "GameSession",
    "WORDS",
]
