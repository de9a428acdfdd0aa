"""
Cross-round progress and the game session that owns the current round.

- SessionTracker: solved terms, guess counters and mode preference, persisted
  through a key-value store after every change. Missing or corrupt stored
  values fall back to defaults with a warning.
- GameSession: one player's current round plus tracker; randomness and the
  clock are injected so selection is reproducible.
"""

import json
import logging
import random
from datetime import datetime, timezone
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from hangul import to_percent
from storage import KeyValueStore

from .catalog import WordEntry, validate_catalog
from .feedback import Feedback, format_feedback
from .round import GameMode, GameRound, Guess, InvalidGuessError
from .selection import daily_entry, daily_key, pick_next_entry

logger = logging.getLogger(__name__)

# Storage keys shared with the browser client
SOLVED_STORAGE_KEY = "kkomaentle-conquered-terms"
STATS_STORAGE_KEY = "kkomaentle-stats"
MODE_STORAGE_KEY = "kkomaentle-mode"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionStats(BaseModel):
    """Guess counters; serialized with the client's camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_guesses: int = Field(default=0, ge=0, alias="totalGuesses")
    correct_answers: int = Field(default=0, ge=0, alias="correctAnswers")
    last_reset: datetime = Field(default_factory=_utc_now, alias="lastReset")

    @model_validator(mode="after")
    def _correct_within_total(self) -> "SessionStats":
        if self.correct_answers > self.total_guesses:
            raise ValueError("correctAnswers cannot exceed totalGuesses")
        return self

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class SessionTracker:
    """Solved set, stats and mode preference backed by a KeyValueStore."""

    def __init__(self, store: KeyValueStore, clock: Callable[[], datetime] = _utc_now):
        self._store = store
        self._clock = clock
        self._solved: List[str] = self._load_solved()
        self._stats: SessionStats = self._load_stats()

    def _load_solved(self) -> List[str]:
        raw = self._store.get(SOLVED_STORAGE_KEY)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt solved terms: %s", e)
            return []
        if not isinstance(parsed, list):
            logger.warning("Ignoring solved terms of type %s", type(parsed).__name__)
            return []
        return list(dict.fromkeys(t for t in parsed if isinstance(t, str)))

    def _load_stats(self) -> SessionStats:
        raw = self._store.get(STATS_STORAGE_KEY)
        if not raw:
            return SessionStats(last_reset=self._clock())
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt session stats: %s", e)
            return SessionStats(last_reset=self._clock())
        if not isinstance(parsed, dict):
            logger.warning("Ignoring session stats of type %s", type(parsed).__name__)
            return SessionStats(last_reset=self._clock())
        parsed.setdefault("lastReset", self._clock())
        try:
            return SessionStats.model_validate(parsed)
        except ValidationError as e:
            logger.warning("Ignoring invalid session stats: %s", e)
            return SessionStats(last_reset=self._clock())

    def _save_solved(self) -> None:
        self._store.set(SOLVED_STORAGE_KEY, json.dumps(self._solved, ensure_ascii=False))

    def _save_stats(self) -> None:
        self._store.set(STATS_STORAGE_KEY, self._stats.to_json())

    @property
    def stats(self) -> SessionStats:
        return self._stats

    @property
    def solved_terms(self) -> Tuple[str, ...]:
        return tuple(self._solved)

    def is_solved(self, term: str) -> bool:
        return term in self._solved

    def load_mode(self) -> GameMode:
        return GameMode.ENDLESS if self._store.get(MODE_STORAGE_KEY) == GameMode.ENDLESS.value else GameMode.DAILY

    def save_mode(self, mode: GameMode) -> None:
        self._store.set(MODE_STORAGE_KEY, GameMode(mode).value)

    def record_guess(self, correct: bool) -> SessionStats:
        self._stats = SessionStats(
            total_guesses=self._stats.total_guesses + 1,
            correct_answers=self._stats.correct_answers + (1 if correct else 0),
            last_reset=self._stats.last_reset,
        )
        self._save_stats()
        return self._stats

    def mark_solved(self, term: str) -> bool:
        """Add term to the solved set. Returns False if it was already there."""
        if term in self._solved:
            return False
        self._solved.append(term)
        self._save_solved()
        return True

    def reset(self) -> None:
        self._solved = []
        self._stats = SessionStats(last_reset=self._clock())
        self._save_solved()
        self._save_stats()

    def conquest_rate(self, catalog_size: int) -> int:
        if catalog_size <= 0:
            return 0
        return to_percent(len(self._solved) / catalog_size)

    def success_rate(self) -> int:
        if self._stats.total_guesses == 0:
            return 0
        return to_percent(self._stats.correct_answers / self._stats.total_guesses)


class GuessOutcome(NamedTuple):
    """Feedback for a submission; guess is None when it was rejected."""
    feedback: Feedback
    guess: Optional[Guess]


class GameSession:
    """
    A player's game: current round, persisted progress and mode.
    The catalog must be non-empty (CatalogEmptyError otherwise).
    """

    def __init__(
        self,
        store: KeyValueStore,
        catalog: Sequence[WordEntry],
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._catalog = validate_catalog(catalog)
        self._rng = rng or random.Random()
        self._clock = clock
        self.tracker = SessionTracker(store, clock=clock)
        self._mode = self.tracker.load_mode()
        self._round = self._new_round(self._mode, previous_term=None)

    @property
    def catalog(self) -> Tuple[WordEntry, ...]:
        return self._catalog

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def round(self) -> GameRound:
        return self._round

    def today_key(self) -> str:
        return daily_key(self._clock())

    def daily_entry(self) -> WordEntry:
        return daily_entry(self.today_key(), self._catalog)

    def is_daily_solved(self) -> bool:
        """A Daily round keeps the entry it started with, even past UTC midnight."""
        if self._round.mode == GameMode.DAILY:
            return self.tracker.is_solved(self._round.entry.term)
        return self.tracker.is_solved(self.daily_entry().term)

    def can_submit(self) -> bool:
        if self._round.is_cleared():
            return False
        return not (self._mode == GameMode.DAILY and self.is_daily_solved())

    def remaining_count(self) -> int:
        return max(len(self._catalog) - len(self.tracker.solved_terms), 0)

    def conquest_rate(self) -> int:
        return self.tracker.conquest_rate(len(self._catalog))

    def success_rate(self) -> int:
        return self.tracker.success_rate()

    def _new_round(self, mode: GameMode, previous_term: Optional[str]) -> GameRound:
        if mode == GameMode.DAILY:
            entry = self.daily_entry()
        else:
            entry = pick_next_entry(previous_term, self.tracker.solved_terms, self._catalog, self._rng)
        logger.info("Starting %s round", mode.value)
        return GameRound(entry, mode)

    def start_new_round(self, mode: Optional[GameMode] = None) -> GameRound:
        mode = GameMode(mode) if mode is not None else self._mode
        self._round = self._new_round(mode, previous_term=self._round.entry.term)
        return self._round

    def set_mode(self, mode: GameMode) -> GameRound:
        """Persist the preference and start a fresh round in that mode."""
        self._mode = GameMode(mode)
        self.tracker.save_mode(self._mode)
        return self.start_new_round(self._mode)

    def next_round(self) -> GameRound:
        """Daily moves on to Endless; Endless draws another entry."""
        if self._mode == GameMode.DAILY:
            return self.set_mode(GameMode.ENDLESS)
        return self.start_new_round(GameMode.ENDLESS)

    def submit_guess(self, raw: str) -> GuessOutcome:
        """
        Score raw against the current target. Rejected guesses produce warn
        feedback and leave the round and stats untouched. Callers check
        can_submit() first; a cleared round raises RoundClosedError.
        """
        try:
            guess = self._round.submit(raw)
        except InvalidGuessError as e:
            return GuessOutcome(e.feedback, None)
        correct = guess.breakdown.overall == 100
        self.tracker.record_guess(correct)
        if correct:
            if self.tracker.mark_solved(self._round.entry.term):
                logger.info("Solved %r after %d guesses", self._round.entry.term, self._round.guess_count)
        return GuessOutcome(format_feedback(guess.breakdown.overall), guess)

    def reset(self) -> GameRound:
        """Clear all progress and return to today's Daily round."""
        self.tracker.reset()
        logger.info("Progress reset")
        return self.set_mode(GameMode.DAILY)
