"""
One guessing round.

- PLAYING: guesses are accepted and scored against the cached target profile.
- CLEARED: a guess scored 100; terminal until a new round replaces this one.
- Guesses are kept most-recent-first; no two share a normalized form.
- Hints unlock from the number of guesses, never stored separately.
"""

from enum import Enum
from typing import List, NamedTuple, Optional

from hangul import (
    PhonemeProfile,
    SimilarityBreakdown,
    best_breakdown,
    build_profile,
    extract_choseong,
    score_profiles,
)

from .catalog import WordEntry
from .feedback import (
    DUPLICATE_GUESS,
    EMPTY_GUESS,
    NOTHING_TO_COMPARE,
    Feedback,
)

# Guess counts at which each hint unlocks
HINT_LENGTH_AT = 0
HINT_CATEGORY_AT = 10
HINT_EXTRA_AT = 20


class GameMode(str, Enum):
    DAILY = "daily"
    ENDLESS = "endless"


class RoundStatus(str, Enum):
    PLAYING = "playing"
    CLEARED = "cleared"


class Guess(NamedTuple):
    value: str
    normalized: str
    breakdown: SimilarityBreakdown


class Hint(NamedTuple):
    label: str
    value: str
    unlock_at: int
    unlocked: bool


class InvalidGuessError(ValueError):
    """Guess rejected before scoring; the round is left unchanged."""

    def __init__(self, feedback: Feedback):
        super().__init__(feedback.text)
        self.feedback = feedback


class RoundClosedError(RuntimeError):
    """Guess submitted to a round that is already cleared."""


class GameRound:
    """Owns the state of a single round: target, guesses and status."""

    def __init__(self, entry: WordEntry, mode: GameMode = GameMode.DAILY):
        self._entry = entry
        self._mode = GameMode(mode)
        self._target = build_profile(entry.term)
        self._guesses: List[Guess] = []
        self._status = RoundStatus.PLAYING

    @property
    def entry(self) -> WordEntry:
        return self._entry

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def status(self) -> RoundStatus:
        return self._status

    @property
    def guesses(self) -> List[Guess]:
        """Most recent first. Returns a copy."""
        return list(self._guesses)

    @property
    def guess_count(self) -> int:
        return len(self._guesses)

    def is_cleared(self) -> bool:
        return self._status == RoundStatus.CLEARED

    @property
    def prompt(self) -> str:
        """Initial consonants of the target, shown to the player."""
        return extract_choseong(self._entry.term)

    @property
    def last_guess(self) -> Optional[Guess]:
        return self._guesses[0] if self._guesses else None

    @property
    def best(self) -> SimilarityBreakdown:
        return best_breakdown(g.breakdown for g in self._guesses)

    @property
    def progress(self) -> int:
        return 100 if self.is_cleared() else self.best.overall

    @property
    def revealed_description(self) -> Optional[str]:
        return self._entry.description if self.is_cleared() else None

    def hints(self) -> List[Hint]:
        count = len(self._guesses)
        rows = (
            ("글자 수", f"{len(self._entry.term)} 글자", HINT_LENGTH_AT),
            ("카테고리", self._entry.category, HINT_CATEGORY_AT),
            ("추가 힌트", self._entry.hint, HINT_EXTRA_AT),
        )
        return [Hint(label, value, at, count >= at) for label, value, at in rows]

    def validate(self, raw: str) -> PhonemeProfile:
        """
        Return the profile of the trimmed guess, or raise InvalidGuessError for
        an empty, uncomparable or duplicate guess.
        """
        guess = raw.strip()
        if not guess:
            raise InvalidGuessError(EMPTY_GUESS)
        profile = build_profile(guess)
        if not profile.combined:
            raise InvalidGuessError(NOTHING_TO_COMPARE)
        if any(g.normalized == profile.combined for g in self._guesses):
            raise InvalidGuessError(DUPLICATE_GUESS)
        return profile

    def submit(self, raw: str) -> Guess:
        """
        Score a guess and record it. Clears the round when overall == 100.
        Raises RoundClosedError once cleared, InvalidGuessError on rejection.
        """
        if self.is_cleared():
            raise RoundClosedError("Round already cleared")
        profile = self.validate(raw)
        value = raw.strip()
        guess = Guess(value=value, normalized=profile.combined, breakdown=score_profiles(profile, self._target))
        self._guesses.insert(0, guess)
        if guess.breakdown.overall == 100:
            self._status = RoundStatus.CLEARED
        return guess
