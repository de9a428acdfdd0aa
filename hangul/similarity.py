"""
Edit-distance similarity over phoneme profiles.

- levenshtein_distance: insert/delete/substitute cost 1, one rolling row.
- similarity_score: 1 - distance / longer length, clamped to [0, 1];
  two empty channels are a perfect match, one empty channel scores 0.
- Each channel is scored on its own; overall uses the combined channel and is
  not derived from the other three.
"""

import math
from typing import Iterable, NamedTuple

from .profile import PhonemeProfile, build_profile


class SimilarityBreakdown(NamedTuple):
    """Integer percentages 0..100 per channel."""
    overall: int
    initial: int
    medial: int
    final: int


EMPTY_BREAKDOWN = SimilarityBreakdown(0, 0, 0, 0)


def levenshtein_distance(a: str, b: str) -> int:
    """
    Edit distance between two strings, compared by code point.
    The row is sized by the shorter string.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        curr = [i]
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            curr.append(min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[len(b)]


def similarity_score(a: str, b: str) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    distance = levenshtein_distance(a, b)
    return max(0.0, 1.0 - distance / max(len(a), len(b)))


def to_percent(value: float) -> int:
    """Round half up, matching Math.round on the browser client."""
    return int(math.floor(value * 100 + 0.5))


def score_profiles(guess: PhonemeProfile, target: PhonemeProfile) -> SimilarityBreakdown:
    return SimilarityBreakdown(
        overall=to_percent(similarity_score(guess.combined, target.combined)),
        initial=to_percent(similarity_score(guess.initial, target.initial)),
        medial=to_percent(similarity_score(guess.medial, target.medial)),
        final=to_percent(similarity_score(guess.final, target.final)),
    )


def score_phonemes(guess: str, target: PhonemeProfile) -> SimilarityBreakdown:
    """Profile the raw guess and score it against a cached target profile."""
    return score_profiles(build_profile(guess), target)


def best_breakdown(breakdowns: Iterable[SimilarityBreakdown]) -> SimilarityBreakdown:
    """Per-channel maximum; all zeros when there is nothing to compare."""
    best = EMPTY_BREAKDOWN
    for b in breakdowns:
        best = SimilarityBreakdown(
            overall=max(best.overall, b.overall),
            initial=max(best.initial, b.initial),
            medial=max(best.medial, b.medial),
            final=max(best.final, b.final),
        )
    return best
