"""
Target selection for a round.

- Daily: rolling hash over the UTC calendar date picks one entry for everyone.
- Endless: uniform pick that avoids the previous term and solved terms.
"""

import random
from datetime import datetime, timezone
from typing import Collection, Optional, Sequence

from .catalog import WordEntry

HASH_MULTIPLIER = 31
HASH_MASK = 0xFFFFFFFF


def daily_key(now: Optional[datetime] = None) -> str:
    """ISO calendar date (YYYY-MM-DD) in UTC."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date().isoformat()


def daily_hash(seed: str) -> int:
    """
    hash = hash * 31 + code_unit, wrapped to unsigned 32 bits.
    Iterates UTF-16 code units so values agree with the browser client.
    """
    units = seed.encode("utf-16-le")
    h = 0
    for i in range(0, len(units), 2):
        h = (h * HASH_MULTIPLIER + int.from_bytes(units[i : i + 2], "little")) & HASH_MASK
    return h


def daily_entry(seed: str, catalog: Sequence[WordEntry]) -> WordEntry:
    return catalog[daily_hash(seed) % len(catalog)]


def pick_next_entry(
    previous_term: Optional[str],
    solved: Collection[str],
    catalog: Sequence[WordEntry],
    rng: Optional[random.Random] = None,
) -> WordEntry:
    """
    Uniform pick excluding previous_term and solved terms.
    Falls back to excluding only previous_term, then to the whole catalog.
    """
    rng = rng or random.Random()
    unsolved = [e for e in catalog if e.term != previous_term and e.term not in solved]
    if unsolved:
        return rng.choice(unsolved)
    fallback = [e for e in catalog if e.term != previous_term]
    if fallback:
        return rng.choice(fallback)
    return rng.choice(list(catalog))
