"""
Word catalog: immutable entries the rounds are drawn from.

- Identity of an entry is its term (exact, case-sensitive string).
- A catalog must be non-empty; no round can be formed without one.
"""

import json
from pathlib import Path
from typing import Iterable, NamedTuple, Tuple


class WordEntry(NamedTuple):
    term: str
    category: str
    hint: str
    description: str


class CatalogEmptyError(ValueError):
    """Raised when a session is built over an empty catalog."""


class DuplicateTermError(ValueError):
    """Raised when two catalog entries share a term."""


def validate_catalog(entries: Iterable[WordEntry]) -> Tuple[WordEntry, ...]:
    """Freeze entries into a tuple; reject empty catalogs and duplicate terms."""
    catalog = tuple(entries)
    if not catalog:
        raise CatalogEmptyError("Catalog must contain at least one entry")
    seen = set()
    for entry in catalog:
        if entry.term in seen:
            raise DuplicateTermError(f"Duplicate term in catalog: {entry.term!r}")
        seen.add(entry.term)
    return catalog


def load_catalog(path: Path) -> Tuple[WordEntry, ...]:
    """
    Load a JSON array of {term, category, hint, description} objects.
    Missing optional fields default to "".
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Catalog file must hold a JSON array: {path}")
    entries = []
    for item in raw:
        if not isinstance(item, dict) or not isinstance(item.get("term"), str) or not item["term"]:
            raise ValueError(f"Invalid catalog entry: {item!r}")
        entries.append(
            WordEntry(
                term=item["term"],
                category=str(item.get("category", "")),
                hint=str(item.get("hint", "")),
                description=str(item.get("description", "")),
            )
        )
    return validate_catalog(entries)
