"""
Phoneme profiles: four comparison channels per string.

- combined: full jamo spelling of every syllable
- initial / medial / final: one channel per syllable position
- Non-Hangul characters (ASCII letters, digits) are sanitized and appended to
  every channel so they still take part in comparison.
"""

import re
from typing import NamedTuple

from .jamo import jamo_of

# Compatibility jamo, precomposed syllables, ASCII letters and digits
_NON_WORD_CHARACTERS = re.compile(r"[^ㄱ-ㅎㅏ-ㅣ가-힣a-zA-Z0-9]")
_WHITESPACE = re.compile(r"\s+")


class PhonemeProfile(NamedTuple):
    combined: str
    initial: str
    medial: str
    final: str


def sanitize(text: str) -> str:
    """Lowercase, drop whitespace and anything that is not jamo/syllable/ASCII alnum."""
    text = _WHITESPACE.sub("", text.lower())
    return _NON_WORD_CHARACTERS.sub("", text)


def build_profile(text: str) -> PhonemeProfile:
    initial = []
    medial = []
    final = []
    combined = []
    for ch in text:
        glyphs = jamo_of(ch)
        if glyphs is None:
            normalized = sanitize(ch)
            initial.append(normalized)
            medial.append(normalized)
            final.append(normalized)
            combined.append(normalized)
            continue
        cho, jung, jong = glyphs
        initial.append(cho)
        medial.append(jung)
        if jong:
            final.append(jong)
        combined.append(cho + jung + jong)
    return PhonemeProfile(
        combined=sanitize("".join(combined)),
        initial=sanitize("".join(initial)),
        medial=sanitize("".join(medial)),
        final=sanitize("".join(final)),
    )


def normalize_for_comparison(text: str) -> str:
    """Canonical key for duplicate-guess detection."""
    return build_profile(text).combined
