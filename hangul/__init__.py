"""Hangul decomposition, phoneme profiles and edit-distance similarity."""

from .jamo import (
    CHOSEONG,
    JUNGSEONG,
    JONGSEONG,
    is_hangul_syllable,
    decompose,
    jamo_of,
    compose,
    extract_choseong,
    disassemble,
)
from .profile import (
    PhonemeProfile,
    sanitize,
    build_profile,
    normalize_for_comparison,
)
from .similarity import (
    SimilarityBreakdown,
    EMPTY_BREAKDOWN,
    levenshtein_distance,
    similarity_score,
    to_percent,
    score_profiles,
    score_phonemes,
    best_breakdown,
)

__all__ = [
    "CHOSEONG",
    "JUNGSEONG",
    "JONGSEONG",
    "is_hangul_syllable",
    "decompose",
    "jamo_of",
    "compose",
    "extract_choseong",
    "disassemble",
    "PhonemeProfile",
    "sanitize",
    "build_profile",
    "normalize_for_comparison",
    "SimilarityBreakdown",
    "EMPTY_BREAKDOWN",
    "levenshtein_distance",
    "similarity_score",
    "to_percent",
    "score_profiles",
    "score_phonemes",
    "best_breakdown",
]
