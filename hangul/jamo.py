"""
Hangul syllable decomposition.

- A precomposed syllable is U+AC00 + (initial * 21 + medial) * 28 + final.
- Initial (choseong), medial (jungseong) and final (jongseong) indices are
  recovered with integer arithmetic on the offset from U+AC00.
- Characters outside the syllable block pass through unchanged.
"""

from typing import Optional, Tuple

HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3
MEDIAL_COUNT = 21
FINAL_COUNT = 28
# Code points per initial consonant
CYCLE = MEDIAL_COUNT * FINAL_COUNT

CHOSEONG = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

JUNGSEONG = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ", "ㅙ",
    "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)

# Index 0 means "no final consonant"
JONGSEONG = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

SYLLABLE_COUNT = len(CHOSEONG) * CYCLE


def is_hangul_syllable(ch: str) -> bool:
    """True when ch is a single precomposed syllable (U+AC00..U+D7A3)."""
    if len(ch) != 1:
        return False
    return HANGUL_BASE <= ord(ch) <= HANGUL_LAST


def decompose(ch: str) -> Optional[Tuple[int, int, int]]:
    """
    Return (initial, medial, final) indices for a syllable, or None for any
    other character.
    """
    if not is_hangul_syllable(ch):
        return None
    offset = ord(ch) - HANGUL_BASE
    return offset // CYCLE, (offset % CYCLE) // FINAL_COUNT, offset % FINAL_COUNT


def jamo_of(ch: str) -> Optional[Tuple[str, str, str]]:
    """Glyphs for the three indices of decompose(); final is "" when absent."""
    indices = decompose(ch)
    if indices is None:
        return None
    i, m, f = indices
    return CHOSEONG[i], JUNGSEONG[m], JONGSEONG[f]


def compose(initial: int, medial: int, final: int = 0) -> str:
    """Build the syllable for the given indices. Raises ValueError when out of range."""
    if not (0 <= initial < len(CHOSEONG) and 0 <= medial < MEDIAL_COUNT and 0 <= final < FINAL_COUNT):
        raise ValueError("Invalid jamo indices: %r" % ((initial, medial, final),))
    return chr(HANGUL_BASE + initial * CYCLE + medial * FINAL_COUNT + final)


def extract_choseong(text: str) -> str:
    """Initial consonant of every syllable; other characters are kept as-is."""
    out = []
    for ch in text:
        glyphs = jamo_of(ch)
        out.append(glyphs[0] if glyphs else ch)
    return "".join(out)


def disassemble(text: str) -> str:
    """Full jamo spelling of text, e.g. "한" -> "ㅎㅏㄴ"."""
    out = []
    for ch in text:
        glyphs = jamo_of(ch)
        out.append("".join(glyphs) if glyphs else ch)
    return "".join(out)
