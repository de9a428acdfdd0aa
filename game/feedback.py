"""User-facing feedback tiers for a scored guess."""

from enum import Enum
from typing import NamedTuple


class FeedbackTone(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARN = "warn"


class Feedback(NamedTuple):
    tone: FeedbackTone
    text: str


# Lower bounds are inclusive
VERY_CLOSE_THRESHOLD = 85
GOOD_DIRECTION_THRESHOLD = 60
SALVAGEABLE_THRESHOLD = 35

EMPTY_GUESS = Feedback(FeedbackTone.WARN, "단어를 입력해 주세요.")
NOTHING_TO_COMPARE = Feedback(
    FeedbackTone.WARN,
    "초성이나 특수문자만으로는 비교가 어려워요. 단어를 입력해 주세요.",
)
DUPLICATE_GUESS = Feedback(FeedbackTone.WARN, "이미 시도한 단어예요. 다른 단어를 생각해 보세요.")


def format_feedback(overall: int) -> Feedback:
    if overall == 100:
        return Feedback(FeedbackTone.SUCCESS, "정답입니다! 완벽한 추측이에요 🎉")
    if overall >= VERY_CLOSE_THRESHOLD:
        return Feedback(FeedbackTone.INFO, "아주 근접했어요. 한 글자만 더 떠올려 보세요.")
    if overall >= GOOD_DIRECTION_THRESHOLD:
        return Feedback(FeedbackTone.INFO, "방향이 좋아요. 초성과 모음을 더 맞춰 볼까요?")
    if overall >= SALVAGEABLE_THRESHOLD:
        return Feedback(FeedbackTone.WARN, "조금 멀지만 단서를 조합해 보세요. 힌트를 더 열어도 좋아요.")
    return Feedback(FeedbackTone.WARN, "유사도가 낮아요. 다른 연상 단어를 시도해 보세요.")
DAILY_ALREADY_SOLVED = Feedback(
    FeedbackTone.WARN,
    "오늘의 문제를 이미 완료했습니다! 내일 다시 도전하거나 무한 모드로 전환해 보세요.",
)
ROUND_CLEARED = Feedback(FeedbackTone.INFO, "이미 정답을 맞혔어요. 새 문제로 넘어가 보세요.")
