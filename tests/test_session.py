"""
Session progress: counters, solved set, mode preference, tolerance of corrupt
stored values, and the session that ties rounds to persisted progress.
"""

import json
import random
import sys
from datetime import datetime, timezone
from pathlib import Path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from game import (
    CatalogEmptyError,
    DuplicateTermError,
    FeedbackTone,
    GameMode,
    GameSession,
    RoundClosedError,
    RoundStatus,
    SessionStats,
    SessionTracker,
    WordEntry,
    daily_entry,
    load_catalog,
)
from game.session import MODE_STORAGE_KEY, SOLVED_STORAGE_KEY, STATS_STORAGE_KEY
from storage import MemoryStore

CATALOG = (
    WordEntry("가방", "생활", "메고 다녀요", "물건을 넣는 용구."),
    WordEntry("바다", "자연", "짠물", "넓은 짠물."),
    WordEntry("하늘", "자연", "위를 보세요", "머리 위의 공간."),
)
NOW = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)


def fixed_clock():
    return NOW


def make_session(store=None, seed=0):
    return GameSession(store or MemoryStore(), CATALOG, rng=random.Random(seed), clock=fixed_clock)


def test_tracker_records_and_persists():
    store = MemoryStore()
    tracker = SessionTracker(store, clock=fixed_clock)
    tracker.record_guess(False)
    tracker.record_guess(True)
    assert tracker.stats.total_guesses == 2
    assert tracker.stats.correct_answers == 1
    stored = json.loads(store.get(STATS_STORAGE_KEY))
    assert stored["totalGuesses"] == 2
    assert stored["correctAnswers"] == 1
    assert "lastReset" in stored
    assert tracker.success_rate() == 50


def test_mark_solved_is_idempotent():
    store = MemoryStore()
    tracker = SessionTracker(store)
    assert tracker.mark_solved("가방")
    assert not tracker.mark_solved("가방")
    assert tracker.solved_terms == ("가방",)
    assert json.loads(store.get(SOLVED_STORAGE_KEY)) == ["가방"]


def test_tracker_reloads_from_store():
    store = MemoryStore()
    tracker = SessionTracker(store)
    tracker.mark_solved("하늘")
    tracker.record_guess(True)
    again = SessionTracker(store)
    assert again.is_solved("하늘")
    assert again.stats.correct_answers == 1


def test_corrupt_values_fall_back_to_defaults():
    store = MemoryStore({
        SOLVED_STORAGE_KEY: "not json",
        STATS_STORAGE_KEY: "{bad",
        MODE_STORAGE_KEY: "sideways",
    })
    tracker = SessionTracker(store, clock=fixed_clock)
    assert tracker.solved_terms == ()
    assert tracker.stats.total_guesses == 0
    assert tracker.stats.last_reset == NOW
    assert tracker.load_mode() == GameMode.DAILY


def test_partial_and_invalid_stored_values():
    store = MemoryStore({
        SOLVED_STORAGE_KEY: json.dumps(["가방", 3, None, "가방"]),
        STATS_STORAGE_KEY: json.dumps({"totalGuesses": 4}),
    })
    tracker = SessionTracker(store)
    assert tracker.solved_terms == ("가방",)
    assert tracker.stats.total_guesses == 4
    assert tracker.stats.correct_answers == 0

    bad = MemoryStore({
        SOLVED_STORAGE_KEY: json.dumps({"가방": True}),
        STATS_STORAGE_KEY: json.dumps({"totalGuesses": 1, "correctAnswers": 5}),
    })
    tracker = SessionTracker(bad)
    assert tracker.solved_terms == ()
    assert tracker.stats.total_guesses == 0


def test_session_stats_rejects_more_correct_than_total():
    with pytest.raises(ValueError):
        SessionStats(total_guesses=1, correct_answers=2)


def test_session_requires_non_empty_catalog():
    with pytest.raises(CatalogEmptyError):
        GameSession(MemoryStore(), [])
    with pytest.raises(DuplicateTermError):
        GameSession(MemoryStore(), [CATALOG[0], CATALOG[0]])


def test_daily_round_uses_date_key():
    session = make_session()
    assert session.mode == GameMode.DAILY
    assert session.today_key() == "2026-10-18"
    assert session.round.entry == daily_entry("2026-10-18", CATALOG)


def test_solving_the_target():
    store = MemoryStore()
    session = make_session(store)
    target = session.round.entry.term
    outcome = session.submit_guess(target)
    assert outcome.guess.breakdown.overall == 100
    assert outcome.feedback.tone == FeedbackTone.SUCCESS
    assert session.round.status == RoundStatus.CLEARED
    assert session.tracker.is_solved(target)
    assert session.tracker.stats.total_guesses == 1
    assert session.tracker.stats.correct_answers == 1
    assert session.is_daily_solved()
    assert not session.can_submit()
    assert session.conquest_rate() == 33
    assert session.remaining_count() == 2
    with pytest.raises(RoundClosedError):
        session.submit_guess("바다")

    reopened = make_session(store)
    assert reopened.is_daily_solved()
    assert not reopened.can_submit()


def test_duplicate_guess_changes_nothing():
    session = make_session()
    target = session.round.entry.term
    wrong = "sky" if target != "sky" else "sea"
    first = session.submit_guess(wrong)
    assert first.guess is not None
    second = session.submit_guess(" " + wrong.upper() + "!")
    assert second.guess is None
    assert second.feedback.tone == FeedbackTone.WARN
    assert session.round.guess_count == 1
    assert session.tracker.stats.total_guesses == 1


def test_empty_guess_is_rejected_without_counting():
    session = make_session()
    outcome = session.submit_guess("   ")
    assert outcome.guess is None
    assert outcome.feedback.tone == FeedbackTone.WARN
    assert session.tracker.stats.total_guesses == 0


def test_success_rate():
    session = make_session()
    session.submit_guess("x1")
    session.submit_guess("x2")
    session.submit_guess(session.round.entry.term)
    assert session.success_rate() == 33


def test_endless_mode_avoids_solved_and_previous():
    store = MemoryStore({SOLVED_STORAGE_KEY: json.dumps(["가방"]), MODE_STORAGE_KEY: "endless"})
    for seed in range(20):
        session = make_session(store, seed=seed)
        assert session.mode == GameMode.ENDLESS
        first = session.round.entry.term
        assert first in ("바다", "하늘")
        second = session.start_new_round().entry.term
        assert second != first
        assert second != "가방"


def test_set_mode_persists_and_starts_fresh_round():
    store = MemoryStore()
    session = make_session(store)
    session.submit_guess("x1")
    session.set_mode(GameMode.ENDLESS)
    assert store.get(MODE_STORAGE_KEY) == "endless"
    assert session.round.mode == GameMode.ENDLESS
    assert session.round.guess_count == 0
    assert make_session(store).mode == GameMode.ENDLESS


def test_next_round_from_daily_switches_to_endless():
    session = make_session()
    session.next_round()
    assert session.mode == GameMode.ENDLESS
    previous = session.round.entry.term
    session.next_round()
    assert session.mode == GameMode.ENDLESS
    assert session.round.entry.term != previous


def test_reset_clears_progress_and_returns_to_daily():
    store = MemoryStore()
    session = make_session(store)
    session.submit_guess(session.round.entry.term)
    session.set_mode(GameMode.ENDLESS)
    session.submit_guess("x1")
    session.reset()
    assert session.tracker.solved_terms == ()
    assert session.tracker.stats.total_guesses == 0
    assert session.tracker.stats.correct_answers == 0
    assert session.tracker.stats.last_reset == NOW
    assert session.mode == GameMode.DAILY
    assert store.get(MODE_STORAGE_KEY) == "daily"
    assert session.round.entry == daily_entry("2026-10-18", CATALOG)
    assert session.round.guess_count == 0
    assert session.can_submit()
    assert json.loads(store.get(SOLVED_STORAGE_KEY)) == []


def test_load_catalog(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(
        json.dumps([{"term": "가방", "category": "생활"}, {"term": "바다", "hint": "짠물"}], ensure_ascii=False),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert [e.term for e in catalog] == ["가방", "바다"]
    assert catalog[0].hint == ""
    assert catalog[1].hint == "짠물"

    path.write_text("[]", encoding="utf-8")
    with pytest.raises(CatalogEmptyError):
        load_catalog(path)
    path.write_text(json.dumps([{"category": "x"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog(path)


def test_missing_last_reset_comes_from_clock():
    store = MemoryStore({STATS_STORAGE_KEY: json.dumps({"totalGuesses": 3, "correctAnswers": 1})})
    tracker = SessionTracker(store, clock=fixed_clock)
    assert tracker.stats.total_guesses == 3
    assert tracker.stats.last_reset == NOW

    store = MemoryStore({STATS_STORAGE_KEY: json.dumps([1, 2])})
    assert SessionTracker(store, clock=fixed_clock).stats.last_reset == NOW


def test_daily_round_keeps_its_entry_past_midnight():
    now = [NOW]
    store = MemoryStore()
    session = GameSession(store, CATALOG, rng=random.Random(0), clock=lambda: now[0])
    first = session.round.entry.term
    now[0] = datetime(2026, 10, 19, 0, 30, tzinfo=timezone.utc)
    second = daily_entry("2026-10-19", CATALOG).term
    assert second != first

    session.tracker.mark_solved(second)
    assert not session.is_daily_solved()
    assert session.can_submit()

    session.submit_guess(first)
    assert session.is_daily_solved()
    assert not session.can_submit()


def test_rates_round_half_up():
    store = MemoryStore({
        SOLVED_STORAGE_KEY: json.dumps(["가방"]),
        STATS_STORAGE_KEY: json.dumps({"totalGuesses": 8, "correctAnswers": 1}),
    })
    tracker = SessionTracker(store, clock=fixed_clock)
    assert tracker.conquest_rate(8) == 13
    assert tracker.conquest_rate(3) == 33
    assert tracker.conquest_rate(0) == 0
    assert tracker.success_rate() == 13
