"""
Service wiring: per-player sessions over the app database, closed-round
handling and the display summary.
"""

import os
import sys
import tempfile
import uuid
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Isolated database; must be set before the app config is imported
_TMP = tempfile.mkdtemp(prefix="kkomaentle-test-")
os.environ["KKOMAENTLE_DATABASE_URL"] = f"sqlite:///{Path(_TMP) / 'test.db'}"
os.environ.pop("KKOMAENTLE_CATALOG_PATH", None)

BACKEND = ROOT / "backend"
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))

from app.database import init_db
from app.services import session_service
from app.services.store_service import SqlAlchemyStore
from game import WORDS, FeedbackTone, GameMode
from game.feedback import DAILY_ALREADY_SOLVED, ROUND_CLEARED

init_db()


def _player() -> str:
    return f"player-{uuid.uuid4()}"


def test_sqlalchemy_store_is_scoped_per_player():
    a = SqlAlchemyStore("a-" + str(uuid.uuid4()))
    b = SqlAlchemyStore("b-" + str(uuid.uuid4()))
    assert a.get("kkomaentle-mode") is None
    a.set("kkomaentle-mode", "endless")
    a.set("kkomaentle-mode", "daily")
    assert a.get("kkomaentle-mode") == "daily"
    assert b.get("kkomaentle-mode") is None
    a.delete("kkomaentle-mode")
    assert a.get("kkomaentle-mode") is None


def test_get_session_reuses_instance():
    player = _player()
    assert session_service.get_session(player) is session_service.get_session(player)
    assert session_service.get_catalog() == WORDS


def test_progress_survives_dropping_the_session():
    player = _player()
    session = session_service.get_session(player)
    target = session.round.entry.term
    outcome = session_service.submit_guess(player, target)
    assert outcome.feedback.tone == FeedbackTone.SUCCESS
    assert session_service.submit_guess(player, target) == (ROUND_CLEARED, None)

    session_service.drop_session(player)
    again = session_service.get_session(player)
    assert again is not session
    assert again.tracker.is_solved(target)
    assert again.tracker.stats.correct_answers == 1
    assert session_service.submit_guess(player, "바다") == (DAILY_ALREADY_SOLVED, None)


def test_set_mode_and_reset():
    player = _player()
    session_service.set_mode(player, "endless")
    session_service.drop_session(player)
    assert session_service.get_session(player).mode == GameMode.ENDLESS
    session = session_service.reset_session(player)
    assert session.mode == GameMode.DAILY
    assert session.tracker.solved_terms == ()


def test_summary_hides_locked_hints():
    player = _player()
    session_service.submit_guess(player, "abc")
    summary = session_service.get_session_summary(player)
    assert summary["guess_count"] == 1
    assert summary["total_guesses"] == 1
    assert summary["total_words"] == len(WORDS)
    assert summary["prompt"] == session_service.get_session(player).round.prompt
    assert [h["unlocked"] for h in summary["hints"]] == [True, False, False]
    assert summary["hints"][1]["value"] is None
    assert summary["guesses"][0]["value"] == "abc"
    assert set(summary["best"]) == {"overall", "initial", "medial", "final"}
    assert summary["description"] is None


def test_connect_args_only_for_sqlite():
    from app.database import engine_connect_args

    assert engine_connect_args("sqlite:///tmp/x.db") == {"check_same_thread": False}
    assert engine_connect_args("postgresql://user@localhost/kkomaentle") == {}
