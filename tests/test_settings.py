import logging

import pytest

from ttt_engine.settings import LOG_FORMAT, Settings, configure_logging, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TTT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TTT_VERBOSE", raising=False)


def test_defaults_to_info():
    s = load_settings()
    assert s == Settings(verbose=False, log_level=None)
    assert s.level == logging.INFO


def test_verbose_env_enables_debug(monkeypatch):
    monkeypatch.setenv("TTT_VERBOSE", "yes")
    assert load_settings().level == logging.DEBUG
    # explicit argument wins over the environment
    assert load_settings(verbose=False).level == logging.INFO


def test_log_level_env_wins(monkeypatch):
    monkeypatch.setenv("TTT_LOG_LEVEL", "warning")
    assert load_settings(verbose=True).level == logging.WARNING


def test_unknown_log_level_raises(monkeypatch):
    monkeypatch.setenv("TTT_LOG_LEVEL", "loud")
    with pytest.raises(ValueError):
        _ = load_settings().level


def test_configure_logging_calls_basic_config(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    s = configure_logging(verbose=True)
    assert s.verbose is True
    assert calls == {"level": logging.DEBUG, "format": LOG_FORMAT}


def test_engine_logs_game_over_at_debug_only(caplog):
    from ttt_engine.game import replay

    with caplog.at_level(logging.INFO, logger="ttt_engine"):
        replay([1, 4, 2, 5, 3])
    assert caplog.records == []

    with caplog.at_level(logging.DEBUG, logger="ttt_engine"):
        replay([1, 4, 2, 5, 3])
    assert "Player X wins after 5 moves" in caplog.text


def test_session_logs_game_over_at_info(caplog):
    from ttt_engine.session import GameSession

    session = GameSession()
    session.start()
    with caplog.at_level(logging.INFO, logger="ttt_engine"):
        for mv in [1, 4, 2, 5, 3]:
            session.move(mv)
    infos = [r for r in caplog.records if r.levelno == logging.INFO]
    assert [r.getMessage() for r in infos] == ["Game over: player X wins after 5 moves"]


def test_enumeration_logs_one_info_summary(caplog):
    from ttt_engine.reachable import reachable_states

    with caplog.at_level(logging.INFO, logger="ttt_engine"):
        reachable_states()
    infos = [r for r in caplog.records if r.levelno >= logging.INFO]
    assert [r.getMessage() for r in infos] == ["Enumerated 5478 reachable states"]
