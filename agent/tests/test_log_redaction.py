import logging

from vindinium.logging import REDACTED, configure_logging, redact_secrets


def test_redacts_key_and_token() -> None:
    event_dict = {"event": "Starting", "key": "supersecret", "token": "lte0", "turns": 30}
    out = redact_secrets(None, "info", event_dict)
    assert "supersecret" not in str(out)
    assert "lte0" not in str(out)
    assert out["key"] == REDACTED
    assert out["turns"] == 30


def test_leaves_empty_values_alone() -> None:
    out = redact_secrets(None, "info", {"event": "x", "key": None})
    assert out["key"] is None


def test_unknown_log_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("VINDINIUM_LOG_LEVEL", "basicconfig")
    configure_logging()
    assert logging.getLogger().level == logging.INFO


def test_named_log_level_is_applied(monkeypatch) -> None:
    monkeypatch.setenv("VINDINIUM_LOG_LEVEL", "warning")
    configure_logging()
    assert logging.getLogger().level == logging.WARNING
