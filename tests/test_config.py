from __future__ import annotations

import pytest

from calcpad.config import DEFAULT_ERROR_RESET_MS, settings_from_env


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CALCPAD_ERROR_RESET_MS", raising=False)
    monkeypatch.delenv("CALCPAD_LOG_LEVEL", raising=False)

    s = settings_from_env()
    assert s.error_reset_ms == DEFAULT_ERROR_RESET_MS == 1500
    assert s.error_reset_s == 1.5
    assert s.log_level == "INFO"


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALCPAD_ERROR_RESET_MS", "250")
    monkeypatch.setenv("CALCPAD_LOG_LEVEL", "debug")

    s = settings_from_env()
    assert s.error_reset_s == 0.25
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CALCPAD_ERROR_RESET_MS", "soon"),
        ("CALCPAD_ERROR_RESET_MS", "-1"),
        ("CALCPAD_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        settings_from_env()
