from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pod_progress.config import get_settings


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("POD_DEFAULT_WEEK_START_DAY", "POD_PROGRESS_LOG_PATH", "POD_PROGRESS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = get_settings()
    assert s.default_week_start_day == 1
    assert s.log_path == Path("logs/pod_progress.log")
    assert s.log_level == logging.INFO


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POD_DEFAULT_WEEK_START_DAY", "0")
    monkeypatch.setenv("POD_PROGRESS_LOG_LEVEL", "debug")
    s = get_settings()
    assert s.default_week_start_day == 0
    assert s.log_level == logging.DEBUG


@pytest.mark.parametrize("value", ["7", "-1", "monday", ""])
def test_get_settings_rejects_bad_week_start_day(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv("POD_DEFAULT_WEEK_START_DAY", value)
    with pytest.raises(RuntimeError):
        get_settings()


def test_get_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("POD_DEFAULT_WEEK_START_DAY", raising=False)
    monkeypatch.setenv("POD_PROGRESS_LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError):
        get_settings()
