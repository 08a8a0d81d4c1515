"""Tests for devtimer.config path resolution."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from devtimer.config import (
    TIMER_FILE_NAME,
    TIMER_PATH_ENV,
    Settings,
    default_timer_path,
    get_settings,
    resolve_timer_path,
)


class TestResolveTimerPath:
    def test_env_override_wins(self, tmp_path):
        override = tmp_path / "custom.json"
        assert resolve_timer_path({TIMER_PATH_ENV: str(override)}) == override

    def test_empty_override_is_ignored(self):
        with patch("devtimer.config.default_timer_path", return_value=Path("/x/timer.json")):
            assert resolve_timer_path({TIMER_PATH_ENV: ""}) == Path("/x/timer.json")

    def test_falls_back_to_default(self):
        with patch("devtimer.config.default_timer_path", return_value=Path("/x/timer.json")):
            assert resolve_timer_path({}) == Path("/x/timer.json")

    def test_reads_process_environment(self, timer_file):
        assert resolve_timer_path() == timer_file


class TestDefaultTimerPath:
    def test_uses_config_dir_off_windows(self, tmp_path):
        with (
            patch("devtimer.config.sys.platform", "linux"),
            patch("devtimer.config.user_config_dir", return_value=str(tmp_path)),
        ):
            assert default_timer_path() == tmp_path / TIMER_FILE_NAME

    def test_uses_data_dir_on_windows(self, tmp_path):
        with (
            patch("devtimer.config.sys.platform", "win32"),
            patch("devtimer.config.user_data_dir", return_value=str(tmp_path)),
        ):
            assert default_timer_path() == tmp_path / "timer.json"


class TestSettings:
    def test_settings_use_env(self, timer_file):
        assert Settings().timer_path == timer_file

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_new_env(self, tmp_path, monkeypatch):
        first = get_settings().timer_path
        monkeypatch.setenv(TIMER_PATH_ENV, str(tmp_path / "other.json"))
        assert get_settings().timer_path == first
        get_settings.cache_clear()
        assert get_settings().timer_path == tmp_path / "other.json"
