import importlib
from types import SimpleNamespace

import pytest

import config.testing
from config import get_settings_module
from src.lecture_attendance.lecture_attendance.main import resolve_log_level

BASELINE_TESTING_SETTINGS = (config.testing.DATA_FILE, config.testing.GROUP_RECORDS_ON_LOAD)


@pytest.fixture
def reloaded_testing_settings(monkeypatch):
    yield lambda: importlib.reload(config.testing)
    # Undo the patched environment before restoring module-level values.
    monkeypatch.undo()
    importlib.reload(config.testing)


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("dev", "config.development"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_settings_default_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_data_file_comes_from_environment(monkeypatch, tmp_path, reloaded_testing_settings):
    monkeypatch.setenv("ATTENDANCE_DATA_FILE", str(tmp_path / "roster.txt"))
    monkeypatch.setenv("GROUP_RECORDS_ON_LOAD", "1")

    settings = reloaded_testing_settings()

    assert settings.DATA_FILE == str(tmp_path / "roster.txt")
    assert settings.GROUP_RECORDS_ON_LOAD is True


def test_testing_settings_are_restored_after_reload():
    # Runs after the environment-driven reload above.
    assert (config.testing.DATA_FILE, config.testing.GROUP_RECORDS_ON_LOAD) == BASELINE_TESTING_SETTINGS


def test_debug_flag_forces_debug_log_level():
    assert resolve_log_level(SimpleNamespace(DEBUG=True, LOG_LEVEL="WARNING")) == "DEBUG"
    assert resolve_log_level(SimpleNamespace(DEBUG=False, LOG_LEVEL="ERROR")) == "ERROR"
    assert resolve_log_level(SimpleNamespace()) == "WARNING"
