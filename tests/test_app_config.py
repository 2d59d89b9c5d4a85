import json

import pytest

from utils import app_config
from utils.app_config import (
    get_api_url,
    get_date_format,
    get_log_level,
    get_request_timeout,
    get_session_cookie,
    load_config,
    save_config,
    set_session_cookie,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (app_config.ENV_API_URL, app_config.ENV_SESSION, app_config.ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)


def test_missing_file_is_empty(tmp_path):
    assert load_config(tmp_path / "nope.json") == {}


def test_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == {}


def test_save_creates_folder_and_round_trips(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_config({"api_url": "http://x"}, path)
    assert json.loads(path.read_text(encoding="utf-8")) == {"api_url": "http://x"}
    assert not path.with_suffix(".tmp").exists()


def test_defaults():
    assert get_api_url({}) == "http://localhost:5000"
    assert get_session_cookie({}) is None
    assert get_log_level({}) == "INFO"
    assert get_date_format({}) == "DD/MM/YYYY"
    assert get_request_timeout({}) == 10.0


def test_file_values():
    config = {"api_url": "https://budget.example/", "log_level": "debug",
              "request_timeout": "2.5", "date_format": "YYYY-MM-DD"}
    assert get_api_url(config) == "https://budget.example"
    assert get_log_level(config) == "DEBUG"
    assert get_request_timeout(config) == 2.5
    assert get_date_format(config) == "YYYY-MM-DD"


def test_bad_timeout_uses_default():
    assert get_request_timeout({"request_timeout": "soon"}) == 10.0


def test_environment_overrides_file(monkeypatch):
    monkeypatch.setenv(app_config.ENV_API_URL, "http://other:8080")
    monkeypatch.setenv(app_config.ENV_SESSION, "cookie")
    config = {"api_url": "http://x", "session_cookie": "stale"}
    assert get_api_url(config) == "http://other:8080"
    assert get_session_cookie(config) == "cookie"


def test_set_and_forget_session_cookie(tmp_path):
    path = tmp_path / "config.json"
    save_config({"api_url": "http://x"}, path)
    set_session_cookie("  s%3Aabc ", path)
    assert load_config(path) == {"api_url": "http://x", "session_cookie": "s%3Aabc"}
    set_session_cookie(None, path)
    assert load_config(path) == {"api_url": "http://x"}


@pytest.mark.parametrize("level", ["verbose", 10, "Level 10", ""])
def test_unknown_log_level_falls_back_to_info(level):
    assert get_log_level({"log_level": level}) == "INFO"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(app_config.ENV_LOG_LEVEL, " warning ")
    assert get_log_level({"log_level": "debug"}) == "WARNING"


@pytest.mark.parametrize("fmt", ["dd-mm-yy", None, 5])
def test_unknown_date_format_uses_default(fmt):
    assert get_date_format({"date_format": fmt}) == "DD/MM/YYYY"
