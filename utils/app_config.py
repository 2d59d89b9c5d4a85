"""Client configuration. Zero imports from the rest of the app except constants.

Config lives in ~/.expense_tracker/config.json; a handful of environment
variables override the file so the client can be pointed at another server
without editing it.
"""
import json
import logging
import os
from pathlib import Path

from utils.constants import (
    DATE_FORMAT_OPTIONS,
    DEFAULT_API_URL,
    DEFAULT_DISPLAY_DATE_FORMAT,
    REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".expense_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_DIR = CONFIG_DIR / "logs"

ENV_API_URL = "EXPENSE_TRACKER_API_URL"
ENV_SESSION = "EXPENSE_TRACKER_SESSION"
ENV_LOG_LEVEL = "EXPENSE_TRACKER_LOG_LEVEL"


def load_config(path: Path = CONFIG_FILE) -> dict:
    """Returns {} on missing or corrupt file. Never raises."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict, path: Path = CONFIG_FILE) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, path)
    except OSError as e:
        logger.error("Could not save config %s: %s", path, e)
        tmp.unlink(missing_ok=True)
        raise


def get_api_url(config: dict | None = None) -> str:
    config = load_config() if config is None else config
    url = os.environ.get(ENV_API_URL) or config.get("api_url") or DEFAULT_API_URL
    return url.rstrip("/")


def get_session_cookie(config: dict | None = None) -> str | None:
    config = load_config() if config is None else config
    return os.environ.get(ENV_SESSION) or config.get("session_cookie") or None


def set_session_cookie(value: str | None, path: Path = CONFIG_FILE) -> None:
    """Store (or forget, with None) the server session cookie."""
    config = load_config(path)
    if value is None:
        config.pop("session_cookie", None)
    else:
        config["session_cookie"] = value.strip()
    save_config(config, path)


def get_log_level(config: dict | None = None) -> str:
    """A standard level name; unknown names and numbers fall back to INFO."""
    config = load_config() if config is None else config
    level = os.environ.get(ENV_LOG_LEVEL) or config.get("log_level") or "INFO"
    name = str(level).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.warning("Unknown log level %r, using INFO", level)
        return "INFO"
    return name


def get_date_format(config: dict | None = None) -> str:
    config = load_config() if config is None else config
    fmt = config.get("date_format")
    return fmt if fmt in DATE_FORMAT_OPTIONS else DEFAULT_DISPLAY_DATE_FORMAT


def get_request_timeout(config: dict | None = None) -> float:
    config = load_config() if config is None else config
    try:
        return float(config.get("request_timeout", REQUEST_TIMEOUT))
    except (TypeError, ValueError):
        return float(REQUEST_TIMEOUT)
