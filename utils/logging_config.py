import logging.config
from pathlib import Path

from utils.app_config import LOG_DIR

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_dir: Path | None = LOG_DIR) -> None:
    """Console logging, plus a rotating file under log_dir when it is given."""
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": str(log_dir / "tracker.log"),
            "maxBytes": 1_000_000,
            "backupCount": 3,
            "encoding": "utf-8",
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": handlers,
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
        "loggers": {
            # requests' connection pool is noisy at DEBUG
            "urllib3": {"level": "WARNING"},
            "matplotlib": {"level": "WARNING"},
        },
    })
