import logging
import logging.handlers

import pytest

from utils.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_rotating_file_in_log_dir(tmp_path):
    configure_logging("DEBUG", tmp_path / "logs")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    files = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(files) == 1
    logging.getLogger("services.test").info("hello")
    files[0].flush()
    assert "hello" in (tmp_path / "logs" / "tracker.log").read_text(encoding="utf-8")


def test_console_only(tmp_path):
    configure_logging("WARNING", None)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert logging.getLogger("urllib3").level == logging.WARNING
