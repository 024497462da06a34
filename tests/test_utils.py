import logging

import pytest
import pythonjsonlogger.json
from rich.logging import RichHandler

from cmdtree.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield
    for handler in root.handlers:
        handler.close()
    root.setLevel(level)


def test_setup_logging_cli():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_with_file(tmp_path):
    log_file = tmp_path / "cmdtree.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    console_handler, file_handler = logging.getLogger().handlers
    assert isinstance(console_handler.formatter, pythonjsonlogger.json.JsonFormatter)
    assert isinstance(file_handler, logging.FileHandler)
    logging.getLogger("cmdtree").debug("hello")
    file_handler.flush()
    assert '"message": "hello"' in log_file.read_text()


def test_setup_logging_mode_from_env(monkeypatch):
    monkeypatch.setenv("CMDTREE_LOG_MODE", "json")
    setup_logging()
    assert not isinstance(logging.getLogger().handlers[0], RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
