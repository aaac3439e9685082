import json
import logging
from pathlib import Path

import pytest

from core.logging_utils import JsonLogFormatter, configure_logging


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_does_not_stack_handlers(root_logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "vault.jsonl"
    configure_logging("debug", log_file)
    count = len(root_logger.handlers)
    configure_logging("debug", log_file)

    assert len(root_logger.handlers) == count
    assert root_logger.level == logging.DEBUG
    assert log_file.parent.is_dir()


def test_json_formatter_keeps_serializable_extras() -> None:
    record = logging.LogRecord("core.indexing", logging.WARNING, __file__, 1, "Skipped %s", ("a.md",), None)
    record.vault = "/vault"
    record.handle = object()

    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Skipped a.md"
    assert payload["vault"] == "/vault"
    assert "handle" not in payload


def test_package_loggers_reach_the_log_file(root_logger, tmp_path: Path) -> None:
    log_file = tmp_path / "vault.jsonl"
    configure_logging("info", log_file)

    logging.getLogger("core.indexing.scanner").warning("Skipping invalid metadata file %s", "a.md")
    for handler in root_logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[-1]["name"] == "core.indexing.scanner"
    assert lines[-1]["message"] == "Skipping invalid metadata file a.md"
