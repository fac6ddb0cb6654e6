from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file rotation.
"""

import logging
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from reactdts.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up our root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    root = logging.getLogger()

    handlers = _our_handlers()
    assert len(handlers) == 1 and isinstance(handlers[0], QueueHandler)
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "reactdts.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("reactdts.test").debug("declaration emitted")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG | reactdts.test | declaration emitted" in content


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "rotate.log"
    cfg = LoggingConfig(level="DEBUG", console=False, log_file=str(log_file), max_bytes=100, backup_count=1)
    configure_logging(cfg)

    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists(), "Rotation backup file was not created."


def test_no_outputs_installs_nothing() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None) is None
