from __future__ import annotations

import io
import logging

from stepwire.logging_setup import LOGGER_NAME, configure_logging


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_stepwire_handler", False)]


def test_configure_logging_is_idempotent() -> None:
    stream = io.StringIO()
    logger = configure_logging("info", stream=stream)
    configure_logging("debug", stream=stream)
    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(_own_handlers(logger)) == 1
    assert logger.level == logging.DEBUG


def test_module_loggers_write_to_the_configured_stream() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", stream=stream)
    logging.getLogger("stepwire.wire.dispatch").warning("unknown wire command %r", "x")
    logging.getLogger("stepwire.wire.dispatch").info("hidden")
    output = stream.getvalue()
    assert "WARNING | stepwire.wire.dispatch | unknown wire command 'x'" in output
    assert "hidden" not in output
