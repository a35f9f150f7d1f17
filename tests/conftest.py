from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT / "src", ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


import pytest

from stepwire.logging_setup import LOGGER_NAME
from stepwire.wire.dispatch import Dispatcher, command_registry
from tests.engine_helpers import RecordingEngine


@pytest.fixture(autouse=True)
def _stepwire_logger_scope():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def dispatcher(engine: RecordingEngine) -> Dispatcher:
    return Dispatcher(command_registry(engine))
