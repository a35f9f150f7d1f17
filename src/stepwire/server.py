from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from stepwire.config import WireSettings, step_id_parser
from stepwire.engine import StepEngine
from stepwire.wire.dispatch import Dispatcher, command_registry
from stepwire.wire.protocol import WireProtocol

logger = logging.getLogger(__name__)


def build_protocol(engine: StepEngine, settings: WireSettings | None = None) -> WireProtocol:
    settings = settings or WireSettings()
    registry = command_registry(engine, step_id_parser=step_id_parser(settings))
    return WireProtocol(Dispatcher(registry))


def _binary_stream(stream) -> BinaryIO:
    return getattr(stream, "buffer", stream)


def start(
    engine: StepEngine,
    *,
    settings: WireSettings | None = None,
    reader: BinaryIO | None = None,
    writer: BinaryIO | None = None,
) -> None:
    """Serve the wire protocol until the input stream closes (stdio by default)."""
    protocol = build_protocol(engine, settings)
    logger.info("serving wire protocol with engine %s", type(engine).__name__)
    if reader is None:
        reader = _binary_stream(sys.stdin)
    if writer is None:
        writer = _binary_stream(sys.stdout)
    protocol.process_stream(reader, writer)
