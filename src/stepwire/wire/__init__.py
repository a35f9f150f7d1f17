"""JSON-per-line wire protocol between a test orchestrator and a step engine."""

from stepwire.wire.dispatch import Dispatcher, command_registry
from stepwire.wire.protocol import WireProtocol

__all__ = ["Dispatcher", "WireProtocol", "command_registry"]
