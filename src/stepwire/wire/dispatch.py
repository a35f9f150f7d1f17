from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from stepwire.config import StepIdParser
from stepwire.engine import StepEngine
from stepwire.json_types import JSONArray, JSONValue
from stepwire.wire import command_ids
from stepwire.wire.commands import (
    BeginScenarioCommand,
    EndScenarioCommand,
    InvokeCommand,
    SnippetTextCommand,
    StepMatchesCommand,
    WireCommand,
)
from stepwire.wire.responses import fail_response

logger = logging.getLogger(__name__)

CommandRegistry = Mapping[str, WireCommand]


def command_registry(
    engine: StepEngine,
    *,
    step_id_parser: StepIdParser = int,
) -> CommandRegistry:
    """Build the read-only command table, one shared instance per name."""
    unordered: dict[str, WireCommand] = {
        command_ids.BEGIN_SCENARIO: BeginScenarioCommand(engine),
        command_ids.END_SCENARIO: EndScenarioCommand(engine),
        command_ids.STEP_MATCHES: StepMatchesCommand(engine),
        command_ids.INVOKE: InvokeCommand(engine, step_id_parser=step_id_parser),
        command_ids.SNIPPET_TEXT: SnippetTextCommand(engine),
    }
    return MappingProxyType(
        {command: unordered[command] for command in command_ids.WIRE_COMMAND_IDS}
    )


def missing_command_ids(registry: CommandRegistry) -> tuple[str, ...]:
    return tuple(
        command for command in command_ids.WIRE_COMMAND_IDS if command not in registry
    )


def extra_command_ids(registry: CommandRegistry) -> tuple[str, ...]:
    return tuple(
        sorted(command for command in registry if command not in command_ids.WIRE_COMMAND_IDS)
    )


def is_registry_complete(registry: CommandRegistry) -> bool:
    return not missing_command_ids(registry) and not extra_command_ids(registry)


class Dispatcher:
    """Turns one decoded request into one response without ever raising."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def dispatch(self, request: JSONValue) -> JSONArray:
        if not isinstance(request, list) or not request or not isinstance(request[0], str):
            logger.warning("malformed request envelope: %r", request)
            return fail_response()
        name = request[0]
        command = self.registry.get(name)
        if command is None:
            logger.warning("unknown wire command %r", name)
            return fail_response()
        args = request[1] if len(request) > 1 else None
        try:
            response = command.run(args)
        except Exception as exc:
            logger.warning("wire command %s failed: %s", name, exc)
            logger.debug("wire command %s traceback", name, exc_info=True)
            return fail_response()
        logger.debug("wire command %s -> %r", name, response)
        return response
