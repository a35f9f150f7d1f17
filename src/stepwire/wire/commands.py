from __future__ import annotations

from typing import Hashable, Protocol

from stepwire.config import StepIdParser
from stepwire.engine import StepEngine
from stepwire.invariants import never
from stepwire.json_types import JSONArray, JSONObject, JSONValue
from stepwire.model import InvokeArgs, InvokeResult, InvokeResultType, StepMatch, Table
from stepwire.schema import (
    BeginScenarioRequest,
    EndScenarioRequest,
    InvokeArgDTO,
    InvokeRequest,
    SnippetTextRequest,
    StepMatchDTO,
    StepMatchesRequest,
    SubMatchDTO,
)
from stepwire.wire import command_ids
from stepwire.wire.responses import (
    fail_response,
    fail_with_message,
    pending_response,
    success_response,
)


class WireCommand(Protocol):
    def run(self, args: JSONValue | None) -> JSONArray: ...


def _require_payload(payload: JSONValue | None, *, command: str) -> JSONObject:
    if payload is None:
        never("missing command payload", command=command)
    if not isinstance(payload, dict):
        never(
            "invalid command payload type",
            command=command,
            payload_type=type(payload).__name__,
        )
    return payload


class BeginScenarioCommand:
    def __init__(self, engine: StepEngine) -> None:
        self.engine = engine

    def run(self, args: JSONValue | None) -> JSONArray:
        tags: list[str] = []
        if args is not None:
            payload = _require_payload(args, command=command_ids.BEGIN_SCENARIO)
            tags = list(BeginScenarioRequest.model_validate(payload).tags)
        self.engine.begin_scenario(tags)
        return success_response()


class EndScenarioCommand:
    def __init__(self, engine: StepEngine) -> None:
        self.engine = engine

    def run(self, args: JSONValue | None) -> JSONArray:
        if args is not None:
            payload = _require_payload(args, command=command_ids.END_SCENARIO)
            if EndScenarioRequest.model_validate(payload).tags is not None:
                return fail_response()
        self.engine.end_scenario()
        return success_response()


class StepMatchesCommand:
    def __init__(self, engine: StepEngine) -> None:
        self.engine = engine

    def run(self, args: JSONValue | None) -> JSONArray:
        payload = _require_payload(args, command=command_ids.STEP_MATCHES)
        request = StepMatchesRequest.model_validate(payload)
        matches = self.engine.step_matches(request.name_to_match)
        return success_response([format_step_match(match) for match in matches])


def format_step_match(match: StepMatch) -> JSONObject:
    return StepMatchDTO(
        id=str(match.id),
        args=[
            SubMatchDTO(val=submatch.value, pos=submatch.position)
            for submatch in match.submatches
        ],
        source=match.source,
    ).model_dump()


class SnippetTextCommand:
    def __init__(self, engine: StepEngine) -> None:
        self.engine = engine

    def run(self, args: JSONValue | None) -> JSONArray:
        payload = _require_payload(args, command=command_ids.SNIPPET_TEXT)
        request = SnippetTextRequest.model_validate(payload)
        return success_response(
            self.engine.snippet_text(request.step_keyword, request.step_name)
        )


class InvokeCommand:
    def __init__(self, engine: StepEngine, *, step_id_parser: StepIdParser = int) -> None:
        self.engine = engine
        self.step_id_parser = step_id_parser

    def run(self, args: JSONValue | None) -> JSONArray:
        payload = _require_payload(args, command=command_ids.INVOKE)
        request = InvokeRequest.model_validate(payload)
        step_id = self._step_id(request.id)
        result = self.engine.invoke(step_id, build_invoke_args(request.args))
        return format_invoke_result(result)

    def _step_id(self, text: str) -> Hashable:
        try:
            return self.step_id_parser(text)
        except (TypeError, ValueError):
            never("invalid step id", command=command_ids.INVOKE, id=text)


def build_invoke_args(raw_args: list[InvokeArgDTO]) -> InvokeArgs:
    """Decode invoke arguments, discriminating on JSON type.

    Strings are positional arguments; arrays are tables, all folded into the
    single shared table of the invocation.
    """
    args = InvokeArgs()
    for raw_arg in raw_args:
        if isinstance(raw_arg, str):
            args.add_arg(raw_arg)
        elif isinstance(raw_arg, list):
            fill_table_arg(args.table_arg, raw_arg)
        else:
            never("invalid invoke argument", arg_type=type(raw_arg).__name__)
    return args


def fill_table_arg(table: Table, table_rows: list[list[str]]) -> None:
    for index, row in enumerate(table_rows):
        # The first row holds the column names.
        if index == 0:
            for name in row:
                table.add_column(name)
        else:
            table.add_row(row)


def format_invoke_result(result: InvokeResult) -> JSONArray:
    if result.type == InvokeResultType.SUCCESS:
        return success_response()
    if result.type == InvokeResultType.PENDING:
        return pending_response(result.description)
    if result.type == InvokeResultType.FAILURE:
        return fail_with_message(result.description)
    never("unknown invoke result type", result_type=str(result.type))
