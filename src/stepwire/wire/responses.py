"""Response envelopes: a status tag followed by command-specific payload."""

from __future__ import annotations

from stepwire.json_types import JSONArray, JSONValue

SUCCESS = "success"
FAIL = "fail"
PENDING = "pending"


def success_response(*payload: JSONValue) -> JSONArray:
    return [SUCCESS, *payload]


def fail_response() -> JSONArray:
    return [FAIL]


def fail_with_message(message: str) -> JSONArray:
    return [FAIL, {"message": message}]


def pending_response(description: str = "") -> JSONArray:
    if description:
        return [PENDING, description]
    return [PENDING]
