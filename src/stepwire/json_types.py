"""JSON value types used at the wire boundary.

Requests and responses are plain JSON arrays; these aliases keep that value
space explicit instead of falling back to `object`/`Any`.
"""

from __future__ import annotations

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]
