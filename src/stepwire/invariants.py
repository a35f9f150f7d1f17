"""Invariant markers for wire argument decoding."""

from __future__ import annotations

from typing import NoReturn

from stepwire.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path that a well-formed request can never reach.

    The env payload is diagnostic metadata attached to the raised
    :class:`NeverThrown`.
    """
    raise NeverThrown(reason or "never() marker reached", context=env)

