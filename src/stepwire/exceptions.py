"""Exception types for stepwire."""

from __future__ import annotations


class NeverThrown(RuntimeError):
    """Raised by :func:`stepwire.invariants.never` when a contract is violated.

    Inside the wire dispatcher these are contained and answered with a bare
    fail envelope; the ``context`` mapping only ever reaches the log.
    """

    def __init__(self, message: str, *, context: dict[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        if not self.context:
            return self.reason
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.reason} ({details})"


class ConfigError(RuntimeError):
    pass


class EngineLoadError(RuntimeError):
    pass
