from __future__ import annotations

import importlib
import inspect
import logging
from typing import Hashable, Iterable, Protocol, Sequence, runtime_checkable

from stepwire.exceptions import EngineLoadError
from stepwire.model import InvokeArgs, InvokeResult, StepMatch

logger = logging.getLogger(__name__)


@runtime_checkable
class StepEngine(Protocol):
    """Execution boundary the wire commands call into."""

    def begin_scenario(self, tags: Sequence[str]) -> None: ...

    def end_scenario(self) -> None: ...

    def step_matches(self, name: str) -> Iterable[StepMatch]: ...

    def snippet_text(self, keyword: str, name: str) -> str: ...

    def invoke(self, step_id: Hashable, args: InvokeArgs) -> InvokeResult: ...


def load_engine(target: str) -> StepEngine:
    """Resolve ``"package.module:attribute"`` into a step engine.

    A callable attribute that is not itself an engine is treated as a factory
    and called without arguments.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise EngineLoadError(f"engine must be given as 'module:attribute', got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise EngineLoadError(f"cannot import engine module {module_name!r}: {exc}") from exc
    candidate = module
    for part in attribute.split("."):
        try:
            candidate = getattr(candidate, part)
        except AttributeError as exc:
            raise EngineLoadError(
                f"engine module {module_name!r} has no attribute {attribute!r}"
            ) from exc
    if inspect.isclass(candidate) or (
        callable(candidate) and not isinstance(candidate, StepEngine)
    ):
        try:
            candidate = candidate()
        except Exception as exc:
            raise EngineLoadError(f"engine factory {target!r} failed: {exc}") from exc
    if not isinstance(candidate, StepEngine):
        raise EngineLoadError(
            f"{target!r} does not provide a step engine "
            f"(got {type(candidate).__name__})"
        )
    logger.debug("loaded step engine %s from %s", type(candidate).__name__, target)
    return candidate
