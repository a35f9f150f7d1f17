"""stepwire package root."""

from stepwire.engine import StepEngine, load_engine
from stepwire.model import (
    InvokeArgs,
    InvokeResult,
    InvokeResultType,
    MatchResult,
    StepMatch,
    SubMatch,
    Table,
)

__all__ = [
    "__version__",
    "InvokeArgs",
    "InvokeResult",
    "InvokeResultType",
    "MatchResult",
    "StepEngine",
    "StepMatch",
    "SubMatch",
    "Table",
    "load_engine",
]

__version__ = "0.1.0"
