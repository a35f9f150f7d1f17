"""Value types exchanged between the wire commands and the step engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Hashable, Iterable, Iterator, Sequence


@dataclass(frozen=True)
class SubMatch:
    value: str
    position: int


@dataclass(frozen=True)
class StepMatch:
    id: Hashable
    submatches: tuple[SubMatch, ...] = ()
    source: str = ""


@dataclass(frozen=True)
class MatchResult:
    """Ordered step definitions matching one piece of step text."""

    matches: tuple[StepMatch, ...] = ()

    @classmethod
    def of(cls, matches: Iterable[StepMatch]) -> MatchResult:
        return cls(matches=tuple(matches))

    def __iter__(self) -> Iterator[StepMatch]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)


@dataclass
class Table:
    """Tabular step argument: a header row of column names plus data rows.

    Row width is not checked against the header; engines that care validate
    it themselves.
    """

    columns: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def add_column(self, name: str) -> None:
        self.columns.append(name)

    def add_row(self, row: Sequence[str]) -> None:
        self.rows.append(list(row))

    def hashes(self) -> list[dict[str, str]]:
        return [dict(zip(self.columns, row)) for row in self.rows]


class InvokeArgs:
    """Positional arguments for one step invocation.

    Every table-shaped argument writes into the same shared ``table_arg``;
    the table sits at the position of the first table-shaped argument.
    """

    def __init__(self) -> None:
        self._args: list[str | Table] = []
        self._table: Table | None = None

    def add_arg(self, value: str) -> None:
        self._args.append(value)

    @property
    def table_arg(self) -> Table:
        if self._table is None:
            self._table = Table()
            self._args.append(self._table)
        return self._table

    def has_table(self) -> bool:
        return self._table is not None

    def arg(self, index: int) -> str | Table:
        return self._args[index]

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self) -> Iterator[str | Table]:
        return iter(self._args)

    def __repr__(self) -> str:
        return f"InvokeArgs({self._args!r})"


class InvokeResultType(StrEnum):
    SUCCESS = "success"
    PENDING = "pending"
    FAILURE = "failure"


@dataclass(frozen=True)
class InvokeResult:
    type: InvokeResultType
    description: str = ""

    @classmethod
    def success(cls) -> InvokeResult:
        return cls(InvokeResultType.SUCCESS)

    @classmethod
    def pending(cls, description: str = "") -> InvokeResult:
        return cls(InvokeResultType.PENDING, description)

    @classmethod
    def failure(cls, description: str) -> InvokeResult:
        return cls(InvokeResultType.FAILURE, description)
