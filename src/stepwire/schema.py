from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, StrictStr


class BeginScenarioRequest(BaseModel):
    tags: List[StrictStr]


class EndScenarioRequest(BaseModel):
    tags: Optional[Any] = None


class StepMatchesRequest(BaseModel):
    name_to_match: StrictStr


class SnippetTextRequest(BaseModel):
    step_keyword: StrictStr
    step_name: StrictStr


TableRowDTO = List[StrictStr]
InvokeArgDTO = Union[StrictStr, List[TableRowDTO]]


class InvokeRequest(BaseModel):
    id: StrictStr
    args: List[InvokeArgDTO]


class SubMatchDTO(BaseModel):
    val: str
    pos: int


class StepMatchDTO(BaseModel):
    id: str
    args: List[SubMatchDTO] = []
    source: str
