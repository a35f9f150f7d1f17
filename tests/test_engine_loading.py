from __future__ import annotations

import pytest

from stepwire.engine import StepEngine, load_engine
from stepwire.exceptions import EngineLoadError
from tests import engine_helpers


def test_load_engine_calls_factories() -> None:
    engine = load_engine("tests.engine_helpers:build_engine")
    assert isinstance(engine, engine_helpers.RecordingEngine)
    assert isinstance(engine, StepEngine)


def test_load_engine_instantiates_classes() -> None:
    engine = load_engine("tests.engine_helpers:RecordingEngine")
    assert type(engine) is engine_helpers.RecordingEngine


def test_load_engine_returns_instances_as_is() -> None:
    assert load_engine("tests.engine_helpers:SHARED_ENGINE") is engine_helpers.SHARED_ENGINE


@pytest.mark.parametrize(
    "target",
    [
        "tests.engine_helpers",
        ":build_engine",
        "tests.engine_helpers:",
        "tests.no_such_module:engine",
        "tests.engine_helpers:missing",
        "tests.engine_helpers:NOT_AN_ENGINE",
        "tests.engine_helpers:failing_factory",
        "tests.engine_helpers:EngineNeedingArguments",
    ],
)
def test_load_engine_errors(target: str) -> None:
    with pytest.raises(EngineLoadError):
        load_engine(target)


def test_load_engine_wraps_factory_errors() -> None:
    with pytest.raises(EngineLoadError, match="engine database unavailable") as excinfo:
        load_engine("tests.engine_helpers:failing_factory")
    assert isinstance(excinfo.value.__cause__, RuntimeError)
