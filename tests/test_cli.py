from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from stepwire import cli
from stepwire.wire import command_ids

_CLEAN_ENV = {"STEPWIRE_ENGINE": None, "STEPWIRE_STEP_ID": None, "STEPWIRE_LOG_LEVEL": None}


def _invoke(args: list[str], *, input_text: str | None = None):
    runner = CliRunner()
    return runner.invoke(cli.app, args, env=_CLEAN_ENV, input=input_text)


def test_cli_commands_lists_wire_commands() -> None:
    result = _invoke(["commands"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == list(command_ids.WIRE_COMMAND_IDS)


def test_cli_serve_runs_the_wire_loop(tmp_path: Path) -> None:
    requests = [
        ["begin_scenario", {"tags": ["@cli"]}],
        ["step_matches", {"name_to_match": "anything"}],
        ["snippet_text", {"step_keyword": "When", "step_name": "x"}],
        "garbage",
        ["end_scenario"],
    ]
    result = _invoke(
        [
            "serve",
            "--engine",
            "tests.engine_helpers:RecordingEngine",
            "--root",
            str(tmp_path),
            "--log-level",
            "CRITICAL",
        ],
        input_text="".join(json.dumps(request) + "\n" for request in requests),
    )
    assert result.exit_code == 0, result.output
    assert [json.loads(line) for line in result.stdout.splitlines()] == [
        ["success"],
        ["success", []],
        ["success", 'WHEN("^x$") { pending(); }'],
        ["fail"],
        ["success"],
    ]


def test_cli_serve_reads_engine_from_config(tmp_path: Path) -> None:
    (tmp_path / "stepwire.toml").write_text(
        '[wire]\nengine = "tests.engine_helpers:build_engine"\nlog_level = "CRITICAL"\n',
        encoding="utf-8",
    )
    result = _invoke(["serve", "--root", str(tmp_path)], input_text='["end_scenario"]\n')
    assert result.exit_code == 0, result.output
    assert result.stdout == '["success"]\n'


def test_cli_serve_requires_an_engine(tmp_path: Path) -> None:
    result = _invoke(["serve", "--root", str(tmp_path)], input_text="")
    assert result.exit_code == 2


def test_cli_serve_rejects_unloadable_engine(tmp_path: Path) -> None:
    result = _invoke(
        ["serve", "--root", str(tmp_path), "--engine", "tests.engine_helpers:missing"],
        input_text="",
    )
    assert result.exit_code == 2


def test_cli_serve_rejects_bad_step_id_kind(tmp_path: Path) -> None:
    result = _invoke(
        [
            "serve",
            "--root",
            str(tmp_path),
            "--engine",
            "tests.engine_helpers:build_engine",
            "--step-id",
            "uuid",
        ],
        input_text="",
    )
    assert result.exit_code == 2


def test_cli_serve_rejects_failing_engine_factory(tmp_path: Path) -> None:
    result = _invoke(
        ["serve", "--root", str(tmp_path), "--engine", "tests.engine_helpers:failing_factory"],
        input_text="",
    )
    assert result.exit_code == 2
    assert not isinstance(result.exception, RuntimeError)
