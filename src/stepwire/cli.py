from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from stepwire import server
from stepwire.config import merge_settings
from stepwire.engine import load_engine
from stepwire.exceptions import ConfigError, EngineLoadError
from stepwire.logging_setup import configure_logging
from stepwire.wire import command_ids

app = typer.Typer(add_completion=False)


@app.command()
def serve(
    engine: Optional[str] = typer.Option(
        None,
        "--engine",
        help="Step engine as 'module:attribute' (an engine or a zero-argument factory).",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to stepwire.toml."),
    root: Path = typer.Option(Path("."), "--root"),
    step_id: Optional[str] = typer.Option(
        None, "--step-id", help="How invoke ids are parsed: 'int' or 'str'."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
) -> None:
    """Serve the wire protocol on stdin/stdout until stdin closes."""
    try:
        settings = merge_settings(
            root=root,
            config_path=config,
            engine=engine,
            step_id=step_id,
            log_level=log_level,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(settings.log_level)
    if settings.engine is None:
        raise typer.BadParameter(
            "no step engine configured; pass --engine or set [wire].engine",
            param_hint="--engine",
        )
    try:
        step_engine = load_engine(settings.engine)
    except EngineLoadError as exc:
        raise typer.BadParameter(str(exc), param_hint="--engine") from exc
    server.start(step_engine, settings=settings)


@app.command("commands")
def list_commands() -> None:
    """List the wire command names this server answers."""
    for command in command_ids.WIRE_COMMAND_IDS:
        typer.echo(command)


def main() -> None:  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()  # pragma: no cover
