from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import Callable, Hashable, Mapping, TypeAlias
import tomllib

from stepwire.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "stepwire.toml"
WIRE_SECTION = "wire"

ENV_ENGINE = "STEPWIRE_ENGINE"
ENV_STEP_ID = "STEPWIRE_STEP_ID"
ENV_LOG_LEVEL = "STEPWIRE_LOG_LEVEL"

STEP_ID_KINDS: tuple[str, ...] = ("int", "str")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

StepIdParser: TypeAlias = Callable[[str], Hashable]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WireSettings:
    engine: str | None = None
    step_id: str = "int"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        step_id = str(self.step_id).strip().lower()
        if step_id not in STEP_ID_KINDS:
            raise ConfigError(
                f"invalid step_id {self.step_id!r}; expected one of {', '.join(STEP_ID_KINDS)}"
            )
        log_level = str(self.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"invalid log_level {self.log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
            )
        engine = self.engine.strip() if isinstance(self.engine, str) else None
        object.__setattr__(self, "step_id", step_id)
        object.__setattr__(self, "log_level", log_level)
        object.__setattr__(self, "engine", engine or None)


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        logger.warning("cannot read config file %s", path)
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("ignoring malformed config file %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def wire_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get(WIRE_SECTION, {})
    return section if isinstance(section, dict) else {}


def env_overrides(environ: Mapping[str, str] | None = None) -> TomlTable:
    env = os.environ if environ is None else environ
    overrides: TomlTable = {}
    for key, env_name in (
        ("engine", ENV_ENGINE),
        ("step_id", ENV_STEP_ID),
        ("log_level", ENV_LOG_LEVEL),
    ):
        value = env.get(env_name, "").strip()
        if value:
            overrides[key] = value
    return overrides


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def merge_settings(
    *,
    root: Path | None = None,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    **explicit: TomlValue,
) -> WireSettings:
    """Layer config file, environment and explicit values, later winning."""
    merged = merge_payload(env_overrides(environ), wire_defaults(root, config_path))
    merged = merge_payload(explicit, merged)
    known = {key: merged[key] for key in ("engine", "step_id", "log_level") if key in merged}
    return WireSettings(**known)


def step_id_parser(settings: WireSettings) -> StepIdParser:
    if settings.step_id == "str":
        return str
    return _parse_int_step_id


def _parse_int_step_id(text: str) -> int:
    return int(text.strip())
