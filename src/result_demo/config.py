"""Application configuration for the result demo.

Settings come from an optional YAML file at ``<project_root>/config/config.yaml``.
The project root is the nearest ancestor holding the marker file
``.result_demo-project``. Every key is optional; a missing file means defaults.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json
import logging

import yaml
from jsonschema import Draft202012Validator

from result_demo.errors import Ok, Err, Result, AppError, ErrorKind

LOG_CONFIG = logging.getLogger("result_demo.config")

PROJECT_MARKER = ".result_demo-project"
_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "app_config_schema.json"


@dataclass(frozen=True)
class AppConfig:
    dividend: int = 10
    divisor: int = 0
    window_title: str = "Result"
    label_text: str = "Hello, world!"
    icon_name: str = "globe"
    log_level: str = "INFO"


def find_project_root(start: Path) -> Path:
    """Walk upwards from `start` to the directory holding the project marker."""
    start = start.resolve()
    for p in [start] + list(start.parents):
        if (p / PROJECT_MARKER).exists():
            return p
    return start


def default_config_path() -> Path:
    return find_project_root(Path(__file__).parent) / "config" / "config.yaml"


def _load_schema() -> dict:
    return json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))


def _from_mapping(data: dict) -> AppConfig:
    demo = data.get("demo") or {}
    window = data.get("window") or {}
    logging_cfg = data.get("logging") or {}
    base = AppConfig()
    return AppConfig(
        dividend=int(demo.get("dividend", base.dividend)),
        divisor=int(demo.get("divisor", base.divisor)),
        window_title=window.get("title", base.window_title),
        label_text=window.get("label", base.label_text),
        icon_name=window.get("icon", base.icon_name),
        log_level=logging_cfg.get("level", base.log_level),
    )


def load_app_config(path: Optional[Path] = None) -> Result[AppConfig, AppError]:
    """
    Load and validate the YAML configuration at `path` (default: project config).

    A missing file is not an error. Unreadable YAML, a non-mapping document or
    a schema violation come back as Err(CONFIG) with the detail in `source`.
    """
    cfg_path = Path(path) if path is not None else default_config_path()
    if not cfg_path.exists():
        LOG_CONFIG.debug("No config file at %s; using defaults", cfg_path)
        return Ok(AppConfig())

    try:
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as ex:
        return Err(AppError(ErrorKind.CONFIG, f"Failed to read config: {cfg_path}", str(ex)))

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return Err(AppError(ErrorKind.CONFIG, f"Config must be a mapping: {cfg_path}"))

    try:
        schema = _load_schema()
        Draft202012Validator.check_schema(schema)
        errors = sorted(Draft202012Validator(schema).iter_errors(data), key=lambda e: list(e.path))
    except Exception as ex:
        return Err(AppError(ErrorKind.CONFIG, "Config schema could not be loaded", str(ex)))
    if errors:
        detail = "; ".join(
            f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors
        )
        return Err(AppError(ErrorKind.CONFIG, "Config validation failed", detail))

    LOG_CONFIG.info("Loaded config from %s", cfg_path)
    return Ok(_from_mapping(data))
