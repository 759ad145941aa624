"""Configuration loading for the splitter.

Values are resolved in increasing precedence:

* ``SplitterConfig`` defaults
* a YAML file, either flat or nested under a ``splitter:`` section::

      splitter:
        chunk_size: 500
        chunk_overlap: 100
        mode: characters

* environment variables, after loading ``.env`` if present:

  * ``TEXT_SPLITTER_CHUNK_SIZE``
  * ``TEXT_SPLITTER_CHUNK_OVERLAP``
  * ``TEXT_SPLITTER_MODE``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .schema.config import (
    InvalidConfiguration,
    SplitterConfig,
    parse_mode,
    validate_chunk_params,
)

ENV_PREFIX = "TEXT_SPLITTER_"


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}") from None


def _read_yaml(config_path: Path) -> dict[str, Any]:
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{config_path}: expected a mapping at top level")
    section = data.get("splitter", data)
    if not isinstance(section, dict):
        raise InvalidConfiguration(f"{config_path}: 'splitter' must be a mapping")
    return section


def load_settings(
    config_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> SplitterConfig:
    """Resolve a ``SplitterConfig`` from YAML and environment overrides."""

    if env_path is None:
        env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    defaults = SplitterConfig()
    values: dict[str, Any] = {
        "chunk_size": defaults.chunk_size,
        "chunk_overlap": defaults.chunk_overlap,
        "mode": defaults.mode,
    }

    if config_path is not None:
        section = _read_yaml(Path(config_path))
        for key in values:
            if section.get(key) is not None:
                values[key] = section[key]

    for key in values:
        env_value = os.getenv(ENV_PREFIX + key.upper())
        if env_value:
            values[key] = env_value

    chunk_size = _as_int("chunk_size", values["chunk_size"])
    chunk_overlap = _as_int("chunk_overlap", values["chunk_overlap"])
    mode = parse_mode(values["mode"])
    validate_chunk_params(chunk_size, chunk_overlap)
    return SplitterConfig(chunk_size=chunk_size, chunk_overlap=chunk_overlap, mode=mode)
