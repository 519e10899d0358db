"""Configuration utilities for the :mod:`applicable` command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class DemoConfig:
    """Inputs for the usage scenarios run by ``applicable demo``."""

    base_path: str = "."
    segments: List[str] = field(default_factory=lambda: ["src", "lib.rs"])
    size: str = "Big"


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{path} must contain a mapping")
    return data


def _coerce_segments(value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise TypeError(f"demo.segments must be a string or a list, got {type(value).__name__}")
    return [str(s) for s in value]


def load_app_config(path: Optional[Path] = None) -> AppConfig:
    """Load :class:`AppConfig` from ``path``, or defaults when ``path`` is ``None``."""

    if path is None:
        return AppConfig()

    raw = load_yaml(Path(path))
    logging_cfg = raw.get("logging") or {}
    demo = raw.get("demo") or {}
    defaults = DemoConfig()

    return AppConfig(
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        demo=DemoConfig(
            base_path=str(demo.get("base_path", defaults.base_path)),
            segments=_coerce_segments(demo.get("segments"), defaults.segments),
            size=str(demo.get("size", defaults.size)),
        ),
    )


__all__ = [
    "LoggingConfig",
    "DemoConfig",
    "AppConfig",
    "load_yaml",
    "load_app_config",
]
