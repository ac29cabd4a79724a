"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
HOME_ENV = "ITERMCOLORS_HOME"


@dataclass
class InputConfig:
    default_path: str = "iceberg.itermcolors"


@dataclass
class OutputConfig:
    heading: bool = True
    path: str | None = None


@dataclass
class PreviewConfig:
    swatch: int = 48
    gap: int = 8
    path: str = "scheme-preview.png"


@dataclass
class LoggingConfig:
    keep_log_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    override = os.environ.get(HOME_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "itermcolors"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "itermcolors"
    return Path.home() / ".config" / "itermcolors"


def config_path() -> Path:
    return config_root() / "config.json"


def _accepts(default: Any, value: Any) -> bool:
    if default is None:
        return value is None or isinstance(value, str)
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k) and _accepts(getattr(defaults, k), v):
            setattr(defaults, k, v)
    return defaults


def _normalize_input(cfg: AppConfig) -> None:
    if not cfg.input.default_path.strip():
        cfg.input.default_path = InputConfig.default_path


def _normalize_preview(cfg: AppConfig) -> None:
    cfg.preview.swatch = max(8, min(256, int(cfg.preview.swatch)))
    cfg.preview.gap = max(0, min(64, int(cfg.preview.gap)))
    if not cfg.preview.path:
        cfg.preview.path = PreviewConfig.path


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))
    cfg.logging.console = bool(cfg.logging.console)


def _version(value: Any) -> int:
    return value if _accepts(CONFIG_VERSION, value) else CONFIG_VERSION


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_version(raw.get("config_version")),
        input=_merge(InputConfig, raw.get("input", {})),
        output=_merge(OutputConfig, raw.get("output", {})),
        preview=_merge(PreviewConfig, raw.get("preview", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_input(cfg)
    _normalize_preview(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
