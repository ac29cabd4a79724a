"""Core app services for settings and logging."""

from .config import AppConfig, config_path, config_root, load_config, save_config
from .logging_setup import configure_logging, get_logger, log_dir

__all__ = [
    "AppConfig",
    "config_path",
    "config_root",
    "configure_logging",
    "get_logger",
    "load_config",
    "log_dir",
    "save_config",
]
