"""Core app services for settings, logging, and diagnostics."""

from .config import AppConfig, config_path, config_root, load_config, save_config
from .logging_setup import configure_logging, get_logger

try:  # Keep import side effects tolerant in minimal test environments.
    from .diagnostics import build_doctor_payload
except Exception:  # pragma: no cover
    build_doctor_payload = None  # type: ignore[assignment]

__all__ = [
    "AppConfig",
    "build_doctor_payload",
    "config_path",
    "config_root",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
]
