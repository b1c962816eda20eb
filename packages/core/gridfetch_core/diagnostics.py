"""Doctor payload for local support output."""

from __future__ import annotations

import platform
import re
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

try:
    import psutil
except Exception:  # pragma: no cover
    psutil = None

from gridfetch_renderer import TerminalUnavailableError, capture_frame, list_themes

from .config import AppConfig, config_path


_SECRET_RE = re.compile(r"(token|secret|password|apikey|api_key|auth)", re.IGNORECASE)


def redact(value: Any) -> Any:
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for k, v in value.items():
            if _SECRET_RE.search(k):
                out[k] = "***REDACTED***"
            else:
                out[k] = redact(v)
        return out
    if isinstance(value, list):
        return [redact(v) for v in value]
    return value


def _terminal_payload() -> dict[str, Any]:
    try:
        frame = capture_frame()
    except TerminalUnavailableError as exc:
        return {"available": False, "error": str(exc)}
    return {"available": True, "columns": frame.columns}


def _collector_payload() -> dict[str, Any]:
    if psutil is None:
        return {"psutil": None, "battery": False, "cpu_freq": False}
    try:
        battery = psutil.sensors_battery() is not None
    except Exception:
        battery = False
    try:
        cpu_freq = psutil.cpu_freq() is not None
    except Exception:
        cpu_freq = False
    return {"psutil": psutil.__version__, "battery": battery, "cpu_freq": cpu_freq}


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "config_path": str(config_path()),
        "config": redact(asdict(cfg)),
        "terminal": _terminal_payload(),
        "collectors": _collector_payload(),
        "themes": list_themes(),
    }
