"""Terminal frame capture."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from .models import TerminalFrame


class TerminalUnavailableError(RuntimeError):
    """Raised when no column count can be determined for the output terminal."""


def _columns_from_env() -> int | None:
    raw = os.environ.get("COLUMNS", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def capture_frame(streams: tuple[TextIO, ...] | None = None) -> TerminalFrame:
    """Snapshot the terminal width once for a render pass.

    ``COLUMNS`` wins when set; otherwise the first stream attached to a
    terminal is asked. There is no fallback width.
    """
    env_cols = _columns_from_env()
    if env_cols is not None:
        return TerminalFrame(columns=env_cols)

    errors: list[str] = []
    for stream in streams if streams is not None else (sys.stdout, sys.stderr):
        try:
            fd = stream.fileno()
            size = os.get_terminal_size(fd)
        except (AttributeError, OSError, ValueError) as exc:
            errors.append(f"{getattr(stream, 'name', stream)!s}: {exc}")
            continue
        if size.columns <= 0:
            errors.append(f"{getattr(stream, 'name', stream)!s}: reports {size.columns} columns")
            continue
        return TerminalFrame(columns=size.columns)

    detail = "; ".join(errors) if errors else "no streams to query"
    raise TerminalUnavailableError(f"terminal size unavailable ({detail})")
