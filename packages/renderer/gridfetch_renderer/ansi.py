"""SGR escape helpers for truecolor and bold output."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ColorRGB

CSI = "\033["
RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def fg(color: ColorRGB) -> str:
    return f"{CSI}38;2;{color.r};{color.g};{color.b}m"


def bold_fg(color: ColorRGB) -> str:
    return f"{CSI}1;38;2;{color.r};{color.g};{color.b}m"


def styled(text: str, color: ColorRGB | None = None, bold: bool = False, enabled: bool = True) -> str:
    """Wrap ``text`` in a color/bold prefix and a trailing reset.

    With ``enabled`` false the text is returned untouched, which is how
    ``--no-color`` output stays byte-identical to the escape-stripped form.
    """
    if not enabled or (color is None and not bold):
        return text
    if color is None:
        prefix = BOLD
    elif bold:
        prefix = bold_fg(color)
    else:
        prefix = fg(color)
    return f"{prefix}{text}{RESET}"


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)
