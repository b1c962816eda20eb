"""Terminal cell width measurement."""

from __future__ import annotations

import unicodedata

from wcwidth import wcwidth

from .ansi import strip_ansi

__all__ = ["char_width", "display_width", "visible_width"]

# Default_Ignorable_Code_Point ranges (DerivedCoreProperties.txt).
_IGNORABLE = (
    (0x00AD, 0x00AD),
    (0x034F, 0x034F),
    (0x061C, 0x061C),
    (0x115F, 0x1160),
    (0x17B4, 0x17B5),
    (0x180B, 0x180F),
    (0x200B, 0x200F),
    (0x202A, 0x202E),
    (0x2060, 0x206F),
    (0x3164, 0x3164),
    (0xFE00, 0xFE0F),
    (0xFEFF, 0xFEFF),
    (0xFFA0, 0xFFA0),
    (0xFFF0, 0xFFF8),
    (0x1BCA0, 0x1BCA3),
    (0x1D173, 0x1D17A),
    (0xE0000, 0xE0FFF),
)


def _is_ignorable(cp: int) -> bool:
    return any(lo <= cp <= hi for lo, hi in _IGNORABLE)


def char_width(ch: str) -> int:
    """Return the number of terminal cells one scalar value occupies.

    Private-use code points are the icon glyphs of patched fonts and render
    two cells wide. Non-printing control characters and default-ignorable
    code points advance nothing.
    """
    if _is_ignorable(ord(ch)):
        return 0
    if unicodedata.category(ch) == "Co":
        return 2
    w = wcwidth(ch)
    if w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    # Per scalar value, not per grapheme cluster: a ZWJ sequence is the sum of its parts.
    return sum(char_width(ch) for ch in text)


def visible_width(text: str) -> int:
    return display_width(strip_ansi(text))
