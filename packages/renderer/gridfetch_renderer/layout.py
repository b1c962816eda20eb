"""Fixed-width row composition: split rows, centered titles and gradient rules.

Every function here is pure in its arguments. ``frame_width`` is the column
count of the :class:`~gridfetch_renderer.models.TerminalFrame` captured at the
start of the render pass. Column boundaries are resolved first from the
display widths of the inputs, then the strings are emitted whole so wide and
zero-width glyphs never shift the cells that follow them.

When the inputs fit, the escape-stripped result occupies exactly
``frame_width`` cells. Inputs that do not fit are never clipped; the row then
overflows to the right.
"""

from __future__ import annotations

import math

from .ansi import RESET, fg
from .models import ColorRGB, RenderedLine
from .width import display_width

__all__ = ["flex_between", "gradient_delim", "side_padding", "subtitle"]


def side_padding(frame_width: int, coverage_percent: int) -> int:
    return frame_width * (100 - coverage_percent) // 200


def flex_between(left: str, right: str, coverage_percent: int, frame_width: int) -> RenderedLine:
    """Pin ``left`` and ``right`` to the edges of the inner region of a row.

    The inner region spans ``coverage_percent`` of the row; the rest is split
    evenly into leading and trailing blanks. A coverage of 0 yields ``""``.
    """
    if coverage_percent == 0:
        return ""

    side = side_padding(frame_width, coverage_percent)
    left_w = display_width(left)
    right_w = display_width(right)
    right_start = frame_width - side - right_w
    fill = max(0, right_start - (side + left_w))

    return f"{' ' * side}{left}{' ' * fill}{right}{' ' * side}"


def subtitle(text: str, frame_width: int) -> RenderedLine:
    text_w = display_width(text)
    start = max(0, (frame_width - text_w) // 2)
    trailing = max(0, frame_width - start - text_w)
    return f"{' ' * start}{text}{' ' * trailing}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _lerp_channel(start: int, end: int, t: float) -> int:
    return max(0, min(255, _round_half_up(start + (end - start) * t)))


def _lerp(start: ColorRGB, end: ColorRGB, t: float) -> ColorRGB:
    return ColorRGB(
        _lerp_channel(start.r, end.r, t),
        _lerp_channel(start.g, end.g, t),
        _lerp_channel(start.b, end.b, t),
    )


def gradient_colors(start: ColorRGB, end: ColorRGB, samples: int) -> list[ColorRGB]:
    if samples <= 0:
        return []
    if samples == 1:
        return [_lerp(start, end, 0.0)]
    return [_lerp(start, end, k / (samples - 1)) for k in range(samples)]


def gradient_delim(
    glyph: str,
    start: ColorRGB,
    end: ColorRGB,
    coverage_percent: int,
    frame_width: int,
    color: bool = True,
) -> RenderedLine:
    """Build a centered rule of ``glyph`` fading from ``start`` to ``end``.

    The rule spans ``round(frame_width * coverage_percent / 100)`` columns.
    One color sample is taken per emitted glyph: a two-cell glyph covers two
    columns with a single color, and a span column left over by a wide glyph
    is blank.
    """
    length = (frame_width * coverage_percent * 2 + 100) // 200
    padding = (frame_width - length) // 2
    glyph_w = max(1, display_width(glyph))
    units = length // glyph_w
    remainder = length - units * glyph_w
    trailing = frame_width - padding - length

    parts = [" " * padding]
    for c in gradient_colors(start, end, units):
        parts.append(f"{fg(c)}{glyph}{RESET}" if color else glyph)
    parts.append(" " * (remainder + trailing))
    return "".join(parts)
