"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

from .width import display_width

RenderedLine = str


@dataclass(frozen=True)
class TerminalFrame:
    columns: int

    def __post_init__(self) -> None:
        if self.columns < 0:
            raise ValueError("Terminal columns must be non-negative")


@dataclass(frozen=True)
class StyledRun:
    text: str

    @property
    def display_width(self) -> int:
        return display_width(self.text)


@dataclass(frozen=True)
class ColorRGB:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: str) -> ColorRGB:
        raw = value.lstrip("#")
        if len(raw) != 6:
            raise ValueError(f"Expected #RRGGBB color, got {value!r}")
        return cls(*(int(raw[i : i + 2], 16) for i in (0, 2, 4)))

    @classmethod
    def from_int(cls, value: int) -> ColorRGB:
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class GradientSpec:
    start: ColorRGB
    end: ColorRGB
    coverage_percent: int

    def __post_init__(self) -> None:
        if not 0 <= self.coverage_percent <= 100:
            raise ValueError(f"Coverage percent out of range: {self.coverage_percent}")
