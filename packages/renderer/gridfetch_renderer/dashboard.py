"""Dashboard text composer for truecolor terminals."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ansi import RESET, styled
from .layout import flex_between, gradient_delim, subtitle
from .models import GradientSpec, TerminalFrame
from .themes import ThemeConfig, get_theme


@dataclass(frozen=True)
class DashboardSection:
    title: str
    rows: tuple[tuple[str, str], ...]
    icon: str | None = None


@dataclass(frozen=True)
class DashboardData:
    identity: str
    os_label: str
    sections: tuple[DashboardSection, ...] = field(default_factory=tuple)
    identity_icon: str | None = None


@dataclass(frozen=True)
class LayoutOptions:
    row_coverage: int = 50
    header_coverage: int = 50
    rule_coverage: int = 50


class DashboardRenderer:
    """Lays out header, gradient rule and info sections for one frame."""

    def __init__(
        self,
        theme: ThemeConfig | str | None = None,
        options: LayoutOptions | None = None,
        color: bool = True,
    ) -> None:
        self.theme = theme if isinstance(theme, ThemeConfig) else get_theme(theme)
        self.options = options or LayoutOptions()
        self.color = color

    def header(self, frame: TerminalFrame, left: str, right: str) -> str:
        line = flex_between(left, right, self.options.header_coverage, frame.columns)
        return styled(line, self.theme.color("header"), bold=True, enabled=self.color)

    def rule(self, frame: TerminalFrame) -> str:
        spec = GradientSpec(self.theme.color("rule_start"), self.theme.color("rule_end"), self.options.rule_coverage)
        return gradient_delim(
            self.theme.rule_glyph,
            spec.start,
            spec.end,
            spec.coverage_percent,
            frame.columns,
            color=self.color,
        )

    def section(self, frame: TerminalFrame, section: DashboardSection) -> list[str]:
        title = f"{section.icon} {section.title}" if section.icon else section.title
        lines = [styled(subtitle(title, frame.columns), self.theme.color("section_title"), bold=True, enabled=self.color)]
        row_color = self.theme.color("row_text")
        for label, value in section.rows:
            row = flex_between(label, value, self.options.row_coverage, frame.columns)
            lines.append(styled(row, row_color, enabled=self.color))
        return lines

    def render_lines(self, frame: TerminalFrame, data: DashboardData) -> list[str]:
        identity = f"{data.identity_icon} {data.identity}" if data.identity_icon else data.identity
        lines = [self.header(frame, identity, data.os_label), self.rule(frame)]
        for idx, section in enumerate(data.sections):
            if idx:
                lines.append("")
            lines.extend(self.section(frame, section))
        return lines

    def render(self, frame: TerminalFrame, data: DashboardData) -> str:
        body = "".join(f"{line}\n" for line in self.render_lines(frame, data))
        return f"{body}{RESET}" if self.color else body
