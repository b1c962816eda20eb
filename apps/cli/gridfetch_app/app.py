"""One render pass: collect sections, capture the frame, write once."""

from __future__ import annotations

import platform
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from gridfetch_core import AppConfig, get_logger
from gridfetch_renderer import (
    DashboardData,
    DashboardRenderer,
    DashboardSection,
    LayoutOptions,
    TerminalFrame,
    capture_frame,
)
from gridfetch_telemetry import InfoSection, SystemInfo, os_icon


@dataclass(frozen=True)
class RenderOptions:
    theme: str
    color: bool
    sections: tuple[str, ...]
    layout: LayoutOptions
    width: int | None = None

    @classmethod
    def from_config(
        cls,
        cfg: AppConfig,
        theme: str | None = None,
        color: bool | None = None,
        sections: list[str] | None = None,
        width: int | None = None,
    ) -> RenderOptions:
        return cls(
            theme=theme or cfg.ui.theme,
            color=cfg.ui.color if color is None else color,
            sections=tuple(sections if sections is not None else cfg.sections.enabled),
            layout=LayoutOptions(
                row_coverage=cfg.layout.row_coverage,
                header_coverage=cfg.layout.header_coverage,
                rule_coverage=cfg.layout.rule_coverage,
            ),
            width=width,
        )


def build_dashboard_data(system: SystemInfo, sections: list[InfoSection]) -> DashboardData:
    return DashboardData(
        identity=system.identity,
        os_label=system.os_label,
        identity_icon=os_icon(platform.system()),
        sections=tuple(DashboardSection(title=s.title, rows=s.rows, icon=s.icon) for s in sections),
    )


def resolve_frame(width: int | None) -> TerminalFrame:
    if width is not None:
        return TerminalFrame(columns=width)
    return capture_frame()


def render_once(options: RenderOptions, provider, out: TextIO | None = None) -> str:
    """Run a single render pass and write it to ``out`` in one call.

    The terminal frame is captured before any collector runs, so an
    unavailable terminal aborts the pass without touching the sensors.
    """
    logger = get_logger()
    frame = resolve_frame(options.width)

    started = time.perf_counter()
    system = provider.system()
    sections = provider.sections(list(options.sections))
    data = build_dashboard_data(system, sections)

    renderer = DashboardRenderer(theme=options.theme, options=options.layout, color=options.color)
    text = renderer.render(frame, data)

    stream = out if out is not None else sys.stdout
    stream.write(text)
    stream.flush()

    logger.info(
        f"rendered columns={frame.columns} sections={len(sections)} ms={(time.perf_counter() - started) * 1000:.1f}",
        extra={"event": "render_complete"},
    )
    return text


def run_watch(options: RenderOptions, provider, interval_s: float, count: int | None = None, out: TextIO | None = None) -> int:
    """Repeat independent render passes; each one captures its own frame."""
    passes = 0
    try:
        while count is None or passes < count:
            if passes:
                time.sleep(interval_s)
            render_once(options, provider, out=out)
            passes += 1
    except KeyboardInterrupt:
        pass
    return passes
