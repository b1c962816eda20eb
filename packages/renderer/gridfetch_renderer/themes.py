"""Built-in terminal color themes."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ColorRGB

DEFAULT_THEME_NAME = "Sakura"


@dataclass(frozen=True)
class ThemeConfig:
    name: str
    header: str
    rule_start: str
    rule_end: str
    section_title: str
    row_text: str
    rule_glyph: str = "▀"

    def color(self, slot: str) -> ColorRGB:
        return ColorRGB.from_hex(getattr(self, slot))


THEMES: dict[str, ThemeConfig] = {
    "Sakura": ThemeConfig(
        name="Sakura",
        header="#FF31BB",
        rule_start="#FFFFFF",
        rule_end="#FF31BB",
        section_title="#FF99DD",
        row_text="#FFCFEF",
    ),
    "Neon Slate": ThemeConfig(
        name="Neon Slate",
        header="#35D9FF",
        rule_start="#8CFFB5",
        rule_end="#35D9FF",
        section_title="#F4F7FF",
        row_text="#A9B5D1",
    ),
    "Arctic Pulse": ThemeConfig(
        name="Arctic Pulse",
        header="#59F3FF",
        rule_start="#EFFFFF",
        rule_end="#173F52",
        section_title="#86FFD0",
        row_text="#B9DFE8",
        rule_glyph="━",
    ),
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> ThemeConfig:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])
