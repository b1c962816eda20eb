"""Renderer package for gridfetch terminal layout."""

from .ansi import BOLD, RESET, fg, strip_ansi, styled
from .dashboard import DashboardData, DashboardRenderer, DashboardSection, LayoutOptions
from .layout import flex_between, gradient_colors, gradient_delim, side_padding, subtitle
from .models import ColorRGB, GradientSpec, RenderedLine, StyledRun, TerminalFrame
from .terminal import TerminalUnavailableError, capture_frame
from .themes import DEFAULT_THEME_NAME, ThemeConfig, get_theme, list_themes
from .width import char_width, display_width, visible_width

__all__ = [
    "BOLD",
    "ColorRGB",
    "DEFAULT_THEME_NAME",
    "DashboardData",
    "DashboardRenderer",
    "DashboardSection",
    "GradientSpec",
    "LayoutOptions",
    "RESET",
    "RenderedLine",
    "StyledRun",
    "TerminalFrame",
    "TerminalUnavailableError",
    "ThemeConfig",
    "capture_frame",
    "char_width",
    "display_width",
    "fg",
    "flex_between",
    "get_theme",
    "gradient_colors",
    "gradient_delim",
    "list_themes",
    "side_padding",
    "strip_ansi",
    "styled",
    "subtitle",
    "visible_width",
]
