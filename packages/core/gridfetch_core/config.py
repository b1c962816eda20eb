"""Persistent settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2
KNOWN_SECTIONS = ("system", "battery", "processor", "disk")


@dataclass
class LayoutConfig:
    row_coverage: int = 50
    header_coverage: int = 50
    rule_coverage: int = 50


@dataclass
class UiConfig:
    theme: str = "Sakura"
    color: bool = True


@dataclass
class SectionsConfig:
    enabled: list[str] = field(default_factory=lambda: ["battery", "processor"])


@dataclass
class WatchConfig:
    interval_s: float = 2.0


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    sections: SectionsConfig = field(default_factory=SectionsConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "gridfetch"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "gridfetch"
    base = os.environ.get("XDG_CONFIG_HOME")
    return (Path(base) if base else Path.home() / ".config") / "gridfetch"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _clamp_coverage(value: Any, default: int) -> int:
    try:
        return max(0, min(100, int(value)))
    except (TypeError, ValueError):
        return default


def _normalize_layout(cfg: AppConfig) -> None:
    cfg.layout.row_coverage = _clamp_coverage(cfg.layout.row_coverage, 50)
    cfg.layout.header_coverage = _clamp_coverage(cfg.layout.header_coverage, 50)
    cfg.layout.rule_coverage = _clamp_coverage(cfg.layout.rule_coverage, 50)


def _normalize_sections(cfg: AppConfig) -> None:
    enabled = cfg.sections.enabled if isinstance(cfg.sections.enabled, list) else []
    out: list[str] = []
    for key in enabled:
        if key in KNOWN_SECTIONS and key not in out:
            out.append(key)
    cfg.sections.enabled = out


def _normalize_watch(cfg: AppConfig) -> None:
    try:
        interval = float(cfg.watch.interval_s)
    except (TypeError, ValueError):
        interval = 2.0
    cfg.watch.interval_s = max(0.2, min(60.0, interval))


def _normalize_diagnostics(cfg: AppConfig) -> None:
    try:
        cfg.diagnostics.keep_log_files = max(1, int(cfg.diagnostics.keep_log_files))
    except (TypeError, ValueError):
        cfg.diagnostics.keep_log_files = 7


def _normalize_ui(cfg: AppConfig) -> None:
    cfg.ui.color = bool(cfg.ui.color)
    if not isinstance(cfg.ui.theme, str) or not cfg.ui.theme:
        cfg.ui.theme = "Sakura"


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept one "coverage" for every row and a flat section list.
        coverage = data.pop("coverage", None)
        if coverage is not None:
            data["layout"] = {
                "row_coverage": coverage,
                "header_coverage": coverage,
                "rule_coverage": coverage,
            }
        sections = data.get("sections")
        if isinstance(sections, list):
            data["sections"] = {"enabled": sections}
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        layout=_merge(LayoutConfig, data.get("layout", {})),
        ui=_merge(UiConfig, data.get("ui", {})),
        sections=_merge(SectionsConfig, data.get("sections", {})),
        watch=_merge(WatchConfig, data.get("watch", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_layout(cfg)
    _normalize_sections(cfg)
    _normalize_watch(cfg)
    _normalize_ui(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
