"""CLI entrypoints for gridfetch rendering, diagnostics, and settings."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from gridfetch_core import build_doctor_payload, config_path, configure_logging, get_logger, load_config
from gridfetch_renderer import TerminalUnavailableError, list_themes
from gridfetch_telemetry import SECTION_KEYS

from .app import RenderOptions, render_once, run_watch

EXIT_TERMINAL_UNAVAILABLE = 2


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _section_list(raw: str) -> list[str]:
    keys = [part.strip() for part in raw.split(",") if part.strip()]
    unknown = [k for k in keys if k not in SECTION_KEYS]
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown section(s): {', '.join(unknown)}")
    return keys


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return value


def _render_options(args: argparse.Namespace) -> RenderOptions:
    cfg = load_config()
    return RenderOptions.from_config(
        cfg,
        theme=args.theme,
        color=(False if args.no_color else None),
        sections=args.sections,
        width=args.width,
    )


def _provider():
    from gridfetch_telemetry.provider import InfoProvider

    return InfoProvider()


def _terminal_failure(exc: TerminalUnavailableError) -> int:
    get_logger().error(str(exc), extra={"event": "terminal_unavailable"})
    print(f"gridfetch: {exc}", file=sys.stderr)
    return EXIT_TERMINAL_UNAVAILABLE


def cmd_show(args: argparse.Namespace) -> int:
    options = _render_options(args)
    try:
        render_once(options, _provider())
    except TerminalUnavailableError as exc:
        return _terminal_failure(exc)
    return 0


def cmd_watch(args: argparse.Namespace) -> int:
    options = _render_options(args)
    interval = args.interval if args.interval is not None else load_config().watch.interval_s
    try:
        run_watch(options, _provider(), interval_s=interval, count=args.count)
    except TerminalUnavailableError as exc:
        return _terminal_failure(exc)
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json(list_themes())
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def cmd_config_show(_args: argparse.Namespace) -> int:
    _print_json(asdict(load_config()))
    return 0


def cmd_config_path(_args: argparse.Namespace) -> int:
    print(config_path())
    return 0


def _add_render_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--width", type=_positive_int, default=None, help="Render for N columns instead of the terminal width")
    cmd.add_argument("--theme", default=None, choices=list_themes())
    cmd.add_argument(
        "--sections",
        type=_section_list,
        default=None,
        help=f"Comma-separated sections to show ({', '.join(SECTION_KEYS)})",
    )
    cmd.add_argument("--no-color", action="store_true", help="Emit plain text without escape sequences")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridfetch", description="System info rendered to a terminal grid")
    sub = parser.add_subparsers(dest="command", required=True)

    show_cmd = sub.add_parser("show", help="Render system info once")
    _add_render_args(show_cmd)
    show_cmd.set_defaults(func=cmd_show)

    watch_cmd = sub.add_parser("watch", help="Re-render system info on an interval")
    _add_render_args(watch_cmd)
    watch_cmd.add_argument("--interval", type=float, default=None, help="Seconds between renders")
    watch_cmd.add_argument("--count", type=_non_negative_int, default=None, help="Stop after N renders")
    watch_cmd.set_defaults(func=cmd_watch)

    themes_cmd = sub.add_parser("themes", help="List built-in themes")
    themes_cmd.set_defaults(func=cmd_themes)

    doctor_cmd = sub.add_parser("doctor", help="Print diagnostics as JSON")
    doctor_cmd.set_defaults(func=cmd_doctor)

    config_cmd = sub.add_parser("config", help="Inspect settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    config_show = config_sub.add_parser("show", help="Print effective settings")
    config_show.set_defaults(func=cmd_config_show)
    config_path_cmd = config_sub.add_parser("path", help="Print settings file location")
    config_path_cmd.set_defaults(func=cmd_config_path)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
