import contextlib
import io
import sys
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from gridfetch_app import cli
from gridfetch_app.cli import build_parser
from gridfetch_core.config import AppConfig
from gridfetch_renderer.terminal import TerminalUnavailableError


class CliTests(unittest.TestCase):
    def test_show_command(self):
        parser = build_parser()
        args = parser.parse_args(["show", "--width", "80", "--sections", "battery,disk", "--no-color"])
        self.assertEqual(args.command, "show")
        self.assertEqual(args.width, 80)
        self.assertEqual(args.sections, ["battery", "disk"])
        self.assertTrue(args.no_color)

    def test_watch_command(self):
        parser = build_parser()
        args = parser.parse_args(["watch", "--interval", "0.5", "--count", "3"])
        self.assertEqual(args.command, "watch")
        self.assertEqual(args.interval, 0.5)
        self.assertEqual(args.count, 3)

    def test_config_command(self):
        parser = build_parser()
        args = parser.parse_args(["config", "path"])
        self.assertEqual(args.command, "config")
        self.assertEqual(args.config_cmd, "path")

    def test_unknown_section_rejected(self):
        parser = build_parser()
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            parser.parse_args(["show", "--sections", "battery,gpu"])

    def test_zero_width_rejected(self):
        parser = build_parser()
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            parser.parse_args(["show", "--width", "0"])
        self.assertEqual(parser.parse_args(["show", "--width", "1"]).width, 1)

    def test_unknown_theme_rejected(self):
        parser = build_parser()
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            parser.parse_args(["show", "--theme", "nope"])

    def test_show_exits_when_terminal_unavailable(self):
        args = build_parser().parse_args(["show"])
        provider = mock.Mock()
        err = io.StringIO()
        with mock.patch.object(cli, "load_config", return_value=AppConfig()), mock.patch.object(
            cli, "_provider", return_value=provider
        ), mock.patch("gridfetch_app.app.capture_frame", side_effect=TerminalUnavailableError("no tty")):
            with contextlib.redirect_stderr(err):
                rc = cli.cmd_show(args)
        self.assertEqual(rc, cli.EXIT_TERMINAL_UNAVAILABLE)
        self.assertIn("no tty", err.getvalue())
        provider.system.assert_not_called()


if __name__ == "__main__":
    unittest.main()
