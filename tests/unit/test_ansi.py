import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from gridfetch_renderer.ansi import BOLD, RESET, fg, strip_ansi, styled
from gridfetch_renderer.models import ColorRGB, GradientSpec, TerminalFrame


class EscapeTests(unittest.TestCase):
    def test_truecolor_foreground(self):
        self.assertEqual(fg(ColorRGB(255, 49, 187)), "\x1b[38;2;255;49;187m")

    def test_bold_and_reset(self):
        self.assertEqual(BOLD, "\x1b[1m")
        self.assertEqual(RESET, "\x1b[0m")

    def test_styled_wraps_text(self):
        self.assertEqual(styled("x", ColorRGB(1, 2, 3)), "\x1b[38;2;1;2;3mx\x1b[0m")
        self.assertEqual(styled("x", ColorRGB(1, 2, 3), bold=True), "\x1b[1;38;2;1;2;3mx\x1b[0m")
        self.assertEqual(styled("x", bold=True), "\x1b[1mx\x1b[0m")

    def test_styled_disabled_is_plain(self):
        self.assertEqual(styled("x", ColorRGB(1, 2, 3), bold=True, enabled=False), "x")

    def test_strip_ansi(self):
        self.assertEqual(strip_ansi(styled("abc", ColorRGB(9, 9, 9), bold=True)), "abc")


class ColorModelTests(unittest.TestCase):
    def test_from_hex_and_int(self):
        self.assertEqual(ColorRGB.from_hex("#FF31BB"), ColorRGB(255, 49, 187))
        self.assertEqual(ColorRGB.from_int(0xFFFFFF), ColorRGB(255, 255, 255))

    def test_rejects_out_of_range_channel(self):
        with self.assertRaises(ValueError):
            ColorRGB(256, 0, 0)
        with self.assertRaises(ValueError):
            ColorRGB.from_hex("#FFF")

    def test_gradient_spec_coverage_range(self):
        c = ColorRGB(0, 0, 0)
        GradientSpec(c, c, 100)
        with self.assertRaises(ValueError):
            GradientSpec(c, c, 101)

    def test_frame_rejects_negative_columns(self):
        with self.assertRaises(ValueError):
            TerminalFrame(columns=-1)


if __name__ == "__main__":
    unittest.main()
