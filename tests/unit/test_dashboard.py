import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from gridfetch_renderer.ansi import RESET, strip_ansi
from gridfetch_renderer.dashboard import DashboardData, DashboardRenderer, DashboardSection, LayoutOptions
from gridfetch_renderer.models import TerminalFrame
from gridfetch_renderer.themes import DEFAULT_THEME_NAME, get_theme, list_themes
from gridfetch_renderer.width import visible_width


def _data() -> DashboardData:
    return DashboardData(
        identity="ana@box",
        os_label="Debian GNU/Linux 12",
        identity_icon="\ue62a",
        sections=(
            DashboardSection(title="Battery", rows=(("Percentage:", "87.5%"), ("State:", "Charging"))),
            DashboardSection(title="Processor", icon="\uf4bc", rows=(("Cores:", "8"),)),
        ),
    )


class DashboardRendererTests(unittest.TestCase):
    def test_every_row_fills_the_frame(self):
        frame = TerminalFrame(columns=80)
        renderer = DashboardRenderer()
        for line in renderer.render_lines(frame, _data()):
            if line:
                self.assertEqual(visible_width(line), 80, repr(strip_ansi(line)))

    def test_render_layout(self):
        frame = TerminalFrame(columns=60)
        text = DashboardRenderer(color=False).render(frame, _data())
        lines = text.split("\n")
        self.assertEqual(lines[-1], "")
        self.assertIn("ana@box", lines[0])
        self.assertTrue(lines[0].rstrip().endswith("Debian GNU/Linux 12"))
        self.assertEqual(lines[1].strip(), "▀" * 30)
        self.assertEqual(lines[2].strip(), "Battery")
        self.assertEqual(lines[5], "")
        self.assertEqual(lines[6].strip(), "\uf4bc Processor")

    def test_plain_output_has_no_escapes(self):
        text = DashboardRenderer(color=False).render(TerminalFrame(columns=50), _data())
        self.assertNotIn("\x1b", text)

    def test_color_output_is_reset(self):
        text = DashboardRenderer(theme="Neon Slate").render(TerminalFrame(columns=50), _data())
        self.assertTrue(text.endswith(RESET))
        self.assertIn("\x1b[1;38;2;53;217;255m", text)

    def test_zero_row_coverage_drops_rows(self):
        renderer = DashboardRenderer(options=LayoutOptions(row_coverage=0), color=False)
        lines = renderer.section(TerminalFrame(columns=40), _data().sections[0])
        self.assertEqual(lines[1:], ["", ""])


class ThemeTests(unittest.TestCase):
    def test_unknown_theme_falls_back(self):
        self.assertEqual(get_theme("nope").name, DEFAULT_THEME_NAME)
        self.assertEqual(get_theme(None).name, DEFAULT_THEME_NAME)

    def test_themes_parse(self):
        for name in list_themes():
            theme = get_theme(name)
            for slot in ("header", "rule_start", "rule_end", "section_title", "row_text"):
                theme.color(slot)


if __name__ == "__main__":
    unittest.main()
