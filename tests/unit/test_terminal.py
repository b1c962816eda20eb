import io
import os
import sys
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from gridfetch_renderer.terminal import TerminalUnavailableError, capture_frame


class _TtyStream:
    name = "<tty>"

    def fileno(self) -> int:
        return 1


class CaptureFrameTests(unittest.TestCase):
    def test_columns_env_wins(self):
        with mock.patch.dict(os.environ, {"COLUMNS": "42"}):
            self.assertEqual(capture_frame(streams=()).columns, 42)

    def test_queries_stream(self):
        with mock.patch.dict(os.environ):
            os.environ.pop("COLUMNS", None)
            with mock.patch("os.get_terminal_size", return_value=os.terminal_size((77, 24))):
                self.assertEqual(capture_frame(streams=(_TtyStream(),)).columns, 77)

    def test_no_terminal_fails_fast(self):
        with mock.patch.dict(os.environ):
            os.environ.pop("COLUMNS", None)
            with self.assertRaises(TerminalUnavailableError):
                capture_frame(streams=(io.StringIO(),))

    def test_zero_column_terminal_fails_fast(self):
        with mock.patch.dict(os.environ):
            os.environ.pop("COLUMNS", None)
            with mock.patch("os.get_terminal_size", return_value=os.terminal_size((0, 0))):
                with self.assertRaises(TerminalUnavailableError):
                    capture_frame(streams=(_TtyStream(),))

    def test_zero_column_stream_falls_through_to_next(self):
        sizes = [os.terminal_size((0, 0)), os.terminal_size((64, 24))]
        with mock.patch.dict(os.environ):
            os.environ.pop("COLUMNS", None)
            with mock.patch("os.get_terminal_size", side_effect=sizes):
                self.assertEqual(capture_frame(streams=(_TtyStream(), _TtyStream())).columns, 64)

    def test_invalid_columns_env_is_ignored(self):
        with mock.patch.dict(os.environ, {"COLUMNS": "wide"}):
            with self.assertRaises(TerminalUnavailableError):
                capture_frame(streams=())


if __name__ == "__main__":
    unittest.main()
