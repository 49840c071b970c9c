"""
Tests for CLI entry points.

These tests focus on:
- exit codes of list/info for good and bad input files
- plain text output matching the interactive menu format
"""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from courseplanner import __version__
from courseplanner.cli import main


def _run(argv: list[str]) -> tuple[int, str]:
    buf = io.StringIO()
    with redirect_stdout(buf):
        try:
            main(argv)
        except SystemExit as exc:
            code = exc.code
        else:  # pragma: no cover
            code = None
    return code, buf.getvalue()


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.data = Path(self._tmp.name) / "courses.csv"
        self.data.write_text(
            "CSCI300,Introduction to Algorithms,CSCI200,MATH201\n"
            "CSCI100,Introduction to Computer Science\n"
            "CSCI200,Data Structures,CSCI101\n",
            encoding="utf-8",
        )

    def test_list_prints_sorted_courses(self) -> None:
        code, out = _run(["list", str(self.data)])
        self.assertEqual(code, 0)
        self.assertEqual(
            out.splitlines(),
            [
                "CSCI100, Introduction to Computer Science",
                "CSCI200, Data Structures",
                "CSCI300, Introduction to Algorithms",
            ],
        )

    def test_list_table_contains_courses(self) -> None:
        code, out = _run(["list", str(self.data), "--table"])
        self.assertEqual(code, 0)
        self.assertIn("CSCI100", out)
        self.assertIn("CSCI300", out)

    def test_list_missing_file_exits_nonzero(self) -> None:
        missing = str(Path(self._tmp.name) / "missing.csv")
        code, out = _run(["list", missing])
        self.assertEqual(code, 1)
        self.assertIn(f"Unable to open file {missing}", out)

    def test_list_file_without_courses_exits_nonzero(self) -> None:
        empty = Path(self._tmp.name) / "empty.csv"
        empty.write_text("just-one-field\n", encoding="utf-8")
        code, _ = _run(["list", str(empty)])
        self.assertEqual(code, 1)

    def test_info_prints_course_and_prerequisites(self) -> None:
        code, out = _run(["info", str(self.data), "csci300"])
        self.assertEqual(code, 0)
        self.assertEqual(
            out.splitlines(),
            ["CSCI300, Introduction to Algorithms", "Prerequisites: CSCI200, MATH201"],
        )

    def test_info_unknown_course_exits_nonzero(self) -> None:
        code, out = _run(["info", str(self.data), "CSCI999"])
        self.assertEqual(code, 1)
        self.assertIn("Course not found.", out)

    def test_info_requires_course_id(self) -> None:
        code, _ = _run(["info", str(self.data), "  "])
        self.assertNotEqual(code, 0)

    def test_version(self) -> None:
        code, out = _run(["--version"])
        self.assertEqual(code, 0)
        self.assertIn(__version__, out)


if __name__ == "__main__":
    unittest.main()
