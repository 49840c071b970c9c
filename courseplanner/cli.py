"""
CLI (Command Line Interface).

This module provides quick terminal commands next to the interactive menu:

    courseplanner list <file> [--table]
    courseplanner info <file> <course_id>
    courseplanner interactive [<file>]

Note:
- The interactive UI lives in courseplanner/interactive.py
- list/info print the same plain lines as the interactive menu
"""

from __future__ import annotations

import argparse
from typing import Optional

from rich import box
from rich.table import Table
from rich.text import Text

from courseplanner import __version__
from courseplanner.interactive import (
    NOT_FOUND,
    Session,
    console,
    course_info_lines,
    course_list_lines,
    run_interactive,
)
from courseplanner.model import CourseCatalog
from courseplanner.parse import normalize_course_id
from courseplanner.storage import LoadReport, load_courses


def _load_or_report(path: str, catalog: CourseCatalog) -> Optional[LoadReport]:
    """
    Load path into catalog. Prints the failure and returns None if unreadable.
    """
    report = load_courses(path, catalog)
    if report is None:
        print(f"Unable to open file {path}")
    return report


def _course_table(catalog: CourseCatalog) -> Table:
    table = Table(title="Courses", box=box.SIMPLE)
    table.add_column("Course")
    table.add_column("Title")
    table.add_column("Prerequisites")
    for course in catalog:
        prereqs = ", ".join(course.prerequisites) if course.has_prerequisites else "None"
        # Text() keeps titles like "[Lab]" from being read as markup
        table.add_row(Text(course.course_id, style="bold cyan"), Text(course.title), Text(prereqs))
    return table


def _cmd_list(args: argparse.Namespace) -> int:
    """
    Load a file and print every course sorted by course_id.
    """
    catalog = CourseCatalog()
    if _load_or_report(args.file, catalog) is None:
        return 1

    if catalog.is_empty():
        print(f"No courses found in {args.file}.")
        return 1

    catalog.sort()

    if args.table:
        console.print(_course_table(catalog))
        return 0

    for line in course_list_lines(catalog):
        print(line)
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    """
    Load a file and print id, title and prerequisites of one course.
    """
    course_id = normalize_course_id(args.course_id or "")
    if not course_id:
        print("Please provide a course_id.")
        return 1

    catalog = CourseCatalog()
    if _load_or_report(args.file, catalog) is None:
        return 1

    course = catalog.find(course_id)
    if course is None:
        print(NOT_FOUND)
        return 1

    for line in course_info_lines(course):
        print(line)
    return 0


def _cmd_interactive(args: argparse.Namespace) -> int:
    session = Session()
    if args.file:
        report = _load_or_report(args.file, session.catalog)
        if report is not None:
            print(f"Loaded {report.loaded} courses from {report.path}.")
    run_interactive(session)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="courseplanner", description="Course planner CLI")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Print all courses sorted by course id")
    p_list.add_argument("file", type=str, help="Course data file (e.g. courses.csv)")
    p_list.add_argument("--table", action="store_true", help="Render as a table with prerequisites")

    p_info = sub.add_parser("info", help="Print one course with its prerequisites")
    p_info.add_argument("file", type=str, help="Course data file (e.g. courses.csv)")
    p_info.add_argument("course_id", type=str, help="Course ID (e.g. CSCI300)")

    p_interactive = sub.add_parser("interactive", help="Interactive menu mode")
    p_interactive.add_argument("file", type=str, nargs="?", default=None, help="Course data file to load first")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "info":
        raise SystemExit(_cmd_info(args))
    if args.command == "interactive":
        raise SystemExit(_cmd_interactive(args))

    raise SystemExit(2)
