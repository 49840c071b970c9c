"""
Loading course data files into a CourseCatalog.

Design rationale:
- the data file is read once per load; nothing is ever written back
- repeated loads append to the catalog, they never replace it
- the loader is best effort: malformed lines are skipped, not fatal

A file that cannot be opened leaves the catalog exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from courseplanner.model import CourseCatalog
from courseplanner.parse import DELIMITER, parse_course_lines


@dataclass(frozen=True)
class LoadReport:
    path: Path
    loaded: int
    skipped: int


def load_courses(
    path: str | Path,
    catalog: CourseCatalog,
    delimiter: str = DELIMITER,
) -> Optional[LoadReport]:
    """
    Read a course data file and append every valid course to catalog.

    Returns None if the file does not exist or cannot be opened.

    This function never crashes the application on a bad path:
    the caller decides how to report the failure.
    """
    data_path = Path(path)

    # Read the whole file before touching the catalog,
    # so a failing read cannot leave half a file behind.
    # utf-8-sig drops a BOM; undecodable bytes become U+FFFD instead of failing the load
    try:
        text = data_path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError:
        return None

    courses, skipped = parse_course_lines(text.splitlines(), delimiter)
    catalog.extend(courses)

    return LoadReport(path=data_path, loaded=len(courses), skipped=skipped)
