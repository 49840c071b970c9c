"""
Parsing (delimited text -> Course).

One line of a course data file looks like:

    CSCI300,Introduction to Algorithms,CSCI200,MATH201

Field rules:
- field 0: course id (stripped + uppercase)
- field 1: title (kept as-is)
- field 2..n: prerequisite ids (stripped + uppercase), any number

Important rules:
- No quoting / escaping of the delimiter
- Lines missing the id or the title are skipped, never half-added
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from courseplanner.model import Course

DELIMITER = ","


def normalize_course_id(raw: str) -> str:
    return raw.strip().upper()


def parse_course_line(line: str, delimiter: str = DELIMITER) -> Optional[Course]:
    """
    Parses exactly one line into exactly one Course.

    Returns None if the line does not contain at least an id and a title.
    """

    # Only drop the line terminator, titles stay untouched
    raw = line.rstrip("\r\n")
    if not raw.strip():
        return None

    parts = raw.split(delimiter)

    # We expect at least 2 parts (id, title)
    if len(parts) < 2:
        return None

    course_id = normalize_course_id(parts[0])
    title = parts[1]
    if not course_id or not title:
        return None

    # A trailing delimiter ("CS101,Intro,") yields an empty token: not a prerequisite
    prerequisites = tuple(normalize_course_id(p) for p in parts[2:] if p.strip())

    return Course(course_id=course_id, title=title, prerequisites=prerequisites)


def parse_course_lines(
    lines: Iterable[str],
    delimiter: str = DELIMITER,
) -> Tuple[List[Course], int]:
    """
    Parses many lines and returns:
    - the parsed courses, in input order
    - the number of skipped (malformed) lines

    Blank lines are ignored and not counted as skipped.
    """
    courses: List[Course] = []
    skipped = 0

    for line in lines:
        if not line.strip():
            continue

        course = parse_course_line(line, delimiter)
        if course is None:
            skipped += 1
            continue

        courses.append(course)

    return courses, skipped
