"""
Course planner: load a course data file, list courses sorted by id,
and look up one course with its prerequisites.
"""

from pathlib import Path


def _read_version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _read_version()
