"""
Central data model definitions used across the project.

This module defines:
- Course: one course record (id, title, prerequisite ids)
- CourseCatalog: the in-memory, ordered collection of all loaded courses

All ids are expected to be normalized (stripped + uppercase) before they
reach this module; see courseplanner.parse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Course:
    """
    Represents one course as read from a course data file.
    """

    course_id: str
    title: str
    prerequisites: Tuple[str, ...] = ()

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0


@dataclass
class CourseCatalog:
    """
    Ordered collection of courses.

    - insertion order is kept until sort() is called
    - duplicate course ids are allowed; find() returns the first one
      in the current order
    """

    courses: list[Course] = field(default_factory=list)

    def append(self, course: Course) -> None:
        self.courses.append(course)

    def extend(self, courses: Iterable[Course]) -> None:
        self.courses.extend(courses)

    def sort(self) -> None:
        """
        Sort in place by course_id (plain string ordering, so "CS10" < "CS9").

        list.sort is stable, so courses sharing an id keep their relative order
        and repeated calls never reshuffle them.
        """
        self.courses.sort(key=attrgetter("course_id"))

    def find(self, course_id: str) -> Optional[Course]:
        """
        Return the first course whose id equals course_id, or None.
        """
        for course in self.courses:
            if course.course_id == course_id:
                return course
        return None

    def is_empty(self) -> bool:
        return not self.courses

    def rows(self) -> Iterator[tuple[str, str]]:
        """
        Yield (course_id, title) pairs in the current order.
        """
        for course in self.courses:
            yield course.course_id, course.title

    def __len__(self) -> int:
        return len(self.courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses)

    def __bool__(self) -> bool:
        return not self.is_empty()
