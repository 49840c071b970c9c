from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from rich.console import Console

from courseplanner.model import Course, CourseCatalog
from courseplanner.parse import normalize_course_id
from courseplanner.storage import load_courses


console = Console(highlight=False, emoji=False)

PromptFn = Callable[[str], str]
PrintFn = Callable[[str], None]

OPTION_LOAD = 1
OPTION_LIST = 2
OPTION_INFO = 3
OPTION_EXIT = 9

MENU_LINES = (
    f"{OPTION_LOAD}. Load Data Structure.",
    f"{OPTION_LIST}. Print Course List.",
    f"{OPTION_INFO}. Print Course.",
    f"{OPTION_EXIT}. Exit",
)

WELCOME = "Welcome to the course planner."
GOODBYE = "Thank you for using the course planner!"
NOTHING_LOADED = "No courses loaded. Please load the data structure first."
NOT_FOUND = "Course not found."


@dataclass
class Session:
    catalog: CourseCatalog = field(default_factory=CourseCatalog)


def _println(msg: str = "") -> None:
    # course data is printed verbatim: no markup, no ":code:" emoji
    console.print(msg, markup=False)


def _prompt(msg: str) -> str:
    return console.input(msg)


def course_list_lines(catalog: CourseCatalog) -> list[str]:
    return [f"{cid}, {title}" for cid, title in catalog.rows()]


def course_info_lines(course: Course) -> list[str]:
    if course.has_prerequisites:
        prereqs = ", ".join(course.prerequisites)
    else:
        prereqs = "None"
    return [f"{course.course_id}, {course.title}", f"Prerequisites: {prereqs}"]


def dispatch(
    choice: str,
    session: Session,
    prompt_fn: PromptFn = _prompt,
    print_fn: PrintFn = _println,
) -> bool:
    """
    Execute one menu selection against the session.

    Returns False when the user asked to exit, True otherwise.
    Invalid selections are reported and never end the loop.
    """
    raw = choice.strip()
    try:
        option = int(raw)
    except ValueError:
        print_fn(f"Invalid input. Please enter a number between {OPTION_LOAD} and {OPTION_EXIT}.")
        return True

    if option == OPTION_LOAD:
        _flow_load(session, prompt_fn, print_fn)
    elif option == OPTION_LIST:
        _flow_list(session, print_fn)
    elif option == OPTION_INFO:
        _flow_info(session, prompt_fn, print_fn)
    elif option == OPTION_EXIT:
        print_fn(GOODBYE)
        return False
    else:
        print_fn(f"{option} is not a valid option.")

    return True


def run_interactive(
    session: Optional[Session] = None,
    prompt_fn: PromptFn = _prompt,
    print_fn: PrintFn = _println,
) -> Session:
    """
    Interactive menu loop. Runs until exit or end of input.
    """
    if session is None:
        session = Session()

    print_fn(WELCOME)

    while True:
        print_fn("")
        for line in MENU_LINES:
            print_fn(line)

        try:
            choice = prompt_fn("What would you like to do? ")
            if not dispatch(choice, session, prompt_fn, print_fn):
                return session
        except (EOFError, KeyboardInterrupt):
            # Closed stdin or Ctrl-C behaves like a regular exit
            print_fn("")
            print_fn(GOODBYE)
            return session


def _flow_load(session: Session, prompt_fn: PromptFn, print_fn: PrintFn) -> None:
    filename = prompt_fn("Enter the name of the data file: ").strip()
    if not filename:
        print_fn("No file name given.")
        return

    report = load_courses(filename, session.catalog)
    if report is None:
        print_fn(f"Unable to open file {filename}")
        return

    print_fn("Courses loaded successfully.")
    print_fn(f"Loaded {report.loaded} courses from {report.path}.")


def _flow_list(session: Session, print_fn: PrintFn) -> None:
    if session.catalog.is_empty():
        print_fn(NOTHING_LOADED)
        return

    # Sorting is lazy: only done when a listing is requested
    session.catalog.sort()

    print_fn("Here is a sample schedule:")
    for line in course_list_lines(session.catalog):
        print_fn(line)


def _flow_info(session: Session, prompt_fn: PromptFn, print_fn: PrintFn) -> None:
    if session.catalog.is_empty():
        print_fn(NOTHING_LOADED)
        return

    course_id = normalize_course_id(prompt_fn("What course do you want to know about? "))
    course = session.catalog.find(course_id)
    if course is None:
        print_fn(NOT_FOUND)
        return

    for line in course_info_lines(course):
        print_fn(line)
