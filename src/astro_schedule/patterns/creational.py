# src/astro_schedule/patterns/creational.py

from __future__ import annotations

import threading
from collections.abc import Callable

Emit = Callable[[str], None]


# ---- Factory Method ----


class Course:
    kind = "course"

    def __init__(self, emit: Emit = print) -> None:
        self._emit = emit

    def enroll(self) -> None:
        raise NotImplementedError


class OnlineCourse(Course):
    kind = "online"

    def enroll(self) -> None:
        self._emit("Enrolled in an online course.")


class InPersonCourse(Course):
    kind = "in-person"

    def enroll(self) -> None:
        self._emit("Enrolled in an in-person course.")


_COURSES: dict[str, type[Course]] = {c.kind: c for c in (OnlineCourse, InPersonCourse)}


def create_course(kind: str, emit: Emit = print) -> Course:
    cls = _COURSES.get((kind or "").strip().lower())
    if cls is None:
        raise ValueError(f"Invalid course type: {kind!r}.")
    return cls(emit)


# ---- Singleton ----


class CourseCatalog:
    """Process-wide catalog; always obtained via get_instance()."""

    _instance: CourseCatalog | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self.courses: list[Course] = []

    @classmethod
    def get_instance(cls) -> CourseCatalog:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance (tests / repeated demo runs)."""
        with cls._lock:
            cls._instance = None

    def add_course(self, course: Course, emit: Emit = print) -> None:
        self.courses.append(course)
        emit("Course added to the catalog.")

    def display_courses(self, emit: Emit = print) -> None:
        emit("Courses in Catalog:")
        for course in self.courses:
            emit(type(course).__name__)


def run_demo(emit: Emit = print) -> None:
    emit("===== Factory Method Pattern Example =====")
    online = create_course("online", emit)
    online.enroll()
    in_person = create_course("in-person", emit)
    in_person.enroll()

    emit("")
    emit("===== Singleton Pattern Example =====")
    catalog1 = CourseCatalog.get_instance()
    catalog2 = CourseCatalog.get_instance()
    if catalog1 is catalog2:
        emit("Both catalogs are the same instance.")

    catalog1.add_course(online, emit)
    catalog1.add_course(in_person, emit)
    catalog1.display_courses(emit)
