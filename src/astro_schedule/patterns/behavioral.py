# src/astro_schedule/patterns/behavioral.py

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Emit = Callable[[str], None]


# ---- Observer ----


class GradeObserver(Protocol):
    def update(self, grade: float) -> None: ...


class Student:
    """Observable: every new grade is pushed to the registered observers."""

    def __init__(self) -> None:
        self._observers: list[GradeObserver] = []
        self.grade: float | None = None

    def register(self, observer: GradeObserver) -> None:
        self._observers.append(observer)

    def unregister(self, observer: GradeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self, grade: float) -> None:
        for observer in list(self._observers):
            observer.update(grade)

    def set_grade(self, grade: float) -> None:
        self.grade = grade
        self.notify_observers(grade)


class Teacher:
    def __init__(self, name: str, emit: Emit = print) -> None:
        self.name = name
        self._emit = emit

    def update(self, grade: float) -> None:
        self._emit(f"Teacher {self.name} - New grade received: {grade}")


# ---- Command ----


class Command(Protocol):
    def execute(self) -> None: ...


class Lecture:
    def __init__(self, title: str, emit: Emit = print) -> None:
        self.title = title
        self.running = False
        self._emit = emit

    def start(self) -> None:
        self.running = True
        self._emit(f"Lecture '{self.title}' has started.")

    def stop(self) -> None:
        self.running = False
        self._emit(f"Lecture '{self.title}' has stopped.")


class StartLectureCommand:
    def __init__(self, lecture: Lecture) -> None:
        self._lecture = lecture

    def execute(self) -> None:
        self._lecture.start()


class StopLectureCommand:
    def __init__(self, lecture: Lecture) -> None:
        self._lecture = lecture

    def execute(self) -> None:
        self._lecture.stop()


class ControlPanel:
    """Invoker: holds one command and runs it on button press."""

    def __init__(self) -> None:
        self._command: Command | None = None

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> None:
        if self._command is not None:
            self._command.execute()


def run_demo(emit: Emit = print) -> None:
    emit("===== Observer Pattern Example =====")
    student = Student()
    teacher1 = Teacher("Mr. Prasanna", emit)
    teacher2 = Teacher("Ms. Muthu Lakshmi", emit)

    student.register(teacher1)
    student.register(teacher2)
    student.set_grade(85.5)
    student.set_grade(90.0)

    student.unregister(teacher1)
    student.set_grade(95.0)

    emit("")
    emit("===== Command Pattern Example =====")
    lecture = Lecture("Math 101", emit)
    panel = ControlPanel()

    panel.set_command(StartLectureCommand(lecture))
    panel.press_button()

    panel.set_command(StopLectureCommand(lecture))
    panel.press_button()
