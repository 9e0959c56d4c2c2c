"""Exceptions for the Interpreter module.

Every InterpreterError ends the session. Its string is the line shown to
the user before the interpreter stops.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unicourse.registry import Refusal

WRONG_INPUTS = "Wrong inputs"
COURSE_EXISTS = "Course exists"


class InterpreterError(Exception):
    """Base exception for fatal interpreter errors."""


class WrongInputError(InterpreterError):
    """Malformed line, unknown command or unknown id."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(WRONG_INPUTS)
        self.detail = detail


class DuplicateCourseError(InterpreterError):
    """Course name already in use."""

    def __init__(self, name: str) -> None:
        super().__init__(COURSE_EXISTS)
        self.name = name


class RuleViolationError(InterpreterError):
    """Registry refused an enroll, drop, teach or exempt."""

    def __init__(self, refusal: Refusal) -> None:
        super().__init__(refusal.value)
        self.refusal = refusal
