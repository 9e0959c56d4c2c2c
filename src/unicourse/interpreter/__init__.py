"""Interpreter - Line-oriented command protocol over the Registry."""

from unicourse.interpreter.exceptions import (
    COURSE_EXISTS,
    WRONG_INPUTS,
    DuplicateCourseError,
    InterpreterError,
    RuleViolationError,
    WrongInputError,
)
from unicourse.interpreter.interpreter import Interpreter
from unicourse.interpreter.models import (
    CONFIRMATIONS,
    Command,
    InterpreterState,
    RunResult,
    StopReason,
)

__all__ = [
    "CONFIRMATIONS",
    "COURSE_EXISTS",
    "WRONG_INPUTS",
    "Command",
    "DuplicateCourseError",
    "Interpreter",
    "InterpreterError",
    "InterpreterState",
    "RuleViolationError",
    "RunResult",
    "StopReason",
    "WrongInputError",
]
