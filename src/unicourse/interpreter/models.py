"""Data models for the Interpreter module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Command(StrEnum):
    """Commands accepted on the command line of the protocol."""

    COURSE = "course"
    STUDENT = "student"
    PROFESSOR = "professor"
    ENROLL = "enroll"
    DROP = "drop"
    TEACH = "teach"
    EXEMPT = "exempt"


class InterpreterState(StrEnum):
    """Interpreter state enum."""

    READING_COMMAND = "reading_command"
    READING_ARG1 = "reading_arg1"
    READING_ARG2 = "reading_arg2"
    APPLYING = "applying"
    TERMINATED = "terminated"


class StopReason(StrEnum):
    """Why a session ended."""

    END_OF_INPUT = "end_of_input"
    EMPTY_LINE = "empty_line"
    ERROR = "error"


# Confirmation printed after each successful command
CONFIRMATIONS: dict[Command, str] = {
    Command.COURSE: "Added successfully",
    Command.STUDENT: "Added successfully",
    Command.PROFESSOR: "Added successfully",
    Command.ENROLL: "Enrolled successfully",
    Command.DROP: "Dropped successfully",
    Command.TEACH: "Professor is successfully assigned to teach this course",
    Command.EXEMPT: "Professor is exempted",
}


@dataclass
class RunResult:
    """Result of an interpreter run.

    Attributes:
        exit_code: Process exit code. Always 0, errors included.
        reason: Why the session ended.
        commands: Number of commands applied successfully.
        error: Message printed for the fatal error, if any.
    """

    exit_code: int
    reason: StopReason
    commands: int = 0
    error: str | None = None
