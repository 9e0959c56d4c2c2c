"""Interpreter - Reads commands from a text stream and applies them to a Registry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TextIO

import click

from unicourse.interpreter.exceptions import (
    DuplicateCourseError,
    InterpreterError,
    RuleViolationError,
    WrongInputError,
)
from unicourse.interpreter.models import (
    CONFIRMATIONS,
    Command,
    InterpreterState,
    RunResult,
    StopReason,
)
from unicourse.interpreter.validators import (
    is_command,
    is_course_name,
    is_member_name,
    parse_id,
)
from unicourse.registry import CourseLevel

if TYPE_CHECKING:
    from unicourse.registry import Outcome, Professor, Registry, Student

logger = logging.getLogger(__name__)


class Interpreter:
    """Line-oriented command interpreter.

    Each cycle reads a command line followed by one or two operand lines.
    The session ends at end of input, on an empty command line, or on the
    first error of any kind. After an error no further lines are read.
    """

    def __init__(
        self,
        registry: Registry,
        stream: TextIO,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        """Initialize the Interpreter.

        Args:
            registry: Registry the commands act on.
            stream: Text stream to read lines from.
            echo: Callable receiving each output line.
        """
        self.registry = registry
        self.stream = stream
        self.echo = echo
        self.state = InterpreterState.READING_COMMAND
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.COURSE: self._add_course,
            Command.STUDENT: self._add_student,
            Command.PROFESSOR: self._add_professor,
            Command.ENROLL: self._enroll,
            Command.DROP: self._drop,
            Command.TEACH: self._teach,
            Command.EXEMPT: self._exempt,
        }

    def run(self) -> RunResult:
        """Process commands until the session ends.

        Returns:
            RunResult describing how the session ended.
        """
        applied = 0
        try:
            while True:
                self.state = InterpreterState.READING_COMMAND
                line = self._read_line()
                if line is None:
                    return self._stop(StopReason.END_OF_INPUT, applied)
                if line == "":
                    return self._stop(StopReason.EMPTY_LINE, applied)
                if not is_command(line):
                    raise WrongInputError(f"unknown command {line!r}")

                command = Command(line)
                logger.debug("Command %s", command)
                self._handlers[command]()
                self.echo(CONFIRMATIONS[command])
                applied += 1
        except InterpreterError as e:
            message = str(e)
            logger.info(
                "Session aborted in state %s: %s%s",
                self.state,
                message,
                f" ({e.detail})" if isinstance(e, WrongInputError) and e.detail else "",
            )
            self.echo(message)
            self.state = InterpreterState.TERMINATED
            return RunResult(exit_code=0, reason=StopReason.ERROR, commands=applied, error=message)

    def _stop(self, reason: StopReason, applied: int) -> RunResult:
        self.state = InterpreterState.TERMINATED
        logger.info("Session ended (%s) after %d commands", reason, applied)
        return RunResult(exit_code=0, reason=reason, commands=applied)

    # --- Reading ---

    def _read_line(self) -> str | None:
        line = self.stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _read_operand(self, state: InterpreterState) -> str:
        self.state = state
        line = self._read_line()
        if line is None:
            raise WrongInputError("unexpected end of input")
        return line

    def _read_member(self, find: Callable[[int], Student | Professor | None]) -> int:
        text = self._read_operand(InterpreterState.READING_ARG1)
        member_id = parse_id(text)
        if member_id is None or find(member_id) is None:
            raise WrongInputError(f"unknown member id {text!r}")
        return member_id

    def _read_course(self) -> int:
        text = self._read_operand(InterpreterState.READING_ARG2)
        course_id = parse_id(text)
        if course_id is None or self.registry.find_course(course_id) is None:
            raise WrongInputError(f"unknown course id {text!r}")
        return course_id

    # --- Commands ---

    def _add_course(self) -> None:
        name = self._read_operand(InterpreterState.READING_ARG1)
        if not is_course_name(name):
            raise WrongInputError(f"invalid course name {name!r}")
        if self.registry.course_name_taken(name):
            raise DuplicateCourseError(name)

        level_text = self._read_operand(InterpreterState.READING_ARG2)
        level = CourseLevel.parse(level_text)
        if level is None:
            raise WrongInputError(f"invalid course level {level_text!r}")

        self.state = InterpreterState.APPLYING
        course = self.registry.add_course(name, level)
        logger.info("Course %d %r created", course.id, course.name)

    def _add_student(self) -> None:
        name = self._read_member_name()
        self.state = InterpreterState.APPLYING
        student = self.registry.add_student(name)
        logger.info("Student %d %r created", student.id, student.name)

    def _add_professor(self) -> None:
        name = self._read_member_name()
        self.state = InterpreterState.APPLYING
        professor = self.registry.add_professor(name)
        logger.info("Professor %d %r created", professor.id, professor.name)

    def _read_member_name(self) -> str:
        name = self._read_operand(InterpreterState.READING_ARG1)
        if not is_member_name(name):
            raise WrongInputError(f"invalid member name {name!r}")
        return name

    def _enroll(self) -> None:
        self._relate(self.registry.find_student, self.registry.enroll)

    def _drop(self) -> None:
        self._relate(self.registry.find_student, self.registry.drop)

    def _teach(self) -> None:
        self._relate(self.registry.find_professor, self.registry.teach)

    def _exempt(self) -> None:
        self._relate(self.registry.find_professor, self.registry.exempt)

    def _relate(
        self,
        find: Callable[[int], Student | Professor | None],
        apply: Callable[[int, int], Outcome],
    ) -> None:
        member_id = self._read_member(find)
        course_id = self._read_course()

        self.state = InterpreterState.APPLYING
        outcome = apply(member_id, course_id)
        if outcome.refusal is not None:
            raise RuleViolationError(outcome.refusal)
