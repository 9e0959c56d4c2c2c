"""Data models for the Registry."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

# Default limits
COURSE_CAPACITY = 3
MAX_ENROLLMENT = 3
MAX_LOAD = 2

# Name rules
COURSE_NAME_PATTERN = re.compile(r"^[a-zA-Z]+_?[a-zA-Z]+$")
MEMBER_NAME_PATTERN = re.compile(r"^[a-zA-Z]+$")

# Command words, never usable as names
RESERVED_WORDS = frozenset(
    {"course", "student", "professor", "enroll", "drop", "teach", "exempt"}
)


def is_course_name(text: str) -> bool:
    """Letters, with at most one underscore between two letter runs.

    Reserved words are rejected (case-sensitive).
    """
    return COURSE_NAME_PATTERN.fullmatch(text) is not None and text not in RESERVED_WORDS


def is_member_name(text: str) -> bool:
    """Letters only. Reserved words are rejected."""
    return MEMBER_NAME_PATTERN.fullmatch(text) is not None and text not in RESERVED_WORDS


class CourseLevel(StrEnum):
    """Course level enum."""

    BACHELOR = "bachelor"
    MASTER = "master"

    @classmethod
    def parse(cls, text: str) -> CourseLevel | None:
        """Parse a level name case-insensitively.

        Returns:
            The matching level, or None if the text names no level.
        """
        try:
            return cls(text.lower())
        except ValueError:
            return None


class Refusal(StrEnum):
    """Reasons a relationship operation is refused.

    Values are the messages shown to the user.
    """

    ALREADY_ENROLLED = "Student is already enrolled in this course"
    MAX_ENROLLMENT = "Maximum enrollment is reached for the student"
    COURSE_FULL = "Course is full"
    NOT_ENROLLED = "Student is not enrolled in this course"
    LOAD_COMPLETE = "Professor's load is complete"
    ALREADY_TEACHING = "Professor is already teaching this course"
    NOT_TEACHING = "Professor is not teaching this course"


@dataclass(frozen=True)
class Outcome:
    """Result of enroll, drop, teach or exempt.

    Truthy on success. On failure `refusal` says why and nothing was changed.
    """

    refusal: Refusal | None = None

    @property
    def ok(self) -> bool:
        return self.refusal is None

    def __bool__(self) -> bool:
        return self.ok


SUCCESS = Outcome()


@dataclass(frozen=True)
class Course:
    """A course students enroll in and professors teach."""

    id: int
    name: str
    level: CourseLevel


@dataclass(frozen=True)
class MemberInfo:
    """Attributes shared by every university member."""

    id: int
    name: str


@dataclass(frozen=True)
class Student:
    """A member who enrolls in courses."""

    info: MemberInfo

    @property
    def id(self) -> int:
        return self.info.id

    @property
    def name(self) -> str:
        return self.info.name


@dataclass(frozen=True)
class Professor:
    """A member who teaches courses."""

    info: MemberInfo

    @property
    def id(self) -> int:
        return self.info.id

    @property
    def name(self) -> str:
        return self.info.name


@dataclass(frozen=True)
class Limits:
    """Capacity and load limits enforced by the registry."""

    course_capacity: int = COURSE_CAPACITY
    max_enrollment: int = MAX_ENROLLMENT
    max_load: int = MAX_LOAD
