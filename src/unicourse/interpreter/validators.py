"""Line validators for the command protocol.

Name rules are shared with seed data and live in the registry models.
"""

from __future__ import annotations

import re

from unicourse.interpreter.models import Command
from unicourse.registry.models import RESERVED_WORDS, is_course_name, is_member_name

ID_PATTERN = re.compile(r"^[0-9]+$")

COMMANDS = frozenset(command.value for command in Command)

__all__ = [
    "COMMANDS",
    "ID_PATTERN",
    "RESERVED_WORDS",
    "is_command",
    "is_course_name",
    "is_member_name",
    "parse_id",
]


def is_command(text: str) -> bool:
    """Check whether text is a command word (case-sensitive)."""
    return text in COMMANDS


def parse_id(text: str) -> int | None:
    """Parse a line holding only ASCII digits.

    Returns:
        The integer, or None if the line is not all digits.
    """
    if ID_PATTERN.fullmatch(text) is None:
        return None
    return int(text)
