"""Seed data loaded into a Registry before the interpreter starts.

Seed data is a mapping with five optional keys. Relationships refer to
entities by name:

    courses:
      - {name: java_beginner, level: bachelor}
    students: [Alice]
    professors: [Ali]
    enrollments:
      - {student: Alice, course: java_beginner}
    assignments:
      - {professor: Ali, course: java_beginner}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from unicourse.registry.exceptions import CourseExistsError, SeedError
from unicourse.registry.models import CourseLevel, is_course_name, is_member_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from unicourse.registry.models import Professor, Student
    from unicourse.registry.registry import Registry

logger = logging.getLogger(__name__)

DEFAULT_SEED: dict[str, Any] = {
    "courses": [
        {"name": "java_beginner", "level": "bachelor"},
        {"name": "java_intermediate", "level": "bachelor"},
        {"name": "python_basics", "level": "bachelor"},
        {"name": "algorithms", "level": "master"},
        {"name": "advanced_programming", "level": "master"},
        {"name": "mathematical_analysis", "level": "master"},
        {"name": "computer_vision", "level": "master"},
    ],
    "students": ["Alice", "Bob", "Alex"],
    "professors": ["Ali", "Ahmed", "Andrey"],
    "enrollments": [
        {"student": "Alice", "course": "java_beginner"},
        {"student": "Alice", "course": "java_intermediate"},
        {"student": "Alice", "course": "python_basics"},
        {"student": "Bob", "course": "java_beginner"},
        {"student": "Bob", "course": "algorithms"},
        {"student": "Alex", "course": "advanced_programming"},
    ],
    "assignments": [
        {"professor": "Ali", "course": "java_beginner"},
        {"professor": "Ali", "course": "java_intermediate"},
        {"professor": "Ahmed", "course": "python_basics"},
        {"professor": "Ahmed", "course": "advanced_programming"},
        {"professor": "Andrey", "course": "mathematical_analysis"},
    ],
}

_SEED_KEYS = ("courses", "students", "professors", "enrollments", "assignments")


def load_seed_file(seed_path: Path | str) -> dict[str, Any]:
    """Load seed data from a YAML file.

    Args:
        seed_path: Path to the seed YAML file.

    Returns:
        The seed mapping.

    Raises:
        SeedError: If the file doesn't exist or is not a YAML mapping.
    """
    seed_path = Path(seed_path)

    if not seed_path.exists():
        raise SeedError(f"Seed file not found: {seed_path}")

    try:
        with open(seed_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SeedError(f"Invalid YAML in {seed_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SeedError(f"Seed data must be a YAML mapping, got {type(data).__name__}")

    return data


def apply_seed(registry: Registry, data: dict[str, Any]) -> None:
    """Create the entities and relationships described by seed data.

    Entities are created in file order: courses, then students, then
    professors, so ids are predictable.

    Args:
        registry: Registry to fill.
        data: Seed mapping (see module docstring).

    Raises:
        SeedError: If the data is malformed, names an unknown entity, or a
            relationship is refused by the registry.
    """
    unknown = set(data) - set(_SEED_KEYS)
    if unknown:
        raise SeedError(f"Unknown seed keys: {', '.join(sorted(unknown))}")

    courses: dict[str, int] = {}
    for entry in _entries(data, "courses"):
        name, level_text = _fields(entry, "courses", "name", "level")
        if not is_course_name(name):
            raise SeedError(f"Invalid course name '{name}'")
        level = CourseLevel.parse(level_text)
        if level is None:
            raise SeedError(f"Unknown course level '{level_text}' for course '{name}'")
        try:
            courses[name] = registry.add_course(name, level).id
        except CourseExistsError as e:
            raise SeedError(str(e)) from e

    students = _add_members(data, "students", registry.add_student)
    professors = _add_members(data, "professors", registry.add_professor)

    for entry in _entries(data, "enrollments"):
        student, course = _fields(entry, "enrollments", "student", "course")
        outcome = registry.enroll(
            _resolve(students, student, "student"), _resolve(courses, course, "course")
        )
        if not outcome:
            raise SeedError(f"Cannot enroll {student} in {course}: {outcome.refusal}")

    for entry in _entries(data, "assignments"):
        professor, course = _fields(entry, "assignments", "professor", "course")
        outcome = registry.teach(
            _resolve(professors, professor, "professor"), _resolve(courses, course, "course")
        )
        if not outcome:
            raise SeedError(f"Cannot assign {professor} to {course}: {outcome.refusal}")

    logger.info(
        "Seeded %d courses, %d students, %d professors",
        len(courses),
        len(students),
        len(professors),
    )


def _entries(data: dict[str, Any], key: str) -> list[Any]:
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise SeedError(f"'{key}' must be a list")
    return entries


def _fields(entry: Any, key: str, *names: str) -> tuple[str, ...]:
    if not isinstance(entry, dict) or any(name not in entry for name in names):
        raise SeedError(f"Each '{key}' entry needs {', '.join(names)}: {entry!r}")
    values = tuple(entry[name] for name in names)
    if not all(isinstance(value, str) for value in values):
        raise SeedError(f"Each '{key}' entry needs string values: {entry!r}")
    return values


def _add_members(
    data: dict[str, Any], key: str, add: Callable[[str], Student | Professor]
) -> dict[str, int]:
    members: dict[str, int] = {}
    for name in _entries(data, key):
        if not isinstance(name, str) or not is_member_name(name):
            raise SeedError(f"Invalid name {name!r} in '{key}'")
        if name in members:
            raise SeedError(f"Duplicate name '{name}' in '{key}'")
        members[name] = add(name).id
    return members


def _resolve(ids: dict[str, int], name: str, kind: str) -> int:
    if name not in ids:
        raise SeedError(f"Unknown {kind} '{name}'")
    return ids[name]
