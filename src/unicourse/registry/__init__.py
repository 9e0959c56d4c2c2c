"""Registry - In-memory courses, students, professors and their relationships."""

from unicourse.registry.exceptions import (
    CourseExistsError,
    CourseNotFoundError,
    ProfessorNotFoundError,
    RegistryError,
    SeedError,
    StudentNotFoundError,
)
from unicourse.registry.models import (
    SUCCESS,
    Course,
    CourseLevel,
    Limits,
    MemberInfo,
    Outcome,
    Professor,
    Refusal,
    Student,
)
from unicourse.registry.registry import Registry
from unicourse.registry.relations import RelationIndex
from unicourse.registry.seed import DEFAULT_SEED, apply_seed, load_seed_file

__all__ = [
    "DEFAULT_SEED",
    "SUCCESS",
    "Course",
    "CourseExistsError",
    "CourseLevel",
    "CourseNotFoundError",
    "Limits",
    "MemberInfo",
    "Outcome",
    "Professor",
    "ProfessorNotFoundError",
    "Refusal",
    "Registry",
    "RegistryError",
    "RelationIndex",
    "SeedError",
    "Student",
    "StudentNotFoundError",
    "apply_seed",
    "load_seed_file",
]
