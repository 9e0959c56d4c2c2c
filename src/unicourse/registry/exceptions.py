"""Custom exceptions for the Registry."""


class RegistryError(Exception):
    """Base exception for Registry errors."""


class CourseExistsError(RegistryError):
    """Course with given name already exists."""


class StudentNotFoundError(RegistryError):
    """Student with given ID does not exist."""


class ProfessorNotFoundError(RegistryError):
    """Professor with given ID does not exist."""


class CourseNotFoundError(RegistryError):
    """Course with given ID does not exist."""


class SeedError(RegistryError):
    """Seed data is malformed or cannot be applied."""
