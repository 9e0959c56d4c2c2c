"""Registry - In-memory tables of courses, students and professors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from unicourse.registry.exceptions import (
    CourseExistsError,
    CourseNotFoundError,
    ProfessorNotFoundError,
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
from unicourse.registry.relations import RelationIndex

logger = logging.getLogger(__name__)


class Registry:
    """Owns every entity and relationship for one session.

    Students and professors draw ids from one shared member counter;
    courses have their own counter. Both start at zero and the first
    entity created gets id 1.
    """

    def __init__(self, limits: Limits | None = None) -> None:
        """Initialize an empty Registry.

        Args:
            limits: Capacity and load limits. Defaults to 3/3/2.
        """
        self.limits = limits if limits is not None else Limits()
        self._member_count = 0
        self._course_count = 0
        self._students: dict[int, Student] = {}
        self._professors: dict[int, Professor] = {}
        self._courses: dict[int, Course] = {}
        self._enrollments: RelationIndex[int, int] = RelationIndex()
        self._assignments: RelationIndex[int, int] = RelationIndex()

    # --- Tables ---

    @property
    def students(self) -> Mapping[int, Student]:
        return MappingProxyType(self._students)

    @property
    def professors(self) -> Mapping[int, Professor]:
        return MappingProxyType(self._professors)

    @property
    def courses(self) -> Mapping[int, Course]:
        return MappingProxyType(self._courses)

    # --- Creation ---

    def add_course(self, name: str, level: CourseLevel) -> Course:
        """Create a course with the next course id.

        Args:
            name: Unique course name.
            level: Bachelor or master.

        Returns:
            The created Course.

        Raises:
            CourseExistsError: If a course with this name already exists.
        """
        if self.course_name_taken(name):
            raise CourseExistsError(f"Course with name '{name}' already exists")
        self._course_count += 1
        course = Course(id=self._course_count, name=name, level=level)
        self._courses[course.id] = course
        logger.debug("Added course %d %r (%s)", course.id, name, level)
        return course

    def add_student(self, name: str) -> Student:
        """Create a student with the next member id."""
        student = Student(self._next_member(name))
        self._students[student.id] = student
        logger.debug("Added student %d %r", student.id, name)
        return student

    def add_professor(self, name: str) -> Professor:
        """Create a professor with the next member id."""
        professor = Professor(self._next_member(name))
        self._professors[professor.id] = professor
        logger.debug("Added professor %d %r", professor.id, name)
        return professor

    def _next_member(self, name: str) -> MemberInfo:
        self._member_count += 1
        return MemberInfo(id=self._member_count, name=name)

    # --- Lookup ---

    def find_student(self, student_id: int) -> Student | None:
        return self._students.get(student_id)

    def find_professor(self, professor_id: int) -> Professor | None:
        return self._professors.get(professor_id)

    def find_course(self, course_id: int) -> Course | None:
        return self._courses.get(course_id)

    def get_student(self, student_id: int) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        student = self._students.get(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student with id {student_id} not found")
        return student

    def get_professor(self, professor_id: int) -> Professor:
        """Get professor by ID.

        Raises:
            ProfessorNotFoundError: If professor doesn't exist
        """
        professor = self._professors.get(professor_id)
        if professor is None:
            raise ProfessorNotFoundError(f"Professor with id {professor_id} not found")
        return professor

    def get_course(self, course_id: int) -> Course:
        """Get course by ID.

        Raises:
            CourseNotFoundError: If course doesn't exist
        """
        course = self._courses.get(course_id)
        if course is None:
            raise CourseNotFoundError(f"Course with id {course_id} not found")
        return course

    def course_name_taken(self, name: str) -> bool:
        return any(course.name == name for course in self._courses.values())

    def courses_of_student(self, student_id: int) -> list[Course]:
        self.get_student(student_id)
        return [self._courses[cid] for cid in self._enrollments.rights_of(student_id)]

    def students_of_course(self, course_id: int) -> list[Student]:
        self.get_course(course_id)
        return [self._students[sid] for sid in self._enrollments.lefts_of(course_id)]

    def courses_of_professor(self, professor_id: int) -> list[Course]:
        self.get_professor(professor_id)
        return [self._courses[cid] for cid in self._assignments.rights_of(professor_id)]

    # --- Relationships ---

    def enroll(self, student_id: int, course_id: int) -> Outcome:
        """Enroll a student in a course.

        Args:
            student_id: ID of an existing student.
            course_id: ID of an existing course.

        Returns:
            SUCCESS, or an Outcome carrying the Refusal. Refusals are
            checked in order: already enrolled, student at max enrollment,
            course full.

        Raises:
            StudentNotFoundError: If the student doesn't exist
            CourseNotFoundError: If the course doesn't exist
        """
        student = self.get_student(student_id)
        course = self.get_course(course_id)

        if self._enrollments.contains(student.id, course.id):
            return self._refuse("enroll", student.id, course.id, Refusal.ALREADY_ENROLLED)
        if self._enrollments.count_rights(student.id) >= self.limits.max_enrollment:
            return self._refuse("enroll", student.id, course.id, Refusal.MAX_ENROLLMENT)
        if self._enrollments.count_lefts(course.id) >= self.limits.course_capacity:
            return self._refuse("enroll", student.id, course.id, Refusal.COURSE_FULL)

        self._enrollments.add(student.id, course.id)
        logger.debug("Student %d enrolled in course %d", student.id, course.id)
        return SUCCESS

    def drop(self, student_id: int, course_id: int) -> Outcome:
        """Drop a student from a course.

        Returns:
            SUCCESS, or NOT_ENROLLED if the student isn't in the course.

        Raises:
            StudentNotFoundError: If the student doesn't exist
            CourseNotFoundError: If the course doesn't exist
        """
        student = self.get_student(student_id)
        course = self.get_course(course_id)

        if not self._enrollments.remove(student.id, course.id):
            return self._refuse("drop", student.id, course.id, Refusal.NOT_ENROLLED)

        logger.debug("Student %d dropped course %d", student.id, course.id)
        return SUCCESS

    def teach(self, professor_id: int, course_id: int) -> Outcome:
        """Assign a professor to teach a course.

        The course does not record who teaches it.

        Returns:
            SUCCESS, or an Outcome carrying the Refusal. Refusals are
            checked in order: load complete, already teaching.

        Raises:
            ProfessorNotFoundError: If the professor doesn't exist
            CourseNotFoundError: If the course doesn't exist
        """
        professor = self.get_professor(professor_id)
        course = self.get_course(course_id)

        if self._assignments.count_rights(professor.id) >= self.limits.max_load:
            return self._refuse("teach", professor.id, course.id, Refusal.LOAD_COMPLETE)
        if self._assignments.contains(professor.id, course.id):
            return self._refuse("teach", professor.id, course.id, Refusal.ALREADY_TEACHING)

        self._assignments.add(professor.id, course.id)
        logger.debug("Professor %d assigned to course %d", professor.id, course.id)
        return SUCCESS

    def exempt(self, professor_id: int, course_id: int) -> Outcome:
        """Release a professor from teaching a course.

        Returns:
            SUCCESS, or NOT_TEACHING if the professor doesn't teach it.

        Raises:
            ProfessorNotFoundError: If the professor doesn't exist
            CourseNotFoundError: If the course doesn't exist
        """
        professor = self.get_professor(professor_id)
        course = self.get_course(course_id)

        if not self._assignments.remove(professor.id, course.id):
            return self._refuse("exempt", professor.id, course.id, Refusal.NOT_TEACHING)

        logger.debug("Professor %d exempted from course %d", professor.id, course.id)
        return SUCCESS

    @staticmethod
    def _refuse(action: str, member_id: int, course_id: int, refusal: Refusal) -> Outcome:
        logger.info(
            "Refused %s (member=%d, course=%d): %s",
            action,
            member_id,
            course_id,
            refusal.name,
        )
        return Outcome(refusal=refusal)
