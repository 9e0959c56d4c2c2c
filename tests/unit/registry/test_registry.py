"""Unit tests for Registry operations."""

import pytest

from unicourse.registry import (
    CourseExistsError,
    CourseLevel,
    CourseNotFoundError,
    Limits,
    ProfessorNotFoundError,
    Refusal,
    Registry,
    StudentNotFoundError,
)


def _courses(registry: Registry, count: int) -> list[int]:
    names = ["alpha", "beta", "gamma", "delta", "epsilon"]
    return [registry.add_course(name, CourseLevel.BACHELOR).id for name in names[:count]]


@pytest.mark.unit
class TestIdAssignment:
    """Tests for id counters."""

    def test_first_course_gets_id_one(self, registry: Registry) -> None:
        course = registry.add_course("java_beginner", CourseLevel.BACHELOR)

        assert course.id == 1
        assert course.name == "java_beginner"
        assert course.level is CourseLevel.BACHELOR

    def test_members_share_counter(self, registry: Registry) -> None:
        """Students and professors draw from one counter."""
        alice = registry.add_student("Alice")
        ali = registry.add_professor("Ali")
        bob = registry.add_student("Bob")

        assert (alice.id, ali.id, bob.id) == (1, 2, 3)

    def test_course_counter_is_separate(self, registry: Registry) -> None:
        """Creating members does not advance the course counter."""
        registry.add_student("Alice")
        registry.add_professor("Ali")
        course = registry.add_course("algorithms", CourseLevel.MASTER)

        assert course.id == 1

    def test_member_tables_are_separate(self, registry: Registry) -> None:
        """A professor id is not a student id."""
        registry.add_student("Alice")
        ali = registry.add_professor("Ali")

        assert registry.find_student(ali.id) is None
        assert registry.find_professor(ali.id) == ali


@pytest.mark.unit
class TestLookup:
    """Tests for find_* and get_*."""

    def test_find_missing_returns_none(self, registry: Registry) -> None:
        assert registry.find_student(0) is None
        assert registry.find_professor(0) is None
        assert registry.find_course(0) is None

    def test_get_missing_raises(self, registry: Registry) -> None:
        with pytest.raises(StudentNotFoundError):
            registry.get_student(1)
        with pytest.raises(ProfessorNotFoundError):
            registry.get_professor(1)
        with pytest.raises(CourseNotFoundError):
            registry.get_course(1)

    def test_tables_are_read_only(self, registry: Registry) -> None:
        registry.add_student("Alice")

        assert list(registry.students) == [1]
        with pytest.raises(TypeError):
            registry.students[2] = registry.students[1]  # type: ignore[index]

    def test_course_name_taken(self, registry: Registry) -> None:
        registry.add_course("algorithms", CourseLevel.MASTER)

        assert registry.course_name_taken("algorithms")
        assert not registry.course_name_taken("Algorithms")

    def test_duplicate_course_name_raises(self, registry: Registry) -> None:
        registry.add_course("algorithms", CourseLevel.MASTER)

        with pytest.raises(CourseExistsError):
            registry.add_course("algorithms", CourseLevel.BACHELOR)
        assert len(registry.courses) == 1


@pytest.mark.unit
class TestEnroll:
    """Tests for enroll."""

    def test_enroll_is_symmetric(self, registry: Registry) -> None:
        course = registry.add_course("java_beginner", CourseLevel.BACHELOR)
        alice = registry.add_student("Alice")

        assert registry.enroll(alice.id, course.id)

        assert registry.courses_of_student(alice.id) == [course]
        assert registry.students_of_course(course.id) == [alice]

    def test_enroll_twice_refused(self, registry: Registry) -> None:
        course = registry.add_course("java_beginner", CourseLevel.BACHELOR)
        alice = registry.add_student("Alice")
        registry.enroll(alice.id, course.id)

        outcome = registry.enroll(alice.id, course.id)

        assert outcome.refusal is Refusal.ALREADY_ENROLLED
        assert registry.students_of_course(course.id) == [alice]

    def test_fourth_course_refused(self, registry: Registry) -> None:
        """A student with three courses can't take a fourth."""
        alice = registry.add_student("Alice")
        course_ids = _courses(registry, 4)
        for course_id in course_ids[:3]:
            assert registry.enroll(alice.id, course_id)
        before = registry.courses_of_student(alice.id)

        outcome = registry.enroll(alice.id, course_ids[3])

        assert outcome.refusal is Refusal.MAX_ENROLLMENT
        assert registry.courses_of_student(alice.id) == before
        assert registry.students_of_course(course_ids[3]) == []

    def test_fourth_student_refused(self, registry: Registry) -> None:
        """A course with three students is full."""
        course = registry.add_course("algorithms", CourseLevel.MASTER)
        students = [registry.add_student(name) for name in ("Alice", "Bob", "Alex", "Eve")]
        for student in students[:3]:
            assert registry.enroll(student.id, course.id)
        before = registry.students_of_course(course.id)

        outcome = registry.enroll(students[3].id, course.id)

        assert outcome.refusal is Refusal.COURSE_FULL
        assert registry.students_of_course(course.id) == before
        assert registry.courses_of_student(students[3].id) == []

    def test_refusal_order(self, registry: Registry) -> None:
        """Already enrolled is reported before max enrollment."""
        alice = registry.add_student("Alice")
        course_ids = _courses(registry, 3)
        for course_id in course_ids:
            registry.enroll(alice.id, course_id)

        outcome = registry.enroll(alice.id, course_ids[0])

        assert outcome.refusal is Refusal.ALREADY_ENROLLED

    def test_max_enrollment_before_course_full(self, registry: Registry) -> None:
        """Max enrollment is reported before course full."""
        alice = registry.add_student("Alice")
        course_ids = _courses(registry, 4)
        for course_id in course_ids[:3]:
            registry.enroll(alice.id, course_id)
        for name in ("Bob", "Alex", "Eve"):
            registry.enroll(registry.add_student(name).id, course_ids[3])

        outcome = registry.enroll(alice.id, course_ids[3])

        assert outcome.refusal is Refusal.MAX_ENROLLMENT

    def test_unknown_ids_raise(self, registry: Registry) -> None:
        course = registry.add_course("algorithms", CourseLevel.MASTER)
        ali = registry.add_professor("Ali")

        with pytest.raises(StudentNotFoundError):
            registry.enroll(ali.id, course.id)
        with pytest.raises(CourseNotFoundError):
            registry.enroll(registry.add_student("Alice").id, 99)

    def test_custom_capacity(self) -> None:
        registry = Registry(limits=Limits(course_capacity=1))
        course = registry.add_course("algorithms", CourseLevel.MASTER)
        registry.enroll(registry.add_student("Alice").id, course.id)

        outcome = registry.enroll(registry.add_student("Bob").id, course.id)

        assert outcome.refusal is Refusal.COURSE_FULL


@pytest.mark.unit
class TestDrop:
    """Tests for drop."""

    def test_enroll_then_drop_restores_state(self, seeded_registry: Registry) -> None:
        """Round trip leaves both sides as they were."""
        registry = seeded_registry
        bob = registry.get_student(2)
        course_ids = list(registry.courses)
        for course_id in course_ids:
            courses_before = registry.courses_of_student(bob.id)
            students_before = registry.students_of_course(course_id)
            if registry.enroll(bob.id, course_id):
                assert registry.drop(bob.id, course_id)
                assert registry.courses_of_student(bob.id) == courses_before
                assert registry.students_of_course(course_id) == students_before

    def test_drop_not_enrolled_refused(self, registry: Registry) -> None:
        course = registry.add_course("algorithms", CourseLevel.MASTER)
        alice = registry.add_student("Alice")

        outcome = registry.drop(alice.id, course.id)

        assert outcome.refusal is Refusal.NOT_ENROLLED

    def test_drop_frees_a_seat(self, registry: Registry) -> None:
        course = registry.add_course("algorithms", CourseLevel.MASTER)
        students = [registry.add_student(name) for name in ("Alice", "Bob", "Alex", "Eve")]
        for student in students[:3]:
            registry.enroll(student.id, course.id)

        assert registry.drop(students[0].id, course.id)
        assert registry.enroll(students[3].id, course.id)
        assert registry.students_of_course(course.id) == students[1:]


@pytest.mark.unit
class TestTeach:
    """Tests for teach and exempt."""

    def test_teach_records_course(self, registry: Registry) -> None:
        course = registry.add_course("algorithms", CourseLevel.MASTER)
        ali = registry.add_professor("Ali")

        assert registry.teach(ali.id, course.id)

        assert registry.courses_of_professor(ali.id) == [course]
        assert registry.students_of_course(course.id) == []

    def test_third_course_refused(self, registry: Registry) -> None:
        ali = registry.add_professor("Ali")
        course_ids = _courses(registry, 3)
        registry.teach(ali.id, course_ids[0])
        registry.teach(ali.id, course_ids[1])

        outcome = registry.teach(ali.id, course_ids[2])

        assert outcome.refusal is Refusal.LOAD_COMPLETE
        assert len(registry.courses_of_professor(ali.id)) == 2

    def test_teach_twice_refused(self, registry: Registry) -> None:
        ali = registry.add_professor("Ali")
        course_ids = _courses(registry, 1)
        registry.teach(ali.id, course_ids[0])

        outcome = registry.teach(ali.id, course_ids[0])

        assert outcome.refusal is Refusal.ALREADY_TEACHING

    def test_load_checked_before_duplicate(self, registry: Registry) -> None:
        """A full load is reported even for a course already taught."""
        ali = registry.add_professor("Ali")
        course_ids = _courses(registry, 2)
        for course_id in course_ids:
            registry.teach(ali.id, course_id)

        outcome = registry.teach(ali.id, course_ids[0])

        assert outcome.refusal is Refusal.LOAD_COMPLETE

    def test_exempt_removes_course(self, registry: Registry) -> None:
        ali = registry.add_professor("Ali")
        course_ids = _courses(registry, 2)
        for course_id in course_ids:
            registry.teach(ali.id, course_id)

        assert registry.exempt(ali.id, course_ids[0])

        assert [c.id for c in registry.courses_of_professor(ali.id)] == course_ids[1:]

    def test_exempt_not_teaching_refused(self, registry: Registry) -> None:
        ali = registry.add_professor("Ali")
        course_ids = _courses(registry, 2)
        registry.teach(ali.id, course_ids[0])

        outcome = registry.exempt(ali.id, course_ids[1])

        assert outcome.refusal is Refusal.NOT_TEACHING
        assert [c.id for c in registry.courses_of_professor(ali.id)] == course_ids[:1]

    def test_unknown_professor_raises(self, registry: Registry) -> None:
        course_ids = _courses(registry, 1)
        alice = registry.add_student("Alice")

        with pytest.raises(ProfessorNotFoundError):
            registry.teach(alice.id, course_ids[0])
