"""Unit tests for Registry models."""

from unicourse.registry.models import (
    SUCCESS,
    CourseLevel,
    Limits,
    MemberInfo,
    Outcome,
    Professor,
    Refusal,
    Student,
)


class TestCourseLevelEnum:
    """Tests for CourseLevel enum."""

    def test_course_level_values(self) -> None:
        """Both levels exist."""
        assert CourseLevel.BACHELOR.value == "bachelor"
        assert CourseLevel.MASTER.value == "master"
        assert len(CourseLevel) == 2

    def test_parse_is_case_insensitive(self) -> None:
        """Any casing of a level name parses."""
        assert CourseLevel.parse("master") is CourseLevel.MASTER
        assert CourseLevel.parse("MASTER") is CourseLevel.MASTER
        assert CourseLevel.parse("BaChElOr") is CourseLevel.BACHELOR

    def test_parse_unknown_returns_none(self) -> None:
        """Unknown text gives None."""
        assert CourseLevel.parse("phd") is None
        assert CourseLevel.parse("") is None
        assert CourseLevel.parse(" master") is None


class TestOutcome:
    """Tests for Outcome."""

    def test_success_is_truthy(self) -> None:
        assert SUCCESS
        assert SUCCESS.ok
        assert SUCCESS.refusal is None

    def test_refusal_is_falsy(self) -> None:
        outcome = Outcome(refusal=Refusal.COURSE_FULL)
        assert not outcome
        assert outcome.ok is False
        assert outcome.refusal == "Course is full"


class TestMembers:
    """Tests for Student and Professor."""

    def test_student_exposes_member_info(self) -> None:
        student = Student(MemberInfo(id=4, name="Alice"))
        assert student.id == 4
        assert student.name == "Alice"

    def test_professor_exposes_member_info(self) -> None:
        professor = Professor(MemberInfo(id=7, name="Ali"))
        assert professor.id == 7
        assert professor.name == "Ali"

    def test_student_and_professor_are_distinct(self) -> None:
        """Same member info does not make a student equal to a professor."""
        info = MemberInfo(id=1, name="Sam")
        assert Student(info) != Professor(info)


class TestLimits:
    """Tests for Limits defaults."""

    def test_defaults(self) -> None:
        limits = Limits()
        assert limits.course_capacity == 3
        assert limits.max_enrollment == 3
        assert limits.max_load == 2
