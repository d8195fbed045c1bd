from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import GradeRecord
from ..context import get_store_from_info
from .course import course_from_record
from .student import student_from_record

if TYPE_CHECKING:
    from ..types.course import Course
    from ..types.grade import Grade
    from ..types.student import Student

logger = get_logger(__name__)


def grade_from_record(record: GradeRecord) -> Grade:
    """Convert a stored grade record to the GraphQL type."""
    from ..types.grade import Grade as GradeType

    return GradeType(
        id=record.id,
        course_id=record.course_id,
        student_id=record.student_id,
        grade=record.grade,
    )


# Query resolvers
async def resolve_grades(info: strawberry.Info) -> list[Grade]:
    """Resolve all grades in store order."""
    store = get_store_from_info(info)
    return [grade_from_record(record) for record in store.grades.list()]


async def resolve_grade_by_id(info: strawberry.Info, id: int | None) -> Grade | None:
    """Resolve a grade by its ID. An omitted id matches no grade."""
    store = get_store_from_info(info)
    record = store.grades.get(id)
    if record is None:
        return None
    return grade_from_record(record)


# Field resolvers
async def resolve_grade_course(grade: Grade, info: strawberry.Info) -> Course | None:
    """Resolve the course of a grade; None if it does not exist."""
    store = get_store_from_info(info)
    record = store.courses.get(grade.course_id)
    if record is None:
        return None
    return course_from_record(record)


async def resolve_grade_student(grade: Grade, info: strawberry.Info) -> Student | None:
    """Resolve the student of a grade; None if it does not exist."""
    store = get_store_from_info(info)
    record = store.students.get(grade.student_id)
    if record is None:
        return None
    return student_from_record(record)


# Mutation resolvers
async def add_grade(
    info: strawberry.Info, course_id: int, student_id: int, grade: float
) -> Grade:
    """Create a grade with the next grade id. Course and student are not checked."""
    store = get_store_from_info(info)
    record = store.grades.add(course_id=course_id, student_id=student_id, grade=grade)
    logger.info(
        "Grade created", grade_id=record.id, course_id=course_id, student_id=student_id
    )
    return grade_from_record(record)


async def delete_grade(info: strawberry.Info, id: int) -> Grade | None:
    """Delete a grade and return it."""
    store = get_store_from_info(info)
    record = store.grades.remove(id)
    if record is None:
        logger.info("Grade not found for deletion", grade_id=id)
        return None

    logger.info("Grade deleted", grade_id=id)
    return grade_from_record(record)
