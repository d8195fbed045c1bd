from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import StudentRecord
from ..context import get_store_from_info
from .course import course_from_record

if TYPE_CHECKING:
    from ..types.course import Course
    from ..types.student import Student

logger = get_logger(__name__)


def student_from_record(record: StudentRecord) -> Student:
    """Convert a stored student record to the GraphQL type."""
    from ..types.student import Student as StudentType

    return StudentType(
        id=record.id,
        name=record.name,
        last_name=record.last_name,
        course_id=record.course_id,
    )


# Query resolvers
async def resolve_students(info: strawberry.Info) -> list[Student]:
    """Resolve all students in store order."""
    store = get_store_from_info(info)
    return [student_from_record(record) for record in store.students.list()]


async def resolve_student_by_id(info: strawberry.Info, id: int | None) -> Student | None:
    """Resolve a student by its ID. An omitted id matches no student."""
    store = get_store_from_info(info)
    record = store.students.get(id)
    if record is None:
        return None
    return student_from_record(record)


# Field resolvers
async def resolve_student_course(student: Student, info: strawberry.Info) -> Course | None:
    """Resolve the course a student references; None if it does not exist."""
    store = get_store_from_info(info)
    record = store.courses.get(student.course_id)
    if record is None:
        return None
    return course_from_record(record)


# Mutation resolvers
async def add_student(
    info: strawberry.Info, name: str, last_name: str, course_id: int
) -> Student:
    """Create a student with the next student id. The course is not checked."""
    store = get_store_from_info(info)
    record = store.students.add(name=name, last_name=last_name, course_id=course_id)
    logger.info("Student created", student_id=record.id, course_id=course_id)
    return student_from_record(record)


async def delete_student(info: strawberry.Info, id: int) -> Student | None:
    """Delete a student and return it, leaving their grades in place."""
    store = get_store_from_info(info)
    record = store.students.remove(id)
    if record is None:
        logger.info("Student not found for deletion", student_id=id)
        return None

    logger.info("Student deleted", student_id=id)
    return student_from_record(record)
