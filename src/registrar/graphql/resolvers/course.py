from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import CourseRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.course import Course

logger = get_logger(__name__)


def course_from_record(record: CourseRecord) -> Course:
    """Convert a stored course record to the GraphQL type."""
    from ..types.course import Course as CourseType

    return CourseType(id=record.id, name=record.name, description=record.description)


# Query resolvers
async def resolve_courses(info: strawberry.Info) -> list[Course]:
    """Resolve all courses in store order."""
    store = get_store_from_info(info)
    return [course_from_record(record) for record in store.courses.list()]


async def resolve_course_by_id(info: strawberry.Info, id: int | None) -> Course | None:
    """
    Resolve a course by its ID.

    An omitted id matches no course.
    """
    store = get_store_from_info(info)
    record = store.courses.get(id)
    if record is None:
        return None
    return course_from_record(record)


# Mutation resolvers
async def add_course(info: strawberry.Info, name: str, description: str) -> Course:
    """Create a course with the next course id."""
    store = get_store_from_info(info)
    record = store.courses.add(name=name, description=description)
    logger.info("Course created", course_id=record.id)
    return course_from_record(record)


async def delete_course(info: strawberry.Info, id: int) -> Course | None:
    """
    Delete a course and return it.

    Students and grades referencing the course are left in place.
    """
    store = get_store_from_info(info)
    record = store.courses.remove(id)
    if record is None:
        logger.info("Course not found for deletion", course_id=id)
        return None

    logger.info("Course deleted", course_id=id)
    return course_from_record(record)
