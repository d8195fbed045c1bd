"""
Student GraphQL type definitions
"""

import strawberry

from .course import Course


@strawberry.type(description="Represent students")
class Student:
    """Student type for GraphQL API."""

    id: int
    name: str
    last_name: str
    course_id: int

    @strawberry.field
    async def course(self, info: strawberry.Info) -> Course | None:
        """Get the course this student is enrolled in."""
        from ..resolvers.student import resolve_student_course

        return await resolve_student_course(self, info)
