"""
Grade GraphQL type definitions
"""

import strawberry

from .course import Course
from .student import Student


@strawberry.type(description="Represent grades of students")
class Grade:
    """Grade type for GraphQL API."""

    id: int
    course_id: int
    student_id: int
    grade: float

    @strawberry.field
    async def course(self, info: strawberry.Info) -> Course | None:
        """Get the course this grade was given in."""
        from ..resolvers.grade import resolve_grade_course

        return await resolve_grade_course(self, info)

    @strawberry.field
    async def student(self, info: strawberry.Info) -> Student | None:
        """Get the student who received this grade."""
        from ..resolvers.grade import resolve_grade_student

        return await resolve_grade_student(self, info)
