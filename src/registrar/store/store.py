"""
Entity store holding the course, student and grade collections.
"""

from __future__ import annotations

from dataclasses import dataclass

from .collection import EntityCollection
from .models import CourseRecord, GradeRecord, StudentRecord


@dataclass(frozen=True)
class DanglingReference:
    """A record field pointing at an id that does not exist."""

    kind: str
    record_id: int
    field: str
    missing_id: int


class EntityStore:
    """
    In-memory source of truth for all records while the process runs.

    Resolvers only go through the collection operations (list, get, add,
    remove); no cross-entity consistency is enforced, so deleting a course
    leaves students and grades that still point at it.
    """

    def __init__(self) -> None:
        self.courses: EntityCollection[CourseRecord] = EntityCollection("course", CourseRecord)
        self.students: EntityCollection[StudentRecord] = EntityCollection(
            "student", StudentRecord
        )
        self.grades: EntityCollection[GradeRecord] = EntityCollection("grade", GradeRecord)

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        return {
            "courses": len(self.courses),
            "students": len(self.students),
            "grades": len(self.grades),
        }

    def find_dangling_references(self) -> list[DanglingReference]:
        """
        Report student and grade references to missing courses or students.

        Reporting only: nothing is removed or repaired.
        """
        dangling: list[DanglingReference] = []

        for student in self.students.list():
            if student.course_id not in self.courses:
                dangling.append(
                    DanglingReference("student", student.id, "courseId", student.course_id)
                )

        for grade in self.grades.list():
            if grade.course_id not in self.courses:
                dangling.append(DanglingReference("grade", grade.id, "courseId", grade.course_id))
            if grade.student_id not in self.students:
                dangling.append(
                    DanglingReference("grade", grade.id, "studentId", grade.student_id)
                )

        return dangling
