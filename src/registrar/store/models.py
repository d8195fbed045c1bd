"""Pydantic models for the records held in the entity store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Base for stored records: immutable, keyed by a positive integer id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0)


class CourseRecord(Record):
    name: str
    description: str


class StudentRecord(Record):
    name: str
    last_name: str = Field(..., alias="lastName")
    course_id: int = Field(..., alias="courseId")


class GradeRecord(Record):
    course_id: int = Field(..., alias="courseId")
    student_id: int = Field(..., alias="studentId")
    grade: float
