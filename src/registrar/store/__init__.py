"""In-memory entity store for courses, students and grades."""

from .collection import EntityCollection
from .loader import SeedDataError, load_store
from .models import CourseRecord, GradeRecord, StudentRecord
from .store import DanglingReference, EntityStore

__all__ = [
    "CourseRecord",
    "DanglingReference",
    "EntityCollection",
    "EntityStore",
    "GradeRecord",
    "SeedDataError",
    "StudentRecord",
    "load_store",
]
