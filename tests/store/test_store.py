"""
Unit tests for EntityStore
"""

from registrar.store import DanglingReference, EntityStore


def test_counts_for_seed_data(store):
    assert store.counts() == {"courses": 3, "students": 4, "grades": 4}


def test_empty_store_counts(empty_store):
    assert empty_store.counts() == {"courses": 0, "students": 0, "grades": 0}


def test_seed_data_has_no_dangling_references(store):
    assert store.find_dangling_references() == []


def test_deleting_course_does_not_cascade(store):
    store.courses.remove(1)

    assert len(store.students) == 4
    assert len(store.grades) == 4
    assert store.students.get(1).course_id == 1


def test_dangling_references_reported_after_delete(store):
    store.courses.remove(1)
    store.students.remove(3)

    dangling = store.find_dangling_references()

    assert DanglingReference("student", 1, "courseId", 1) in dangling
    assert DanglingReference("student", 4, "courseId", 1) in dangling
    assert DanglingReference("grade", 1, "courseId", 1) in dangling
    assert DanglingReference("grade", 3, "studentId", 3) in dangling
    assert len(dangling) == 5


def test_collections_are_independent():
    store = EntityStore()
    store.courses.add(name="Math", description="Numbers")

    student = store.students.add(name="Ana", last_name="Lee", course_id=1)

    assert student.id == 1
    assert len(store.grades) == 0
