"""
Unit tests for EntityCollection
"""

import threading

import pytest

from registrar.store import CourseRecord, EntityCollection, StudentRecord


@pytest.fixture
def courses() -> EntityCollection[CourseRecord]:
    collection = EntityCollection("course", CourseRecord)
    collection.extend(
        [
            CourseRecord(id=1, name="Math", description="Numbers"),
            CourseRecord(id=2, name="History", description="Dates"),
            CourseRecord(id=3, name="Art", description="Colours"),
        ]
    )
    return collection


class TestAdd:
    def test_add_assigns_next_id(self, courses):
        record = courses.add(name="Biology", description="Cells")

        assert record.id == 4
        assert record.name == "Biology"
        assert len(courses) == 4
        assert courses.get(4) == record

    def test_add_to_empty_collection_starts_at_one(self):
        collection = EntityCollection("course", CourseRecord)

        assert collection.add(name="Math", description="Numbers").id == 1

    def test_add_accepts_aliases_and_field_names(self):
        students = EntityCollection("student", StudentRecord)

        by_name = students.add(name="Ana", last_name="Lee", course_id=1)
        by_alias = students.add(name="Bo", lastName="Kim", courseId=2)

        assert by_name.last_name == "Lee"
        assert by_alias.course_id == 2

    def test_ids_are_not_reused_after_delete(self, courses):
        courses.remove(2)

        record = courses.add(name="Biology", description="Cells")

        assert record.id == 4
        assert [c.id for c in courses.list()] == [1, 3, 4]

    def test_ids_are_not_reused_after_deleting_last(self, courses):
        courses.remove(3)

        assert courses.add(name="Biology", description="Cells").id == 4

    def test_concurrent_adds_get_unique_ids(self):
        collection = EntityCollection("course", CourseRecord)

        def worker():
            for _ in range(50):
                collection.add(name="Course", description="Concurrent")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [record.id for record in collection.list()]
        assert len(ids) == 400
        assert sorted(ids) == list(range(1, 401))


class TestLookup:
    def test_list_keeps_insertion_order(self, courses):
        courses.add(name="Biology", description="Cells")

        assert [c.name for c in courses.list()] == ["Math", "History", "Art", "Biology"]

    def test_list_returns_snapshot(self, courses):
        snapshot = courses.list()
        courses.remove(1)

        assert len(snapshot) == 3
        assert len(courses) == 2

    def test_get_missing_returns_none(self, courses):
        assert courses.get(99) is None

    def test_get_none_returns_none(self, courses):
        assert courses.get(None) is None

    def test_get_is_strict_about_id_type(self, courses):
        assert courses.get("1") is None  # type: ignore[arg-type]

    def test_contains(self, courses):
        assert 1 in courses
        assert 99 not in courses


class TestRemove:
    def test_remove_returns_record(self, courses):
        removed = courses.remove(2)

        assert removed is not None
        assert removed.name == "History"
        assert courses.get(2) is None
        assert len(courses) == 2

    def test_remove_missing_returns_none_and_keeps_length(self, courses):
        assert courses.remove(42) is None
        assert len(courses) == 3

    def test_remove_string_id_does_not_match(self, courses):
        assert courses.remove("1") is None  # type: ignore[arg-type]
        assert len(courses) == 3


class TestExtend:
    def test_extend_rejects_duplicate_ids(self, courses):
        with pytest.raises(ValueError, match="Duplicate course id: 2"):
            courses.extend([CourseRecord(id=2, name="Again", description="Dup")])

    def test_extend_moves_counter_past_highest_id(self):
        collection = EntityCollection("course", CourseRecord)
        collection.extend(
            [
                CourseRecord(id=7, name="Seven", description="7"),
                CourseRecord(id=3, name="Three", description="3"),
            ]
        )

        assert collection.last_id == 7
        assert collection.add(name="Eight", description="8").id == 8
