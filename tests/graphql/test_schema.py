"""
Tests for schema assembly and the public GraphQL surface
"""

import pytest

from registrar.graphql.schema import print_schema, validate_schema


def test_schema_validates():
    validate_schema()


@pytest.fixture(scope="module")
def sdl() -> str:
    return print_schema()


@pytest.mark.parametrize(
    "field",
    [
        "courses: [Course]\n",
        "students: [Student]\n",
        "grades: [Grade]\n",
        "course(id: Int = null): Course",
        "student(id: Int = null): Student",
        "grade(id: Int = null): Grade",
    ],
)
def test_query_fields(sdl, field):
    assert field in sdl


@pytest.mark.parametrize(
    "field",
    [
        "addCourse(name: String!, description: String!): Course",
        "addStudent(name: String!, lastName: String!, courseId: Int!): Student",
        "addGrade(courseId: Int!, studentId: Int!, grade: Float!): Grade",
        "deleteCourse(id: Int!): Course",
        "deleteStudent(id: Int!): Student",
        "deleteGrade(id: Int!): Grade",
    ],
)
def test_mutation_fields(sdl, field):
    assert field in sdl


@pytest.mark.parametrize(
    "field",
    [
        "lastName: String!",
        "courseId: Int!",
        "studentId: Int!",
        "grade: Float!",
        "course: Course\n",
        "student: Student\n",
    ],
)
def test_object_fields(sdl, field):
    assert field in sdl


def test_type_descriptions(sdl):
    assert '"""Represent courses"""' in sdl
    assert '"""Represent students"""' in sdl
    assert '"""Represent grades of students"""' in sdl
