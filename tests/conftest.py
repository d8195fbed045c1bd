"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from registrar.graphql.schema import schema
from registrar.store import EntityStore, load_store


@pytest.fixture
def store() -> EntityStore:
    """A fresh store loaded from the bundled seed data."""
    return load_store()


@pytest.fixture
def empty_store() -> EntityStore:
    """A store with no records."""
    return EntityStore()


@pytest.fixture
def execute(store: EntityStore):
    """Execute a GraphQL document against the schema with the seeded store."""

    async def _execute(query: str, variables: dict[str, Any] | None = None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value={"store": store},
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
