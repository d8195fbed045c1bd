"""Seed data loader.

Reads the course, student and grade JSON files once at startup and builds
an ``EntityStore`` from them. The directory comes from
``settings.data_dir``; when it is not set, the files bundled in
``registrar/data`` are used.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..logging import get_logger
from .collection import EntityCollection
from .store import EntityStore

logger = get_logger(__name__)


class SeedDataError(Exception):
    """Raised when seed data cannot be loaded."""

    pass


def default_data_dir() -> Path:
    """Directory of the seed files shipped with the package."""
    return Path(str(resources.files("registrar") / "data"))


def _read_records(path: Path, collection: EntityCollection[Any]) -> None:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file is not valid JSON: {path}: {e}") from e

    if not isinstance(data, list):
        raise SeedDataError(f"Seed file must contain a JSON array: {path}")

    try:
        records = TypeAdapter(list[collection.record_type]).validate_python(data)
    except ValidationError as e:
        raise SeedDataError(f"Invalid {collection.name} records in {path}: {e}") from e

    try:
        collection.extend(records)
    except ValueError as e:
        raise SeedDataError(f"{e} in {path}") from e

    logger.debug("Seed file loaded", path=str(path), kind=collection.name, count=len(records))


def load_store(data_dir: str | Path | None = None) -> EntityStore:
    """
    Build an entity store from the seed files in ``data_dir``.

    Args:
        data_dir: Directory holding the seed files (defaults to settings, then
            to the bundled data)

    Returns:
        A populated EntityStore

    Raises:
        SeedDataError: If a file is missing, malformed, or has duplicate ids
    """
    if data_dir is None:
        data_dir = settings.data_dir
    base = Path(data_dir) if data_dir else default_data_dir()

    store = EntityStore()
    _read_records(base / settings.courses_file, store.courses)
    _read_records(base / settings.students_file, store.students)
    _read_records(base / settings.grades_file, store.grades)

    logger.info("Seed data loaded", data_dir=str(base), **store.counts())
    return store
