"""Test database helpers."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Tuple

from dotenv import load_dotenv

load_dotenv()


def provision_test_database(
    prefix: str = "projectscope_test",
) -> Tuple[str | None, str, bool]:
    """Return a database for a test case.

    Returns a tuple of (database_name, database_uri, managed_flag).
    ``TEST_DATABASE_URL`` points the suite at an existing database, in which
    case managed_flag is False and the caller must not remove it. Otherwise a
    temporary SQLite file is created.
    """
    override_url = os.environ.get("TEST_DATABASE_URL")
    if override_url:
        return None, override_url, False

    temp_db = tempfile.NamedTemporaryFile(prefix=f"{prefix}_", suffix=".db", delete=False)
    temp_db_path = temp_db.name
    temp_db.close()
    return f"sqlite:{temp_db_path}", f"sqlite:///{temp_db_path}", True


def cleanup_test_database(database_name: str | None) -> None:
    """Remove a previously created SQLite test database."""
    if not database_name or not database_name.startswith("sqlite:"):
        return
    path = Path(database_name.split("sqlite:", 1)[1])
    if path.exists():
        path.unlink()


@contextmanager
def temporary_database(prefix: str = "projectscope_test") -> Iterator[Tuple[str | None, str]]:
    """Context manager that provisions and cleans up a test database automatically."""
    db_name, uri, managed = provision_test_database(prefix=prefix)
    try:
        yield db_name, uri
    finally:
        if managed:
            cleanup_test_database(db_name)


__all__ = [
    "cleanup_test_database",
    "provision_test_database",
    "temporary_database",
]
