"""
Shared fixtures and helpers for the hireline backend tests.

Pure analytics are tested directly; the HTTP surface runs against a
DocumentStore in a temp directory, so no data.json outside tmp_path is read
or written.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from db import DocumentStore, get_store  # noqa: E402
from models import Link, Person  # noqa: E402


def make_person(pid, name=None, status="To do", starred=False, team="", **extra):
    return Person(
        id=pid,
        name=name or f"person-{pid}",
        status=status,
        starred=starred,
        team=team,
        **extra,
    )


def make_link(source, target):
    return Link(source=source, target=target)


@pytest.fixture
def store(tmp_path) -> DocumentStore:
    return DocumentStore(tmp_path / "data.json")


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
