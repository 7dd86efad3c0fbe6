"""Shared test fixtures."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# point the app at a throwaway database before anything from konigsberg is imported
_TMP = Path(tempfile.mkdtemp(prefix="konigsberg-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'app.db'}")
os.environ.setdefault("LOG_FILE", str(_TMP / "errors.log"))

import pytest
from sqlalchemy.orm import sessionmaker

from konigsberg import models  # noqa: F401  registers the tables
from konigsberg.core.database import Base, get_db, make_engine
from konigsberg.graph import Edge, Graph, Node
from konigsberg.services import LevelServices


def build_graph(edges, nodes=None) -> Graph:
    """Graph from ``(start, end)`` pairs; edges get ids e1, e2, ... in order.

    Nodes default to every endpoint in order of first appearance.
    """
    if nodes is None:
        nodes = []
        for start, end in edges:
            for node_id in (start, end):
                if node_id not in nodes:
                    nodes.append(node_id)
    return Graph(
        nodes=[Node(id=node_id, label=node_id) for node_id in nodes],
        edges=[Edge(id=f"e{i}", start=start, end=end) for i, (start, end) in enumerate(edges, start=1)],
    )


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def triangle() -> Graph:
    return build_graph([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def path_graph() -> Graph:
    return build_graph([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def konigsberg() -> Graph:
    """The original seven bridges: degrees A=3, B=3, C=5, D=3."""
    return build_graph(
        [("A", "C"), ("A", "C"), ("A", "D"), ("B", "C"), ("B", "C"), ("B", "D"), ("C", "D")],
        nodes=["A", "B", "C", "D"],
    )


@pytest.fixture
def square_diagonals() -> Graph:
    return build_graph(
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"), ("A", "C"), ("B", "D")],
        nodes=["A", "B", "C", "D"],
    )


@pytest.fixture
def two_triangles() -> Graph:
    """Parity is fine everywhere but the bridges form two separate groups."""
    return build_graph([
        ("A", "B"), ("B", "C"), ("C", "A"),
        ("D", "E"), ("E", "F"), ("F", "D"),
    ])


@pytest.fixture
def db_session(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    LevelServices(db).seed_levels()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient

    from konigsberg.main import app

    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
