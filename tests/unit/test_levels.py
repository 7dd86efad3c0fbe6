"""Checks on the built-in level catalogue."""

from __future__ import annotations

import pytest

from konigsberg.levels import LEVELS
from konigsberg.solver import EulerianKind, classify

EXPECTED = {
    "simple-triangle": (EulerianKind.CIRCUIT, ["A", "B", "C"]),
    "square-diagonals": (EulerianKind.NONE, []),
    "house-envelope": (EulerianKind.PATH, ["A", "B"]),
    "butterfly": (EulerianKind.PATH, ["B", "D"]),
    "pentagon-star": (EulerianKind.CIRCUIT, ["A", "B", "C", "D", "E"]),
    "konigsberg-modified": (EulerianKind.PATH, ["A", "D"]),
    "complex-web": (EulerianKind.NONE, []),
    "konigsberg-original": (EulerianKind.NONE, []),
}


def test_level_order():
    assert [level.id for level in LEVELS] == list(EXPECTED)


@pytest.mark.parametrize("level", LEVELS, ids=lambda level: level.id)
def test_level_classification(level):
    kind, candidates = EXPECTED[level.id]
    info = classify(level.graph)
    assert info.kind == kind
    assert info.start_candidates == candidates


@pytest.mark.parametrize("level", LEVELS, ids=lambda level: level.id)
def test_level_graph_is_well_formed(level):
    node_ids = level.graph.node_ids()
    edge_ids = [edge.id for edge in level.graph.edges]
    assert len(set(node_ids)) == len(node_ids)
    assert len(set(edge_ids)) == len(edge_ids)
    for edge in level.graph.edges:
        assert edge.start in node_ids and edge.end in node_ids
        assert not edge.crossed
