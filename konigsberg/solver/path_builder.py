"""Hierholzer's algorithm over the uncrossed edges of a graph."""

import logging
from typing import List, Optional

from konigsberg.graph import Graph, node_index, remaining_edge_count, uncrossed_subgraph
from konigsberg.solver.eulerian import classify

logger = logging.getLogger(__name__)


def build_path(graph: Graph, start_node: Optional[str] = None) -> Optional[List[str]]:
    """Build a full Eulerian trail as a list of node ids, or None when none exists.

    ``start_node`` is honoured only if it is a valid start; otherwise the first
    start candidate is used. The working structures are private to the call:
    one adjacency list per node (dense index) holding ``(neighbour, edge slot)``
    pairs in stored edge order, one ``used`` flag per edge slot shared by both
    endpoint registrations, and a per-node cursor so every entry is scanned
    once. The caller's graph is never touched.
    """
    info = classify(graph)
    if not info.exists or not info.start_candidates:
        return None

    start = start_node if start_node in info.start_candidates else info.start_candidates[0]

    index = node_index(graph)
    ids = graph.node_ids()
    neighbours = [[] for _ in ids]
    slot = 0
    for edge in graph.edges:
        if edge.crossed:
            continue
        a, b = index[edge.start], index[edge.end]
        neighbours[a].append((b, slot))
        neighbours[b].append((a, slot))
        slot += 1
    used = [False] * slot
    cursor = [0] * len(ids)

    stack = [index[start]]
    trail = []
    while stack:
        current = stack[-1]
        entries = neighbours[current]
        position = cursor[current]
        while position < len(entries) and used[entries[position][1]]:
            position += 1
        cursor[current] = position

        if position < len(entries):
            neighbour, edge_slot = entries[position]
            used[edge_slot] = True
            stack.append(neighbour)
        else:
            trail.append(ids[stack.pop()])

    trail.reverse()
    logger.debug("Built trail of %d nodes from %s (%s)", len(trail), start, info.kind.value)
    return trail


def is_solvable_from_state(graph: Graph, current_node: str) -> bool:
    """True when every bridge still open can be crossed starting at ``current_node``."""
    remaining = uncrossed_subgraph(graph)
    edge_count = remaining_edge_count(remaining)
    if edge_count == 0:
        return True

    path = build_path(remaining, current_node)
    return path is not None and path[0] == current_node and len(path) == edge_count + 1
