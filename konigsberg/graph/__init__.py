from konigsberg.graph.model import (
    Edge,
    Graph,
    Node,
    adjacent_nodes,
    available_edges,
    clone_graph,
    connected_components,
    edge_between,
    is_edge_connected,
    is_valid_move,
    node_degrees,
    node_index,
    remaining_edge_count,
    uncrossed_subgraph,
)
