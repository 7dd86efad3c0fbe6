import plotly.graph_objects as go
from typing import Optional

from konigsberg.graph import Graph


def generate_graph_visualization(graph: Graph, current_node: Optional[str] = None, title: str = "Preview"):
    """Generate a Plotly figure of a level or a game in progress."""
    positions = {n.id: (n.x, n.y) for n in graph.nodes}

    fig = go.Figure()
    for crossed, color, name in ((False, "#aaa", "Bridges"), (True, "#1f77b4", "Crossed")):
        edge_x, edge_y = [], []
        for e in graph.edges:
            if e.crossed != crossed:
                continue
            x0, y0 = positions[e.start]
            x1, y1 = positions[e.end]
            edge_x += [x0, x1, None]
            edge_y += [y0, y1, None]
        fig.add_trace(go.Scatter(
            x=edge_x, y=edge_y, mode="lines", line=dict(width=4, color=color), name=name
        ))

    node_colors = ["orange" if n.id == current_node else "white" for n in graph.nodes]
    fig.add_trace(go.Scatter(
        x=[n.x for n in graph.nodes],
        y=[n.y for n in graph.nodes],
        mode="markers+text",
        text=[n.id for n in graph.nodes],
        hovertext=[n.label for n in graph.nodes],
        textposition="middle center",
        marker=dict(size=40, color=node_colors, line=dict(width=4, color="black")),
        name="Land masses"
    ))

    fig.update_layout(
        title=title,
        showlegend=True,
        plot_bgcolor="white",
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, autorange="reversed"),  # screen coordinates, y grows downwards
        height=600
    )

    return fig
