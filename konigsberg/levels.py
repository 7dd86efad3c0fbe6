"""Built-in puzzle levels. Seeded into the database on startup."""

from dataclasses import dataclass
from typing import List

from konigsberg.graph import Edge, Graph, Node


@dataclass(frozen=True)
class Level:
    id: str
    name: str
    description: str
    difficulty: str  # easy, medium, hard, impossible
    graph: Graph


def _graph(nodes, edges) -> Graph:
    return Graph(
        nodes=[Node(id=node_id, label=label, x=x, y=y) for node_id, x, y, label in nodes],
        edges=[Edge(id=f"e{i}", start=start, end=end) for i, (start, end) in enumerate(edges, start=1)],
    )


KONIGSBERG_ORIGINAL = Level(
    id="konigsberg-original",
    name="Königsberg Original",
    description="The classic problem that started it all - can you cross all 7 bridges exactly once?",
    difficulty="impossible",
    graph=_graph(
        [("A", 200, 150, "North Bank"), ("B", 200, 350, "South Bank"),
         ("C", 100, 250, "Kneiphof Island"), ("D", 350, 250, "Lomse Island")],
        [("A", "C"), ("A", "C"), ("A", "D"), ("B", "C"), ("B", "C"), ("B", "D"), ("C", "D")],
    ),
)

SIMPLE_TRIANGLE = Level(
    id="simple-triangle",
    name="Triangle Path",
    description="A simple warm-up - traverse this triangle!",
    difficulty="easy",
    graph=_graph(
        [("A", 200, 100, "A"), ("B", 100, 300, "B"), ("C", 300, 300, "C")],
        [("A", "B"), ("B", "C"), ("C", "A")],
    ),
)

# every corner has three bridges, so there is no walk at all
SQUARE_DIAGONALS = Level(
    id="square-diagonals",
    name="Square Dance",
    description="A square with both diagonals - is there a path at all?",
    difficulty="impossible",
    graph=_graph(
        [("A", 100, 100, "A"), ("B", 300, 100, "B"), ("C", 300, 300, "C"), ("D", 100, 300, "D")],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"), ("A", "C"), ("B", "D")],
    ),
)

HOUSE_ENVELOPE = Level(
    id="house-envelope",
    name="The House",
    description="Draw this house without lifting your pen!",
    difficulty="medium",
    graph=_graph(
        [("A", 100, 300, "A"), ("B", 300, 300, "B"), ("C", 300, 150, "C"),
         ("D", 100, 150, "D"), ("E", 200, 50, "E")],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"), ("A", "C"), ("B", "D"), ("D", "E"), ("E", "C")],
    ),
)

BUTTERFLY = Level(
    id="butterfly",
    name="Butterfly Wings",
    description="Trace the delicate wings of this butterfly!",
    difficulty="medium",
    graph=_graph(
        [("A", 200, 200, "Body"), ("B", 80, 100, "TL"), ("C", 80, 300, "BL"),
         ("D", 320, 100, "TR"), ("E", 320, 300, "BR")],
        [("A", "B"), ("B", "C"), ("C", "A"), ("A", "B"),
         ("A", "D"), ("D", "E"), ("E", "A"), ("A", "D")],
    ),
)

PENTAGON_STAR = Level(
    id="pentagon-star",
    name="Starlight",
    description="Navigate through this starry pentagon!",
    difficulty="medium",
    graph=_graph(
        [("A", 200, 50, "A"), ("B", 350, 150, "B"), ("C", 300, 320, "C"),
         ("D", 100, 320, "D"), ("E", 50, 150, "E")],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "A"),
         ("A", "C"), ("A", "D"), ("B", "D"), ("B", "E"), ("C", "E")],
    ),
)

KONIGSBERG_MODIFIED = Level(
    id="konigsberg-modified",
    name="Königsberg Reimagined",
    description="A modified version of Königsberg - this one is solvable!",
    difficulty="hard",
    graph=_graph(
        [("A", 200, 100, "North Bank"), ("B", 200, 350, "South Bank"),
         ("C", 80, 225, "Kneiphof"), ("D", 320, 225, "Lomse")],
        [("A", "C"), ("A", "C"), ("A", "D"), ("B", "C"), ("B", "D"), ("C", "D")],
    ),
)

# outer ring plus spokes: all eight nodes end up odd
COMPLEX_WEB = Level(
    id="complex-web",
    name="The Web",
    description="A challenging web of connections awaits!",
    difficulty="hard",
    graph=_graph(
        [("A", 200, 50, "A"), ("B", 350, 100, "B"), ("C", 380, 250, "C"), ("D", 280, 350, "D"),
         ("E", 120, 350, "E"), ("F", 20, 250, "F"), ("G", 50, 100, "G"), ("H", 200, 200, "H")],
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "F"), ("F", "G"), ("G", "A"),
         ("A", "H"), ("B", "H"), ("C", "H"), ("D", "H"), ("E", "H"), ("F", "H"), ("G", "H")],
    ),
)

LEVELS: List[Level] = [
    SIMPLE_TRIANGLE,
    SQUARE_DIAGONALS,
    HOUSE_ENVELOPE,
    BUTTERFLY,
    PENTAGON_STAR,
    KONIGSBERG_MODIFIED,
    COMPLEX_WEB,
    KONIGSBERG_ORIGINAL,
]
