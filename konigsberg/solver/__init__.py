from konigsberg.solver.advisor import Analysis, BridgeModification, ModificationType, analyze
from konigsberg.solver.eulerian import Classification, EulerianKind, classify, odd_degree_nodes
from konigsberg.solver.hints import Hint, hint
from konigsberg.solver.narrator import Solution, Step, describe, edges_along, solution_edges, solution_steps
from konigsberg.solver.path_builder import build_path, is_solvable_from_state
