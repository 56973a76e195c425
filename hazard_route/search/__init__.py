"""Route search: candidate generation, the two leg engines and route composition."""

from hazard_route.search.astar import AStarEngine, chebyshev_heuristic
from hazard_route.search.backtracking import BacktrackingEngine
from hazard_route.search.base import LegState, RouteEngine, arrived
from hazard_route.search.candidates import (
    Step,
    canonical_key,
    generate_candidates,
    rank_candidates,
)
from hazard_route.search.composer import Candidates, RouteComposer, build_engine, solve
from hazard_route.search.reachability import movement_graph, oracle_best_cost, oracle_cost

__all__ = [
    "AStarEngine",
    "BacktrackingEngine",
    "Candidates",
    "LegState",
    "RouteComposer",
    "RouteEngine",
    "Step",
    "arrived",
    "build_engine",
    "canonical_key",
    "chebyshev_heuristic",
    "generate_candidates",
    "movement_graph",
    "oracle_best_cost",
    "oracle_cost",
    "rank_candidates",
    "solve",
]
