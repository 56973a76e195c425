"""Independent route-cost oracle on a networkx movement graph.

Used to cross-check the two engines: the graph holds every legal move
between safe cells under a movement rule, weighted by move cost, and
Dijkstra gives the optimal leg cost directly.
"""

from __future__ import annotations

import networkx as nx

from hazard_route.config.types import GoalMode, MovementRule, TieBreak
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.search.candidates import canonical_key, generate_candidates


def movement_graph(board: Board, rule: MovementRule) -> nx.DiGraph:
    """Directed graph of legal moves between safe cells, edge attribute ``weight``."""
    graph = nx.DiGraph()
    grid = board.grid
    for pos in grid.positions():
        if grid.is_lethal(pos):
            continue
        graph.add_node(pos)
        for step in generate_candidates(grid, pos, rule):
            if not grid.is_lethal(step.position):
                graph.add_edge(pos, step.position, weight=step.cost)
    return graph


def oracle_cost(
    board: Board,
    start: Position,
    target: Position,
    rule: MovementRule,
    mode: GoalMode = GoalMode.EXACT,
) -> int | None:
    """Optimal leg cost, or ``None`` when no route exists."""
    graph = movement_graph(board, rule)
    if start not in graph:
        return None
    lengths = nx.single_source_dijkstra_path_length(graph, start, weight="weight")
    if mode is GoalMode.HAZARD_ADJACENT:
        costs = [int(c) for pos, c in lengths.items() if board.is_hazard_adjacent(pos)]
        return min(costs) if costs else None
    cost = lengths.get(target)
    return None if cost is None else int(cost)


def oracle_best_cost(
    board: Board, rule: MovementRule, tie_break: TieBreak = TieBreak.COLUMN_ROW
) -> int | None:
    """Cost of the route the composer should choose, computed leg by leg.

    The hazard-ring handover cell is chosen the way the engines choose it:
    cheapest from the waypoint, then first in ``canonical_key`` order.
    """
    if board.agent is None or board.goal is None:
        return None
    direct = oracle_cost(board, board.agent, board.goal, rule)
    composite = _oracle_composite_cost(board, rule, tie_break)
    feasible = [c for c in (direct, composite) if c is not None]
    return min(feasible) if feasible else None


def _oracle_composite_cost(board: Board, rule: MovementRule, tie_break: TieBreak) -> int | None:
    if board.agent is None or board.goal is None:
        return None
    if board.waypoint is None or board.hazard is None:
        return None
    leg1 = oracle_cost(board, board.agent, board.waypoint, rule)
    if leg1 is None:
        return None
    graph = movement_graph(board, rule)
    lengths = nx.single_source_dijkstra_path_length(graph, board.waypoint, weight="weight")
    ring = {pos: int(cost) for pos, cost in lengths.items() if board.is_hazard_adjacent(pos)}
    if not ring:
        return None
    leg2 = min(ring.values())
    handover = min(
        (pos for pos, cost in ring.items() if cost == leg2),
        key=lambda pos: canonical_key(pos, tie_break),
    )
    cleared = board.copy()
    cleared.remove_hazard()
    leg3 = oracle_cost(cleared, handover, board.goal, rule)
    if leg3 is None:
        return None
    return leg1 + leg2 + leg3
