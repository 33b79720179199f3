"""
Reindeer Maze search engine.

Dijkstra over (row, col, direction) states. Moving forward costs
``STEP_COST`` and turning 90 degrees in place costs ``TURN_COST``, so the
cheapest route to a cell depends on which way the reindeer is facing.

Two queries are answered:
- the lowest possible score from the start to the end cell
- every cell that lies on at least one lowest-score route
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional

from .maze import Direction, Maze

logger = logging.getLogger(__name__)

STEP_COST = 1
TURN_COST = 1000


class State(NamedTuple):
    """A position plus the direction the reindeer is facing."""
    row: int
    col: int
    direction: Direction

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass(frozen=True)
class SolveResult:
    """Lowest score and the cells on every lowest-score route."""
    score: Optional[int]
    cells: frozenset[tuple[int, int]] = field(default_factory=frozenset)

    @property
    def reachable(self) -> bool:
        return self.score is not None

    @property
    def tile_count(self) -> int:
        return len(self.cells)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "reachable": self.reachable,
            "score": self.score,
            "tiles": self.tile_count,
        }


class SearchFrontier:
    """
    Priority queue plus best-cost and tying-predecessor bookkeeping.

    Entries carry an insertion counter so equal-cost states never have to be
    compared with each other.
    """

    def __init__(self):
        self.best_cost: dict[State, int] = {}
        self.predecessors: dict[State, set[State]] = {}
        self.settled: set[State] = set()
        self._queue: list[tuple[int, int, State]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, state: State, cost: int) -> None:
        heapq.heappush(self._queue, (cost, next(self._counter), state))

    def pop(self) -> tuple[int, State]:
        cost, _, state = heapq.heappop(self._queue)
        return cost, state

    def seed(self, state: State) -> None:
        """Register the zero-cost origin state."""
        self.best_cost[state] = 0
        self.predecessors[state] = set()
        self.push(state, 0)

    def offer(self, state: State, cost: int, predecessor: State) -> bool:
        """
        Relax the edge ``predecessor -> state`` arriving at ``cost``.

        A strictly cheaper cost replaces the recorded predecessors and queues
        the state again; an equal cost only adds ``predecessor`` to the ties.

        Returns:
            True if the state was queued.
        """
        best = self.best_cost.get(state)

        if best is None or cost < best:
            self.best_cost[state] = cost
            self.predecessors[state] = {predecessor}
            self.push(state, cost)
            return True

        if cost == best:
            self.predecessors[state].add(predecessor)

        return False


class MazeSolver:
    """
    Lowest-score search over a Maze.

    Example usage:
        solver = MazeSolver(parse_maze_text(maze_text))
        solver.lowest_score()      # None when the end is unreachable
        solver.best_seat_count()   # cells on any lowest-score route
    """

    def __init__(
        self,
        maze: Maze,
        step_cost: int = STEP_COST,
        turn_cost: int = TURN_COST,
        facing: Direction | str = Direction.EAST,
    ):
        """
        Args:
            maze: Maze to search. Never modified.
            step_cost: Cost of moving one cell forward.
            turn_cost: Cost of a 90 degree turn in place.
            facing: Direction the reindeer faces on the start cell.

        Raises:
            ValueError: If a cost is negative or the direction is unknown.
        """
        if step_cost < 0 or turn_cost < 0:
            raise ValueError(
                f"Move costs must be non-negative (step_cost={step_cost}, turn_cost={turn_cost})"
            )

        self.maze = maze
        self.step_cost = step_cost
        self.turn_cost = turn_cost
        self.facing = Direction.parse(facing)

    @property
    def start_state(self) -> State:
        row, col = self.maze.start
        return State(row, col, self.facing)

    def moves(self, state: State) -> Iterator[tuple[int, State]]:
        """Yield (cost, next_state) for every legal move from ``state``."""
        dr, dc = state.direction.delta
        row, col = state.row + dr, state.col + dc
        if self.maze.is_passable(row, col):
            yield self.step_cost, State(row, col, state.direction)

        yield self.turn_cost, State(state.row, state.col, state.direction.turn_right())
        yield self.turn_cost, State(state.row, state.col, state.direction.turn_left())

    def _is_end(self, state: State) -> bool:
        return state.position == self.maze.end

    def lowest_score(self) -> Optional[int]:
        """
        Lowest score to reach the end cell facing any direction.

        Returns:
            The score, or None if the end cell cannot be reached.
        """
        queue: list[tuple[int, int, State]] = []
        counter = itertools.count()
        settled: set[State] = set()

        heapq.heappush(queue, (0, next(counter), self.start_state))

        while queue:
            cost, _, state = heapq.heappop(queue)
            if state in settled:
                continue

            if self._is_end(state):
                logger.debug(f"Reached end {state} with score {cost} after settling {len(settled)} states")
                return cost

            settled.add(state)

            for move_cost, neighbor in self.moves(state):
                if neighbor not in settled:
                    heapq.heappush(queue, (cost + move_cost, next(counter), neighbor))

        logger.debug(f"No path to {self.maze.end} after settling {len(settled)} states")
        return None

    def _explore(self) -> tuple[Optional[int], SearchFrontier, set[State]]:
        """
        Run Dijkstra to exhaustion at the lowest end score, keeping ties.

        Returns:
            (lowest end score or None, frontier with predecessors, end states
            reached at that score)
        """
        frontier = SearchFrontier()
        frontier.seed(self.start_state)
        settled = frontier.settled
        end_states: set[State] = set()
        lowest_end: Optional[int] = None

        while frontier:
            cost, state = frontier.pop()
            if state in settled or cost > frontier.best_cost[state]:
                continue

            if lowest_end is not None and cost > lowest_end:
                break

            settled.add(state)

            if self._is_end(state):
                lowest_end = cost
                end_states.add(state)
                continue

            for move_cost, neighbor in self.moves(state):
                frontier.offer(neighbor, cost + move_cost, state)

        logger.debug(
            f"Explored {len(settled)} states, lowest end score {lowest_end}, "
            f"{len(end_states)} end state(s)"
        )
        return lowest_end, frontier, end_states

    def solve(self) -> SolveResult:
        """Lowest score together with every cell on a lowest-score route."""
        lowest_end, frontier, end_states = self._explore()
        if lowest_end is None:
            return SolveResult(score=None)

        # Walk predecessors back from the end; states are memoized since
        # routes fork and rejoin.
        seen: set[State] = set(end_states)
        stack = list(end_states)
        while stack:
            state = stack.pop()
            for predecessor in frontier.predecessors.get(state, ()):
                if predecessor not in seen:
                    seen.add(predecessor)
                    stack.append(predecessor)

        return SolveResult(
            score=lowest_end,
            cells=frozenset(state.position for state in seen),
        )

    def optimal_cells(self) -> frozenset[tuple[int, int]]:
        """Cells on at least one lowest-score route; empty if unreachable."""
        return self.solve().cells

    def best_seat_count(self) -> int:
        """Number of cells on at least one lowest-score route."""
        return self.solve().tile_count
