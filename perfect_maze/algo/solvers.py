import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, List, Optional, Set, Tuple
from perfect_maze.core.errors import ValidationError, require_int
from perfect_maze.core.grid import Coordinate, Grid

logger = logging.getLogger(__name__)

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        # None until run() finishes; an empty list then means "no path"
        self.path: Optional[List[Coordinate]] = None
        self.visited_count = 0

    @property
    def solved(self) -> bool:
        return self.path is not None

    def check_endpoint(self, name: str, point) -> Coordinate:
        try:
            x, y = point
        except (TypeError, ValueError):
            raise ValidationError(f"{name} must be an (x, y) pair, got {point!r}") from None
        require_int(f"{name} x", x)
        require_int(f"{name} y", y)
        if not self.grid.in_bounds(x, y):
            raise ValidationError(
                f"{name} ({x}, {y}) is outside the {self.grid.width}x{self.grid.height} grid"
            )
        return Coordinate(x, y)

    @abstractmethod
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        pass

    def run_all(self, start: Tuple[int, int], end: Tuple[int, int]) -> List[Coordinate]:
        for _ in self.run(start, end):
            pass
        return self.path

class BFS(Solver):
    """
    Breadth-first search through open wall pairs. The first path to reach
    the goal is the shortest; in a perfect maze it is also the only one.

    Keeps its own visited set; the cells' generation flags and walls are
    never touched.
    """

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        # Drop the previous answer first so a rejected query never looks solved
        self.path = None
        self.visited_count = 0

        start = self.check_endpoint("start", start)
        end = self.check_endpoint("goal", end)

        # Path so far is a (coord, previous_link) chain so extending it is O(1)
        queue = deque([(start, (start, None))])
        visited: Set[Coordinate] = set()
        found = None

        while queue:
            current, link = queue.popleft()

            if current == end:
                found = link
                break

            if current in visited:
                continue
            visited.add(current)
            self.visited_count += 1

            for nx, ny in self.grid.get_open_neighbors(*current):
                neighbor = Coordinate(nx, ny)
                queue.append((neighbor, (neighbor, link)))

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        self.path = self.reconstruct_path(found)
        if self.path:
            logger.debug(f"Path {start} -> {end}: {len(self.path)} cells, visited {self.visited_count}")
        else:
            logger.warning(f"No path from {start} to {end}")
        yield "Solved"

    @staticmethod
    def reconstruct_path(link) -> List[Coordinate]:
        path = []
        while link is not None:
            coord, link = link
            path.append(coord)
        path.reverse()
        return path


def solve(grid: Grid, start: Tuple[int, int], goal: Tuple[int, int]) -> List[Coordinate]:
    """Shortest path from start to goal as a list of coordinates; [] when unreachable."""
    return BFS(grid).run_all(start, goal)
