import logging
import random
from typing import Iterator, List, Optional, Tuple
from perfect_maze.core.grid import Grid
from perfect_maze.algo.base import Generator

logger = logging.getLogger(__name__)

# Progress is reported once per this many carved passages
PROGRESS_INTERVAL = 100

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first backtracker. Uses an explicit stack so that
    large grids do not hit the interpreter's recursion limit.
    """

    def unvisited_neighbors(self, x: int, y: int) -> List[Tuple[int, int, int]]:
        return [
            (nx, ny, direction)
            for nx, ny, direction in self.grid.get_neighbors(x, y)
            if not self.grid.cells[ny][nx].visited
        ]

    def run(self) -> Iterator[str]:
        grid = self.grid
        if grid.width * grid.height == 0:
            yield "Done"
            return

        grid.set_visited(0, 0)
        stack: List[Tuple[int, int]] = [(0, 0)]

        while stack:
            cx, cy = stack[-1]
            candidates = self.unvisited_neighbors(cx, cy)

            if not candidates:
                stack.pop()
                continue

            nx, ny, direction = self.rng.choice(candidates)
            grid.carve_path(cx, cy, direction)
            grid.set_visited(nx, ny)
            stack.append((nx, ny))
            self.step_count += 1

            if self.step_count % PROGRESS_INTERVAL == 0:
                yield f"Carved {self.step_count} passages, depth {len(stack)}"

        logger.debug(f"Carved {self.step_count} passages in {grid.width}x{grid.height} grid")
        yield "Done"


def carve(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Turns an all-walled grid into a perfect maze, in place."""
    RecursiveBacktracker(grid, rng=rng).run_all()
