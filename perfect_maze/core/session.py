import logging
import random
from typing import List, Optional

from perfect_maze.algo.dfs import carve
from perfect_maze.algo.solvers import solve
from perfect_maze.core.builder import build
from perfect_maze.core.grid import Coordinate, Grid

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20


class MazeSession:
    """
    Owns the current maze for a UI or other front end: its dimensions, the
    carved grid, and the last solution.

    `solution` is None until solve() runs against the current grid, so
    "never solved" and "solved, no path" stay distinguishable.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)
        self.width = width
        self.height = height
        self.grid: Optional[Grid] = None
        self.solution: Optional[List[Coordinate]] = None
        self.regenerate()

    @property
    def is_solved(self) -> bool:
        return self.solution is not None

    def regenerate(self) -> Grid:
        # A fresh grid every time; the old one is dropped along with its solution
        grid = build(self.width, self.height)
        carve(grid, self.rng)
        self.grid = grid
        self.solution = None
        logger.info(f"Generated {self.width}x{self.height} maze")
        return grid

    def resize(self, width: int, height: int) -> Grid:
        # build() validates; only commit the new size once it succeeded
        grid = build(width, height)
        carve(grid, self.rng)
        self.width, self.height = width, height
        self.grid = grid
        self.solution = None
        logger.info(f"Resized maze to {width}x{height}")
        return grid

    def solve(self) -> List[Coordinate]:
        self.solution = solve(self.grid, self.grid.entrance, self.grid.exit)
        return self.solution
