from typing import Iterator, List, NamedTuple, Tuple

import numpy as np


class Coordinate(NamedTuple):
    x: int
    y: int


class Cell:
    __slots__ = ('x', 'y', 'walls', 'visited')

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        # [N, E, S, W], True = wall present
        self.walls = [True, True, True, True]
        self.visited = False

    def __repr__(self):
        return f"Cell({self.x}, {self.y}, walls={self.walls}, visited={self.visited})"


class Grid:
    # Wall indices
    NORTH = 0
    EAST  = 1
    SOUTH = 2
    WEST  = 3

    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # Indexed [row][col] -> cells[y][x]
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    @property
    def entrance(self) -> Coordinate:
        return Coordinate(0, 0)

    @property
    def exit(self) -> Coordinate:
        return Coordinate(self.width - 1, self.height - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell:
        if self.in_bounds(x, y):
            return self.cells[y][x]
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def carve_path(self, x1: int, y1: int, direction: int):
        """
        Removes the wall between cell (x1,y1) and its neighbor in 'direction'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        x2 = x1 + self.DX[direction]
        y2 = y1 + self.DY[direction]

        if not self.in_bounds(x2, y2):
            return # Cannot carve into void

        self.cells[y1][x1].walls[direction] = False
        self.cells[y2][x2].walls[self.OPPOSITE[direction]] = False

    def open_boundary(self, x: int, y: int, direction: int):
        """Clears an outward-facing wall on the edge of the grid (entrance/exit)."""
        if self.in_bounds(x + self.DX[direction], y + self.DY[direction]):
            raise ValueError(f"Wall {direction} of ({x}, {y}) is not on the grid boundary")
        self.get_cell(x, y).walls[direction] = False

    # Routed through get_cell so negative coordinates raise instead of wrapping
    def has_wall(self, x: int, y: int, direction: int) -> bool:
        return self.get_cell(x, y).walls[direction]

    def set_visited(self, x: int, y: int, visited: bool = True):
        self.get_cell(x, y).visited = visited

    def is_visited(self, x: int, y: int) -> bool:
        return self.get_cell(x, y).visited

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls (that's for pathfinding).
        """
        # North
        if y > 0:
            yield (x, y - 1, self.NORTH)
        # South
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        # West
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors whose shared wall is open on BOTH sides.
        """
        walls = self.cells[y][x].walls
        for nx, ny, direction in self.get_neighbors(x, y):
            if not walls[direction] and not self.cells[ny][nx].walls[self.OPPOSITE[direction]]:
                yield (nx, ny)

    def to_array(self) -> np.ndarray:
        """
        Dense (height, width) uint8 matrix of wall bitmasks, bit (1 << direction)
        set when that wall is present. Meant for renderers.
        """
        arr = np.zeros((self.height, self.width), dtype=np.uint8)
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                mask = 0
                for direction in self.DIRECTIONS:
                    if cell.walls[direction]:
                        mask |= 1 << direction
                arr[y, x] = mask
        return arr
