from collections import deque
from perfect_maze.core.grid import Grid


def count_passages(grid: Grid) -> int:
    """
    Number of open internal wall pairs. Entrance/exit openings sit on the
    boundary and are never counted.
    """
    passages = 0
    for y in range(grid.height):
        for x in range(grid.width):
            # Only look East and South so each pair is counted once
            if x < grid.width - 1 and not grid.has_wall(x, y, Grid.EAST) \
                    and not grid.has_wall(x + 1, y, Grid.WEST):
                passages += 1
            if y < grid.height - 1 and not grid.has_wall(x, y, Grid.SOUTH) \
                    and not grid.has_wall(x, y + 1, Grid.NORTH):
                passages += 1
    return passages


def reachable_count(grid: Grid, start=(0, 0)) -> int:
    if grid.width * grid.height == 0:
        return 0
    seen = {tuple(start)}
    queue = deque([tuple(start)])
    while queue:
        x, y = queue.popleft()
        for n in grid.get_open_neighbors(x, y):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return len(seen)


def is_connected(grid: Grid) -> bool:
    return reachable_count(grid) == grid.width * grid.height


def is_perfect(grid: Grid) -> bool:
    """Connected, and a spanning tree: exactly cells - 1 passages."""
    total = grid.width * grid.height
    if total == 0:
        return False
    return count_passages(grid) == total - 1 and is_connected(grid)


def calculate_stats(grid: Grid):
    dead_ends = 0
    intersections = 0 # 3 or 4 exits
    corridors = 0 # 2 exits

    for y in range(grid.height):
        for x in range(grid.width):
            exits = sum(1 for _ in grid.get_open_neighbors(x, y))
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: intersections += 1

    total = grid.width * grid.height
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "intersections": intersections,
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
