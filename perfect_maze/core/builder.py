import logging

from perfect_maze.core.errors import ValidationError, require_int
from perfect_maze.core.grid import Grid

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value) -> int:
    require_int(name, value)
    if value < 1:
        raise ValidationError(f"{name} must be at least 1, got {value}")
    return value


def build(width: int, height: int) -> Grid:
    """
    Allocates a fully walled width x height grid with the entrance
    (north of the top-left cell) and exit (south of the bottom-right cell) open.
    """
    _check_dimension("width", width)
    _check_dimension("height", height)

    grid = Grid(width, height)
    entrance = grid.entrance
    exit_ = grid.exit
    grid.open_boundary(entrance.x, entrance.y, Grid.NORTH)
    grid.open_boundary(exit_.x, exit_.y, Grid.SOUTH)

    logger.debug(f"Built {width}x{height} grid")
    return grid
