from enum import Enum

from maze import WALL_N, WALL_E, WALL_S, WALL_W


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def wall(self):
        return _WALL_FOR[self]


_WALL_FOR = {
    Direction.NORTH: WALL_N,
    Direction.EAST: WALL_E,
    Direction.SOUTH: WALL_S,
    Direction.WEST: WALL_W,
}


def attempt_move(maze, position, direction):
    """
    Tries to step one cell from position in the given direction.

    Returns (new_position, moved). A move off the grid or through a closed
    wall is not an error: the original position comes back with moved=False.
    """
    if not isinstance(direction, Direction):
        try:
            direction = Direction(tuple(direction))
        except (TypeError, ValueError):
            raise ValueError(f"Not a unit direction: {direction!r}") from None
    x, y = position
    nx, ny = x + direction.dx, y + direction.dy
    if not maze.in_bounds(nx, ny):
        return (x, y), False
    if maze.walls_at(x, y) & direction.wall:
        return (x, y), False
    return (nx, ny), True


def at_goal(maze, position):
    return tuple(position) == maze.goal
