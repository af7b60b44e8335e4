import numpy as np
import operator
import random
from dataclasses import dataclass

# Wall bitmask for each cell
WALL_N, WALL_E, WALL_S, WALL_W = 1, 2, 4, 8
ALL_WALLS = WALL_N | WALL_E | WALL_S | WALL_W

# (dx, dy, wall on this side, wall on the neighbour's side), in N, E, S, W order
NEIGHBOURS = [
    (0, -1, WALL_N, WALL_S),
    (1, 0, WALL_E, WALL_W),
    (0, 1, WALL_S, WALL_N),
    (-1, 0, WALL_W, WALL_E),
]


class InvalidCoordinate(IndexError):
    """Raised when a cell outside the grid is addressed."""
    def __init__(self, x, y, width, height):
        super().__init__(f"Coordinate ({x}, {y}) outside {width}x{height} grid")
        self.x, self.y = x, y


@dataclass(frozen=True)
class MazeConfig:
    width: int = 21
    height: int = 15

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            try:
                size = None if isinstance(value, bool) else operator.index(value)
            except TypeError:
                size = None
            if size is None or size <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
            # numpy integers are stored as plain ints
            object.__setattr__(self, name, size)


class Maze:
    """
    A width x height grid of cells, each holding a 4-bit wall mask.
    generate() carves a perfect maze with an iterative depth-first backtracker.
    The goal is always the bottom-right cell.
    """
    def __init__(self, width=21, height=15):
        config = MazeConfig(width, height)
        self.width = config.width
        self.height = config.height
        self._walls = np.full((self.height, self.width), ALL_WALLS, dtype=np.uint8)
        self._visited = np.zeros((self.height, self.width), dtype=bool)

    @classmethod
    def from_config(cls, config):
        return cls(config.width, config.height)

    @property
    def walls(self):
        """Read-only view of the wall masks, indexed [y, x]."""
        view = self._walls.view()
        view.flags.writeable = False
        return view

    @property
    def goal(self):
        return (self.width - 1, self.height - 1)

    def reset(self):
        self._walls.fill(ALL_WALLS)
        self._visited.fill(False)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self.width, self.height)

    def walls_at(self, x, y):
        self._check(x, y)
        return int(self._walls[y, x])

    def has_wall(self, x, y, wall):
        return bool(self.walls_at(x, y) & wall)

    def open_passage(self, x, y, nx, ny):
        """Removes the wall between (x, y) and the adjacent cell (nx, ny) on both sides."""
        self._check(x, y)
        self._check(nx, ny)
        for dx, dy, wall, opposite in NEIGHBOURS:
            if (nx - x, ny - y) == (dx, dy):
                self._walls[y, x] &= ~wall & ALL_WALLS
                self._walls[ny, nx] &= ~opposite & ALL_WALLS
                return
        assert False, f"({x}, {y}) and ({nx}, {ny}) are not adjacent"

    def passages(self):
        """Number of open edges between cells."""
        # Each open edge clears one E bit or one S bit exactly once
        east = np.count_nonzero((self._walls[:, :-1] & WALL_E) == 0)
        south = np.count_nonzero((self._walls[:-1, :] & WALL_S) == 0)
        return int(east + south)

    def generate(self, rng=None, start=(0, 0)):
        """
        Carves a spanning tree of passages over the whole grid.

        rng may be a random.Random, an int seed or None. The global random
        module state is never touched, so equal seeds give equal mazes.
        """
        if not isinstance(rng, random.Random):
            rng = random.Random(rng)
        self.reset()
        sx, sy = start
        self._check(sx, sy)

        self._visited[sy, sx] = True
        stack = [(sx, sy)]
        while stack:
            cx, cy = stack[-1]
            neighbors = []
            for dx, dy, _, _ in NEIGHBOURS:
                nx, ny = cx + dx, cy + dy
                if self.in_bounds(nx, ny) and not self._visited[ny, nx]:
                    neighbors.append((nx, ny))
            if not neighbors:
                # backtrack
                stack.pop()
                continue
            nx, ny = neighbors[rng.randrange(len(neighbors))]
            self.open_passage(cx, cy, nx, ny)
            self._visited[ny, nx] = True
            stack.append((nx, ny))

        self._visited.fill(False)
        return self
