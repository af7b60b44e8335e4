import random

import pytest

from maze import Maze
from navigator import Direction, attempt_move


class FirstChoice(random.Random):
    """Always picks the first candidate neighbour."""
    def randrange(self, *args, **kwargs):
        return 0


@pytest.fixture
def snake_maze():
    # With N, E, S, W candidate order this carves
    # (0,0)->(1,0)->(2,0)->(2,1)->(2,2)->(1,2)->(1,1)->(0,1)->(0,2)
    return Maze(3, 3).generate(FirstChoice())


def reachable(maze, start=(0, 0)):
    seen = {start}
    stack = [start]
    while stack:
        pos = stack.pop()
        for direction in Direction:
            nxt, moved = attempt_move(maze, pos, direction)
            if moved and nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return seen
