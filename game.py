import random
from enum import Enum, auto

from maze import Maze, MazeConfig
from navigator import Direction, attempt_move, at_goal


class Command(Enum):
    MOVE_NORTH = auto()
    MOVE_EAST = auto()
    MOVE_SOUTH = auto()
    MOVE_WEST = auto()
    REGENERATE = auto()
    QUIT = auto()


class State(Enum):
    PLAYING = auto()
    WON = auto()


MOVES = {
    Command.MOVE_NORTH: Direction.NORTH,
    Command.MOVE_EAST: Direction.EAST,
    Command.MOVE_SOUTH: Direction.SOUTH,
    Command.MOVE_WEST: Direction.WEST,
}

START = (0, 0)


class Game:
    """
    Owns one maze, the player position and the Playing/Won state.
    Every command is handled to completion before the next one, so a
    regenerate never overlaps with movement.
    """
    def __init__(self, config=None, rng=None):
        self.config = config or MazeConfig()
        self.rng = rng if isinstance(rng, random.Random) else random.Random(rng)
        self.maze = Maze.from_config(self.config)
        self.position = START
        self.state = State.PLAYING
        self.moves = 0
        self.regenerate()

    @property
    def won(self):
        return self.state is State.WON

    def regenerate(self):
        self.maze.generate(self.rng, START)
        self.position = START
        self.state = State.PLAYING
        self.moves = 0

    def handle(self, command):
        """Applies one command. Returns False once the game should quit."""
        if command is Command.QUIT:
            return False
        if command is Command.REGENERATE:
            self.regenerate()
        elif command in MOVES and not self.won:
            self.position, moved = attempt_move(self.maze, self.position, MOVES[command])
            if moved:
                self.moves += 1
            # checked even for blocked moves: a 1x1 maze starts on its goal
            if at_goal(self.maze, self.position):
                self.state = State.WON
        return True
