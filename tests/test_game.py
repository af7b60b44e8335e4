import random

import numpy as np

from maze import MazeConfig
from game import Game, Command, State
from conftest import FirstChoice, reachable


def snake_game():
    return Game(MazeConfig(3, 3), FirstChoice())


def test_new_game_starts_playing_at_origin():
    game = Game(MazeConfig(5, 4), 3)
    assert game.position == (0, 0)
    assert game.state is State.PLAYING
    assert game.maze.passages() == 5 * 4 - 1


def test_default_config():
    game = Game(rng=1)
    assert (game.maze.width, game.maze.height) == (21, 15)


def test_blocked_move_is_ignored():
    game = snake_game()
    assert game.handle(Command.MOVE_SOUTH)
    assert game.position == (0, 0)
    assert game.moves == 0


def test_reaching_goal_wins():
    game = snake_game()
    for command in [Command.MOVE_EAST, Command.MOVE_EAST, Command.MOVE_SOUTH]:
        game.handle(command)
        assert game.state is State.PLAYING
    game.handle(Command.MOVE_SOUTH)
    assert game.position == (2, 2)
    assert game.state is State.WON
    assert game.moves == 4


def test_moves_ignored_while_won():
    game = snake_game()
    for command in [Command.MOVE_EAST, Command.MOVE_EAST, Command.MOVE_SOUTH, Command.MOVE_SOUTH]:
        game.handle(command)
    assert game.won
    # (2,2) -> (1,2) is open, but the game is over
    assert game.handle(Command.MOVE_WEST)
    assert game.position == (2, 2)
    assert game.won


def test_regenerate_resets_position_and_state():
    game = Game(MazeConfig(8, 8), random.Random(11))
    for command in [Command.MOVE_EAST, Command.MOVE_SOUTH] * 10:
        game.handle(command)
    old = game.maze.walls.copy()
    assert game.handle(Command.REGENERATE)
    assert game.position == (0, 0)
    assert game.state is State.PLAYING
    assert game.moves == 0
    assert game.maze.passages() == 8 * 8 - 1
    assert len(reachable(game.maze)) == 64
    assert not np.array_equal(old, game.maze.walls)


def test_regenerate_after_win_plays_again():
    game = snake_game()
    for command in [Command.MOVE_EAST, Command.MOVE_EAST, Command.MOVE_SOUTH, Command.MOVE_SOUTH]:
        game.handle(command)
    game.handle(Command.REGENERATE)
    assert not game.won
    assert game.handle(Command.MOVE_EAST)
    assert game.position == (1, 0)


def test_quit():
    game = Game(MazeConfig(2, 2), 0)
    assert game.handle(Command.QUIT) is False


def test_single_cell_game_is_won_on_first_move_command():
    game = Game(MazeConfig(1, 1), 0)
    assert game.state is State.PLAYING
    assert game.handle(Command.MOVE_EAST)
    assert game.position == (0, 0)
    assert game.moves == 0
    assert game.state is State.WON
    game.handle(Command.MOVE_SOUTH)
    assert game.won


def test_blocked_move_away_from_goal_keeps_playing():
    game = snake_game()
    game.handle(Command.MOVE_NORTH)
    assert game.state is State.PLAYING
