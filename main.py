import pygame
import sys

from maze import MazeConfig, WALL_N, WALL_E, WALL_S, WALL_W
from game import Game, Command

# --- Constants ---
MAZE_WIDTH, MAZE_HEIGHT = 21, 15
CELL_SIZE = 32
PAD = 16
FPS = 60

WINDOW_SIZE = (PAD * 2 + MAZE_WIDTH * CELL_SIZE, PAD * 2 + MAZE_HEIGHT * CELL_SIZE)
BACKGROUND, WALL_COLOR, GOAL_COLOR, PLAYER_COLOR = (15, 15, 18), (230, 230, 230), (40, 160, 70), (220, 60, 70)

PLAYING_CAPTION = "Maze - Reach the green goal (R to regenerate)"
WON_CAPTION = "You win! Press R to regenerate, Esc to quit"

KEY_COMMANDS = {
    pygame.K_UP: Command.MOVE_NORTH, pygame.K_w: Command.MOVE_NORTH,
    pygame.K_RIGHT: Command.MOVE_EAST, pygame.K_d: Command.MOVE_EAST,
    pygame.K_DOWN: Command.MOVE_SOUTH, pygame.K_s: Command.MOVE_SOUTH,
    pygame.K_LEFT: Command.MOVE_WEST, pygame.K_a: Command.MOVE_WEST,
    pygame.K_r: Command.REGENERATE,
    pygame.K_ESCAPE: Command.QUIT,
}


def command_for_event(event):
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None


def draw_maze(surface, maze):
    surface.fill(BACKGROUND)
    for y in range(maze.height):
        for x in range(maze.width):
            x0, y0 = PAD + x * CELL_SIZE, PAD + y * CELL_SIZE
            x1, y1 = x0 + CELL_SIZE, y0 + CELL_SIZE
            walls = maze.walls_at(x, y)
            if walls & WALL_N: pygame.draw.line(surface, WALL_COLOR, (x0, y0), (x1, y0))
            if walls & WALL_E: pygame.draw.line(surface, WALL_COLOR, (x1, y0), (x1, y1))
            if walls & WALL_S: pygame.draw.line(surface, WALL_COLOR, (x0, y1), (x1, y1))
            if walls & WALL_W: pygame.draw.line(surface, WALL_COLOR, (x0, y0), (x0, y1))
def draw_player_goal(surface, maze, pos):
    gx, gy = maze.goal
    goal_rect = pygame.Rect(PAD + gx * CELL_SIZE + 6, PAD + gy * CELL_SIZE + 6, CELL_SIZE - 12, CELL_SIZE - 12)
    pygame.draw.rect(surface, GOAL_COLOR, goal_rect)
    player_rect = pygame.Rect(PAD + pos[0] * CELL_SIZE + 8, PAD + pos[1] * CELL_SIZE + 8, CELL_SIZE - 16, CELL_SIZE - 16)
    pygame.draw.rect(surface, PLAYER_COLOR, player_rect)


def main(seed=None):
    try:
        pygame.init()
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(PLAYING_CAPTION)
        clock = pygame.time.Clock()

        print(f"Seed: {seed if seed is not None else 'random'}")
        game = Game(MazeConfig(MAZE_WIDTH, MAZE_HEIGHT), seed)
        running = True
        while running:
            for event in pygame.event.get():
                command = command_for_event(event)
                if command is None:
                    continue
                was_won = game.won
                running = game.handle(command)
                if not running:
                    break
                if command is Command.REGENERATE:
                    print(f"New maze: {game.maze.passages()} passages")
                    pygame.display.set_caption(PLAYING_CAPTION)
                elif game.won and not was_won:
                    print(f"Reached the goal in {game.moves} moves")
                    pygame.display.set_caption(WON_CAPTION)

            draw_maze(screen, game.maze)
            draw_player_goal(screen, game.maze, game.position)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
        sys.exit()

if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else None)
