import logging
import pygame
from config import PAUSE_KEY, RESTART_KEY
from envs.snake_env import Direction

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def handle_key(game, key):
    """Apply one key press to the game. Returns True if it changed anything."""
    if game.game_over:
        if key == RESTART_KEY:
            game.restart()
            return True
        return False

    if key == PAUSE_KEY:
        return game.toggle_pause()

    direction = KEY_TO_DIRECTION.get(key)
    if direction is None:
        return False

    snake = game.snake
    if direction is snake.direction.opposite:
        logger.debug("Ignored reversal %s while moving %s", direction.name, snake.direction.name)
        return False
    snake.set_direction(direction)
    return True


def handle_event(game, event):
    if event.type != pygame.KEYDOWN:
        return False
    return handle_key(game, event.key)
