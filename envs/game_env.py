# game_env.py
import logging
import random
from enum import Enum

from config import BOARD_WIDTH, BOARD_HEIGHT
from .snake_env import Direction, Food, MoveOutcome, Snake

logger = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ------------------- Game Loop -------------------
class GameLoop:
    """Owns the snake, the food and the run state; one ``tick`` per timer event."""

    def __init__(self, board_w=BOARD_WIDTH, board_h=BOARD_HEIGHT, rng=None, on_redraw=None):
        self.board_w = board_w
        self.board_h = board_h
        self.rng = rng if rng is not None else random.Random()
        self.on_redraw = on_redraw
        self.game_over_reason = None
        self.restart()

    @property
    def score(self):
        return len(self.snake)

    @property
    def running(self):
        return self.state is GameState.RUNNING

    @property
    def paused(self):
        return self.state is GameState.PAUSED

    @property
    def game_over(self):
        return self.state is GameState.GAME_OVER

    def restart(self):
        self.snake = Snake(self.board_w, self.board_h, direction=Direction.RIGHT)
        self.food = Food()
        self.food.place(self.board_w, self.board_h, self.rng)
        self.state = GameState.RUNNING
        self.game_over_reason = None
        logger.info("Game started: score=%d food=%s", self.score, self.food.position)

    def toggle_pause(self):
        if self.game_over:
            return False
        self.state = GameState.RUNNING if self.paused else GameState.PAUSED
        logger.debug("Pause toggled: state=%s", self.state.value)
        return True

    def tick(self):
        if self.running:
            self._step()
        if self.on_redraw is not None:
            self.on_redraw(self)

    def _step(self):
        outcome = self.snake.move()
        if outcome is not MoveOutcome.OK:
            self.state = GameState.GAME_OVER
            self.game_over_reason = outcome
            logger.info("Game Over (%s). Final score: %d", outcome.value, self.score)
            return
        if self.food.is_eaten(self.snake.head):
            self.snake.grow()
            logger.debug("Food eaten at %s, score=%d", self.food.position, self.score)
            self.food.place(self.board_w, self.board_h, self.rng)

    def get_snake(self):
        return self.snake.body

    def get_food(self):
        return self.food.position
