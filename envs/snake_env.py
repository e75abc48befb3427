# snake_env.py
import logging
from collections import deque
from enum import Enum

from config import START_BODY

logger = logging.getLogger(__name__)


# ------------------- Directions -------------------
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


class MoveOutcome(Enum):
    OK = "ok"
    WALL_COLLISION = "wall"
    SELF_COLLISION = "self"


# ------------------- Snake -------------------
class Snake:
    """Body cells from head (index 0) to tail, moving one cell per tick."""

    MIN_LENGTH = 3

    def __init__(self, board_w, board_h, body=None, direction=Direction.RIGHT):
        body = list(START_BODY if body is None else body)
        if len(body) < self.MIN_LENGTH:
            raise ValueError(f"snake needs at least {self.MIN_LENGTH} cells, got {len(body)}")
        self.board_w = board_w
        self.board_h = board_h
        self._body = deque(tuple(cell) for cell in body)
        self.direction = direction
        self.growing = False

    def __len__(self):
        return len(self._body)

    @property
    def head(self):
        return self._body[0]

    @property
    def body(self):
        return tuple(self._body)

    def set_direction(self, direction):
        self.direction = direction

    def grow(self):
        self.growing = True

    def move(self):
        """Advance one cell and report whether the new head collided.

        The body is updated before the checks, so a collision leaves the
        snake in the position it died in.
        """
        dx, dy = self.direction.delta
        x, y = self._body[0]
        new_head = (x + dx, y + dy)

        self._body.appendleft(new_head)
        if self.growing:
            self.growing = False
        else:
            self._body.pop()

        if not self.in_bounds(new_head):
            return MoveOutcome.WALL_COLLISION
        if new_head in list(self._body)[1:]:
            return MoveOutcome.SELF_COLLISION
        return MoveOutcome.OK

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.board_w and 0 <= y < self.board_h


# ------------------- Food -------------------
class Food:
    def __init__(self, position=(0, 0)):
        self.position = tuple(position)

    def place(self, board_w, board_h, rng):
        # Cells under the snake are not excluded.
        self.position = (rng.randrange(board_w), rng.randrange(board_h))
        logger.debug("Food placed at %s", self.position)
        return self.position

    def is_eaten(self, snake_head):
        return tuple(snake_head) == self.position
