import logging
import pygame
from envs.game_env import GameLoop
from gui.renderer import Renderer
from gui.input_handler import handle_event
from config import UNIT_SIZE, SCREEN_WIDTH, SCREEN_HEIGHT, BOARD_WIDTH as GRID_W, BOARD_HEIGHT as GRID_H, DELAY_MS, CAPTION, LOG_LEVEL

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def game():
    pygame.init()
    window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(CAPTION)

    renderer = Renderer(window, GRID_W, GRID_H, UNIT_SIZE)
    loop = GameLoop(GRID_W, GRID_H, on_redraw=renderer.render)
    renderer.render(loop)

    # Timer events queue behind key events, so each tick runs to completion on this thread.
    pygame.time.set_timer(TICK_EVENT, DELAY_MS)
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            logger.info("Window closed with score %d", loop.score)
            return
        if event.type == TICK_EVENT:
            loop.tick()
        else:
            handle_event(loop, event)


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        game()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
