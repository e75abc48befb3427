import os
import pygame

# ----- Window & grid -----
UNIT_SIZE = 25
SCREEN_WIDTH, SCREEN_HEIGHT = 600, 600
BOARD_WIDTH, BOARD_HEIGHT = SCREEN_WIDTH // UNIT_SIZE, SCREEN_HEIGHT // UNIT_SIZE
CAPTION = "Snake Game"

# ----- Timing -----
DELAY_MS = 75

# ----- Colors -----
BACKGROUND = (0, 0, 0)
SNAKE = (0, 255, 0)
FOOD = (255, 0, 0)
TEXT = (255, 0, 0)

# ----- Fonts -----
FONT_NAME = "Ink Free"
SCORE_FONT_SIZE = 30
GAME_OVER_FONT_SIZE = 75
SCORE_OFFSET = 100  # px below "Game Over"

# ----- Snake -----
START_BODY = [(5, 5), (4, 5), (3, 5)]

# ----- Keys -----
PAUSE_KEY = pygame.K_p
RESTART_KEY = pygame.K_SPACE

LOG_LEVEL = os.environ.get("SNAKE_LOG_LEVEL", "INFO")
