import pygame
from config import TEXT, FONT_NAME, SCORE_FONT_SIZE, GAME_OVER_FONT_SIZE, SCORE_OFFSET

_fonts = {}

def get_font(size):
    # SysFont falls back to pygame's default font when FONT_NAME is missing.
    if not pygame.font.get_init():
        # Fonts from before a pygame.quit() are dead.
        _fonts.clear()
        pygame.font.init()
    if size not in _fonts:
        _fonts[size] = pygame.font.SysFont(FONT_NAME, size, bold=True)
    return _fonts[size]

def score_text(score):
    return f"Score: {score}"

def draw_score(surface, score, color=TEXT):
    font = get_font(SCORE_FONT_SIZE)
    label = font.render(score_text(score), True, color)
    surface.blit(label, (10, 0))
    return label.get_rect(topleft=(10, 0))

def draw_game_over(surface, score, color=TEXT):
    width, height = surface.get_size()
    title = get_font(GAME_OVER_FONT_SIZE).render("Game Over", True, color)
    label = get_font(SCORE_FONT_SIZE).render(score_text(score), True, color)

    title_rect = title.get_rect(centerx=width // 2, bottom=height // 2)
    label_rect = label.get_rect(centerx=width // 2, bottom=height // 2 + SCORE_OFFSET)
    surface.blit(title, title_rect)
    surface.blit(label, label_rect)
    return title_rect, label_rect
