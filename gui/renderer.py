import pygame
from config import BACKGROUND
from gui.grid import draw_grid
from gui.snake import draw_snake
from gui.food import draw_food
from gui.hud import draw_score, draw_game_over

class Renderer:
    def __init__(self, surface, grid_w, grid_h, cell_size=25, headless=False):
        self.surface = surface
        self.grid_w = grid_w
        self.grid_h = grid_h
        self.cell_size = cell_size
        self.headless = headless

    def render(self, game):
        self.surface.fill(BACKGROUND)
        if game.game_over:
            draw_game_over(self.surface, game.score)
        else:
            draw_grid(self.surface, self.grid_w, self.grid_h, self.cell_size)
            draw_food(self.surface, game.get_food(), self.cell_size)
            draw_snake(self.surface, game.get_snake(), self.cell_size)
            draw_score(self.surface, game.score)
        if not self.headless:
            pygame.display.update()
