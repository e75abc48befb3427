import pygame
from config import BACKGROUND

def draw_grid(surface, grid_w, grid_h, cell_size, color=BACKGROUND):
    rect = pygame.Rect(0, 0, grid_w * cell_size, grid_h * cell_size)
    pygame.draw.rect(surface, color, rect)
