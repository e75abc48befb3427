import pygame
from config import FOOD

def draw_food(surface, food_pos, cell_size, color=FOOD):
    x, y = int(food_pos[0]), int(food_pos[1])
    rect = pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size)
    pygame.draw.ellipse(surface, color, rect)
