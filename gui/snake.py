import pygame
from config import SNAKE

def draw_snake(surface, snake_body, cell_size, color=SNAKE):
    for pos in snake_body:
        x, y = int(pos[0]), int(pos[1])
        rect = pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size)
        pygame.draw.rect(surface, color, rect)
