"""HUD text rendering."""

import pygame
from OpenGL.GL import *

from config import boids as config


class TextRenderer:
    """Blits pygame-rendered text onto the OpenGL framebuffer."""

    def __init__(self, font_name: str = "monospace", font_size: int = 16):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = tuple(int(c * 255) for c in config.COLORS["text"])
        self.line_height = self.font.get_linesize()

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """
        Draw lines of text top-down starting at (x, y).

        Args:
            lines: Strings to render, one per row
            x: X position from left edge
            y: Y position of the first line from top edge
            screen_size: (width, height) of the window
        """
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        for row, text in enumerate(lines):
            surface = self.font.render(text, True, self.color)
            data = pygame.image.tostring(surface, "RGBA", True)
            w, h = surface.get_size()
            top = y + row * self.line_height
            glWindowPos2i(x, screen_size[1] - top - h)
            glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)

        glDisable(GL_BLEND)
