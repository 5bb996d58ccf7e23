"""Input handling for keyboard and window events."""

import pygame
from pygame.locals import *


class InputHandler:
    """Maps pygame events to application actions."""

    def __init__(self):
        self.show_help = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_h:
                self.show_help = not self.show_help

        return True
