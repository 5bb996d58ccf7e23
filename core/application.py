"""Main application class that ties the simulation to a window."""

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import boids as config
from .input_handler import InputHandler
from rendering import PointRenderer, TextRenderer
from boids import SimulationController


class Application:
    """
    Window and frame loop.

    The simulation ticks on its own thread; each frame only copies the
    latest position snapshot and draws it.
    """

    def __init__(self):
        pygame.init()
        self.screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        pygame.display.set_mode(self.screen_size, DOUBLEBUF | OPENGL, vsync=1)
        pygame.display.set_caption(config.WINDOW["title"])

        self.input_handler = InputHandler()

        # Rendering components
        self.points = PointRenderer()
        self.text_renderer = TextRenderer()

        # Simulation
        self.controller = SimulationController()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()
        print("[App] Ready!")

    def _setup_gl(self):
        """World-sized orthographic projection, origin bottom-left."""
        glClearColor(*config.COLORS["background"])

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.controller.settings.max_x, 0, self.controller.settings.max_y, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _render(self):
        """Render the latest complete tick."""
        glClear(GL_COLOR_BUFFER_BIT)

        self.points.draw(self.controller.snapshot())

        lines = [
            f"Boids: {self.controller.num_boids}  |  FPS: {self.fps:.0f}  |  "
            f"Ticks: {self.controller.tick_count:,}  |  {self.controller.state.value.upper()}"
        ]
        if self.input_handler.show_help:
            lines.append("H: Toggle help | ESC: Quit")
        self.text_renderer.draw_lines(lines, 10, 10, self.screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        self.controller.start()

        try:
            while self.running:
                self.clock.tick()
                self.fps = self.clock.get_fps()

                self._handle_events()
                self._render()
        finally:
            self.controller.stop(timeout=1.0)
            pygame.quit()
            print("[App] Shutdown complete")
