"""Point rendering for boid positions."""

import numpy as np
from OpenGL.GL import *

from config import boids as config


class PointRenderer:
    """
    Draws one fixed-radius point per boid.

    Takes the position snapshot handed out by the simulation each frame;
    it never holds on to simulation state between frames.
    """

    def __init__(self):
        self.radius = config.FLOCK["point_radius"]
        self.color = config.COLORS["boid"]

    def draw(self, positions: np.ndarray):
        """
        Draw every position as a point.

        Args:
            positions: (N, 2) array of world coordinates
        """
        count = len(positions)
        if count == 0:
            return

        vertices = np.ascontiguousarray(positions, dtype=np.float32)

        glEnable(GL_POINT_SMOOTH)
        glPointSize(max(1.0, self.radius * 2))
        glColor3f(*self.color)

        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(2, GL_FLOAT, 0, vertices)
        glDrawArrays(GL_POINTS, 0, count)
        glDisableClientState(GL_VERTEX_ARRAY)
