"""
2D Boids Simulation
===================

A flock of point agents steering by alignment, cohesion and separation
in a wrap-around world.

Controls:
    - H: Toggle help text
    - ESC: Quit
"""

from core import Application


def main():
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
