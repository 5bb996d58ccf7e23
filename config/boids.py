"""Configuration for the 2D boids flocking simulation."""

WINDOW = {
    "width": 1024,
    "height": 768,
    "title": "Boids"
}

FLOCK = {
    "count": 400,
    "max_velocity": 5.0,
    "max_force": 1.0,
    "perception_radius": 100.0,   # Strict distance threshold for neighbors
    "point_radius": 1.0,          # Drawn size of each boid

    # Initial randomization ranges (symmetric around zero)
    "initial_velocity": 10.0,
    "initial_acceleration": 0.5,
}

SIMULATION = {
    "tick_rate": 60,    # Ticks per second, soft real-time
    "seed": None,       # Set an int for reproducible initial flocks
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "boid": (1.0, 1.0, 1.0),
    "text": (0.9, 0.9, 0.9)
}
