"""Simulation and display configuration."""
