"""Simulation of autonomous cars crossing an intersection without traffic lights."""

__version__ = "0.1.0"