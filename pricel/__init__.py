"""Simulation of locomotive axles passing a line of track sensors."""

__version__ = "0.1.0"