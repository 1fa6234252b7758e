"""Fuel Tracker - carnet de carburant personnel / personal vehicle fuel log."""

__version__ = "0.1.0"
