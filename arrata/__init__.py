"""Arrata - dice rules and character data for the Arrata tabletop RPG."""

__version__ = "0.1.0"
