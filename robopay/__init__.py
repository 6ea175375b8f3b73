"""Robokassa payment initiation and callback verification."""

__version__ = "0.1.0"
