"""
Battle simulator package.

This package contains the turn-based party battle engine: entities and their
statuses, the ability catalog, action resolution, AI policies, the battle
controller, and a terminal front-end.
"""

__version__ = "0.1.0"
