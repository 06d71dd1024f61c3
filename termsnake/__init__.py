"""
termsnake - a terminal Snake game.
"""

__version__ = "0.1.0"
