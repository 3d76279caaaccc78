"""
Clearing map generation for woodland board games.
"""

__version__ = "0.1.0"
