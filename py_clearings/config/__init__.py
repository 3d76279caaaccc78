"""
Configuration modules for clearing map generation.
"""

from .config import Settings, settings
from .generation_settings import GenerationSettings
from .map_layouts import LAYOUTS, choose_layout, get_layout, get_layouts, list_layouts

__all__ = ['Settings', 'settings', 'GenerationSettings', 'LAYOUTS',
           'choose_layout', 'get_layout', 'get_layouts', 'list_layouts']
