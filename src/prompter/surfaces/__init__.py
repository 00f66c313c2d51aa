"""
Display surfaces and the screen hosting them
"""

from .surface import Surface, BoundingBox
from .memory_surface import MemorySurface
from .terminal_surface import TerminalSurface
from .screen import Screen, Viewport

__all__ = [
    'Surface',
    'BoundingBox',
    'MemorySurface',
    'TerminalSurface',
    'Screen',
    'Viewport',
]
