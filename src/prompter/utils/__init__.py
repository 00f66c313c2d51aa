"""
Utility functions for prompter
"""

from .interpolation import linear_interpolation, clamp
from .logger import get_logger, configure_logger

__all__ = [
    'linear_interpolation',
    'clamp',
    'get_logger',
    'configure_logger',
]
