"""
Models package - configuration, content and event models for prompter
"""

from .enums import PromptState, PromptEvent, RenderSource, EventSource, LogLevel, LogCategory
from .errors import PrompterError, InvalidContentError, ConfigurationError, AttachError
from .config import PromptConfig
from .content import ContentSequence, parse_content
from .partition import Partition

__all__ = [
    'PromptState',
    'PromptEvent',
    'RenderSource',
    'EventSource',
    'LogLevel',
    'LogCategory',
    'PrompterError',
    'InvalidContentError',
    'ConfigurationError',
    'AttachError',
    'PromptConfig',
    'ContentSequence',
    'parse_content',
    'Partition',
]
