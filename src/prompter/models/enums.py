"""
Enums for the prompt animation state machine
"""

from enum import Enum, auto


class PromptState(Enum):
    """
    Lifecycle state of a single Prompter instance

    IDLE: Not revealing, may start on the next play()
    RUNNING: Reveal in flight, or resting for the configured interval
    COMPLETED: Finished (or stopped); play() is ignored until reset()
    """
    IDLE = auto()
    RUNNING = auto()
    COMPLETED = auto()


class PromptEvent(Enum):
    """Inputs accepted by the prompt state machine"""
    PLAY = auto()
    FRAME = auto()
    INTERVAL_ELAPSED = auto()
    STOP = auto()
    RESET = auto()


class RenderSource(Enum):
    """Which step of the reveal last wrote to a surface"""
    INITIAL = auto()    # Layout reserved at construction / reveal start
    FRAME = auto()      # Partial reveal written by a frame tick
    COMMIT = auto()     # Full string committed at completion


class EventSource(Enum):
    """Event source identifiers for application events"""
    SCREEN = auto()
    DISPATCHER = auto()
    APPLICATION = auto()


class LogLevel(Enum):
    """Log levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for structured logging"""
    CONFIG = auto()
    ANIMATION = auto()
    RENDER = auto()
    SCHEDULER = auto()
    REGISTRY = auto()
    VIEWPORT = auto()
    EVENT = auto()
    SYSTEM = auto()
