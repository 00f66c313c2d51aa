"""
Structured console logger

    [14:23:45] ANIMATION ✓ Reveal started
               ├─ surface: banner
               └─ index: 0

Every module binds one category at import time:

    log = get_logger().for_category(LogCategory.ANIMATION)
    log.info("Reveal started", surface="banner", index=0)
"""

import sys
from datetime import datetime
from typing import Optional, TextIO
from prompter.models.enums import LogLevel, LogCategory


class Colors:
    """ANSI escape codes (shared with TerminalSurface class styles)"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_BLUE = '\033[94m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.RENDER: Colors.MAGENTA,
    LogCategory.SCHEDULER: Colors.BRIGHT_BLUE,
    LogCategory.REGISTRY: Colors.BRIGHT_GREEN,
    LogCategory.VIEWPORT: Colors.BRIGHT_CYAN,
    LogCategory.EVENT: Colors.BRIGHT_MAGENTA,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

# level -> (priority, symbol, color)
LEVELS = {
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

DETAIL_INDENT = " " * 11


class Logger:
    """
    Categorised logger writing one header line plus a detail tree per message.

    Args:
        min_level: Messages below this level are dropped
        use_colors: ANSI colors (disable when output is not a terminal)
        stream: Output stream; stderr when None, so a terminal surface keeps stdout
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def log(self, category: LogCategory, message: str, level: LogLevel = LogLevel.INFO, **details):
        priority, symbol, color = LEVELS[level]
        if priority < LEVELS[self.min_level][0]:
            return

        out = self.stream or sys.stderr
        timestamp = datetime.now().strftime('[%H:%M:%S]')
        cat = self._paint(category.name.ljust(9), CATEGORY_COLORS.get(category, Colors.WHITE))
        print(f"{timestamp} {cat} {self._paint(symbol, color)} {self._paint(message, color)}", file=out)

        items = list(details.items())
        for i, (key, value) in enumerate(items):
            branch = "└─" if i == len(items) - 1 else "├─"
            print(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {key}: {value}", file=out)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a fixed category."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, **details):
        self._base.log(self._category, message, level, **details)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: bool = True,
    stream: Optional[TextIO] = None
):
    """
    Reconfigure the shared logger in place.

    Bound loggers created at import time keep pointing at the same instance.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
