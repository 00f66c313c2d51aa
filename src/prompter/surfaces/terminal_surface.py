"""
TerminalSurface — renders a surface as one line of an ANSI terminal.

The pending tail is drawn as blank cells so the line keeps its final width
while characters appear, the way a hidden span keeps its layout box.
"""

import sys
from typing import Dict, Iterable, Optional, TextIO

from prompter.surfaces.surface import Surface
from prompter.utils.logger import Colors

CLEAR_LINE = "\r\033[2K"


class TerminalSurface(Surface):
    """
    Single-line terminal surface.

    Args:
        stream: Output stream (stdout by default)
        class_styles: ANSI style per class name; the first class present wins
        use_colors: Disable to emit plain text (e.g. when piped)
    """

    def __init__(
        self,
        id: Optional[str] = None,
        classes: Iterable[str] = (),
        text: str = "",
        top: float = 0,
        height: float = 1,
        stream: Optional[TextIO] = None,
        class_styles: Optional[Dict[str, str]] = None,
        use_colors: bool = True
    ):
        super().__init__(id=id, classes=classes, text=text, top=top, height=height)
        self.stream = stream or sys.stdout
        self.class_styles = dict(class_styles or {})
        self.use_colors = use_colors

    def _style(self) -> Optional[str]:
        if not self.use_colors:
            return None
        for name, style in self.class_styles.items():
            if name in self.classes:
                return style
        return None

    def _draw(self) -> None:
        text = self.committed
        style = self._style()
        if style:
            text = f"{style}{text}{Colors.RESET}"
        self.stream.write(f"{CLEAR_LINE}{text}{' ' * len(self.pending)}")
        self.stream.flush()

    def add_class(self, name: str) -> None:
        super().add_class(name)
        self._draw()

    def remove_class(self, name: str) -> None:
        super().remove_class(name)
        self._draw()

    def finish(self) -> None:
        """Move the cursor past this line."""
        self.stream.write("\n")
        self.stream.flush()
