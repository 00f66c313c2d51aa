"""
Partition — the visible/hidden split of one content string at a splice point.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Partition:
    """
    Split of a content string for rendering.

    Attributes:
        revealed: Characters before the splice point
        covered: Character occupied by the cursor ('' when no cursor is drawn)
        pending: Characters still hidden
        cursor: Cursor marker drawn after `revealed`, if any

    revealed + covered + pending is always the original string.
    """

    revealed: str
    covered: str
    pending: str
    cursor: Optional[str] = None

    @property
    def committed(self) -> str:
        """Text written as display content."""
        if self.cursor is not None:
            return self.revealed + self.cursor
        return self.revealed

    @property
    def hidden(self) -> str:
        """Text written as the not-yet-committed tail."""
        return self.pending

    @property
    def source_text(self) -> str:
        return self.revealed + self.covered + self.pending

    @property
    def splice(self) -> int:
        return len(self.revealed)

    @property
    def is_complete(self) -> bool:
        return not self.covered and not self.pending and self.cursor is None
