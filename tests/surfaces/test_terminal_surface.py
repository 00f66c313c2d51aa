"""
Tests for TerminalSurface ANSI output.
"""

import io

from prompter.surfaces.terminal_surface import CLEAR_LINE, TerminalSurface
from prompter.utils.logger import Colors


class TestTerminalSurface:

    def test_pending_drawn_as_blanks(self):
        out = io.StringIO()
        surface = TerminalSurface(id="t", stream=out, use_colors=False)

        surface.write("ab", "cd")

        assert out.getvalue() == f"{CLEAR_LINE}ab  "

    def test_class_style_applied(self):
        out = io.StringIO()
        surface = TerminalSurface(
            id="t",
            stream=out,
            class_styles={"typed": Colors.GREEN},
        )

        surface.add_class("typed")
        surface.write_text("done")

        assert out.getvalue().endswith(f"{CLEAR_LINE}{Colors.GREEN}done{Colors.RESET}")

    def test_class_change_redraws(self):
        out = io.StringIO()
        surface = TerminalSurface(id="t", text="hi", stream=out, use_colors=False)

        surface.add_class("typing")
        surface.remove_class("typing")

        assert out.getvalue() == f"{CLEAR_LINE}hi" * 2

    def test_finish_ends_line(self):
        out = io.StringIO()
        surface = TerminalSurface(id="t", stream=out)

        surface.finish()
        assert out.getvalue() == "\n"
