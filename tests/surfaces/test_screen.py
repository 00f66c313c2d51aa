"""
Tests for Screen selector queries, geometry and viewport notifications.
"""

import pytest

from prompter.models.events import EventType
from prompter.surfaces.memory_surface import MemorySurface
from prompter.surfaces.screen import Screen
from prompter.surfaces.surface import BoundingBox


class TestQuery:

    def test_by_id(self, screen):
        assert [s.id for s in screen.query("#footer")] == ["footer"]

    def test_by_class(self, screen):
        assert [s.id for s in screen.query(".banner")] == ["title", "footer"]

    def test_compound_class(self, screen):
        assert [s.id for s in screen.query(".banner.small")] == ["footer"]

    def test_comma_list_without_duplicates(self, screen):
        assert [s.id for s in screen.query("#footer, .banner")] == ["title", "footer"]

    def test_universal(self, screen):
        assert len(screen.query("*")) == 2

    def test_no_match(self, screen):
        assert screen.query(".missing-selector") == []

    def test_unsupported_selector(self, screen):
        with pytest.raises(ValueError):
            screen.query("div > p")

    @pytest.mark.parametrize("selector", ["div > p", "title", "#", ".", ".banner .small", "#title, p"])
    def test_unsupported_selector_on_empty_screen(self, selector):
        with pytest.raises(ValueError):
            Screen(height=5).query(selector)


class TestGeometry:

    def test_rect_follows_scroll(self, screen):
        footer = screen.query("#footer")[0]

        assert screen.rect_of(footer) == BoundingBox(30, 32)
        screen.viewport.scroll_y = 25
        assert screen.rect_of(footer) == BoundingBox(5, 7)

    @pytest.mark.asyncio
    async def test_resize_and_scroll_publish(self, screen, event_bus):
        await screen.resize(20)
        await screen.scroll_to(4)

        history = event_bus.get_event_history()
        assert [e.type for e in history] == [EventType.VIEWPORT_RESIZED, EventType.VIEWPORT_SCROLLED]
        assert screen.viewport.height == 20
        assert screen.viewport.scroll_y == 4

    @pytest.mark.asyncio
    async def test_without_bus_only_updates_viewport(self):
        screen = Screen(height=5)
        await screen.scroll_to(3)

        assert screen.viewport.scroll_y == 3


class TestSurface:

    def test_matches_id_or_class(self):
        surface = MemorySurface(id="a", classes={"x", "y"})

        assert surface.matches("a")
        assert surface.matches("y")
        assert not surface.matches("z")

    def test_write_and_text(self):
        surface = MemorySurface(text="start")
        surface.write("ab", "cd")

        assert surface.text == "ab"
        assert surface.pending == "cd"

        surface.write_text("abcd")
        assert surface.history == [("ab", "cd"), ("abcd", "")]

        surface.clear_history()
        assert surface.write_count == 0
