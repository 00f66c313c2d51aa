"""
Tests for Registry: registration, autoplay, tag matching, removal.
"""

from prompter.models.enums import PromptState
from prompter.services.registry import Registry
from prompter.surfaces.memory_surface import MemorySurface


class TestRegistration:

    def test_autoplay_starts_on_register(self, make_prompter):
        registry = Registry()
        p = registry.register(make_prompter("ok"))

        assert p in registry
        assert len(registry) == 1
        assert p.state == PromptState.RUNNING

    def test_autoplay_disabled_stays_idle(self, make_prompter):
        registry = Registry()
        p = registry.register(make_prompter("ok", autoplay=False))

        assert p.state == PromptState.IDLE
        assert registry.autoplay_instances() == []

    def test_duplicate_registration_ignored(self, make_prompter):
        registry = Registry()
        p = make_prompter("ok", autoplay=False)

        registry.register(p)
        registry.register(p)

        assert len(registry) == 1

    def test_registering_while_iterating(self, make_prompter):
        registry = Registry()
        registry.register(make_prompter("a", autoplay=False))

        visited = 0
        for _ in registry:
            visited += 1
            registry.register(make_prompter("b", autoplay=False))

        assert visited == 1
        assert len(registry) == 2


class TestMatching:

    def test_match_by_id_and_class(self, make_prompter):
        registry = Registry()
        title = registry.register(make_prompter(
            "a", surface=MemorySurface(id="title", classes={"banner"}), autoplay=False
        ))
        footer = registry.register(make_prompter(
            "b", surface=MemorySurface(id="footer", classes={"banner", "small"}), autoplay=False
        ))

        assert registry.match("title") == [title]
        assert registry.match("banner") == [title, footer]
        assert registry.match("small") == [footer]
        assert registry.match("missing") == []

    def test_class_tag_is_exact_membership(self, make_prompter):
        registry = Registry()
        registry.register(make_prompter(
            "a", surface=MemorySurface(id="x", classes={"banner-large"}), autoplay=False
        ))

        assert registry.match("banner") == []


class TestRemoval:

    def test_remove_disposes(self, make_prompter, scheduler):
        registry = Registry()
        p = registry.register(make_prompter("ok"))

        assert registry.remove(p) is True
        assert p not in registry
        assert scheduler.tick(0) == 0

    def test_remove_unknown(self, make_prompter):
        assert Registry().remove(make_prompter("ok")) is False

    def test_clear(self, make_prompter):
        registry = Registry()
        registry.register(make_prompter("a"))
        registry.register(make_prompter("b"))

        registry.clear()
        assert len(registry) == 0
