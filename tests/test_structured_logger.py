"""
Tests for the structured Logger: format, level filtering, bound loggers.
"""

import io

from prompter.utils.logger import Logger, LogCategory, LogLevel, configure_logger, get_logger


def make_logger(min_level=LogLevel.DEBUG):
    out = io.StringIO()
    return Logger(min_level=min_level, use_colors=False, stream=out), out


class TestLogger:

    def test_message_line(self):
        logger, out = make_logger()
        logger.log(LogCategory.ANIMATION, "Reveal started")

        line = out.getvalue().splitlines()[0]
        assert "ANIMATION" in line
        assert "✓ Reveal started" in line

    def test_details_tree(self):
        logger, out = make_logger()
        logger.for_category(LogCategory.REGISTRY).info("Prompter registered", surface="title", total=1)

        lines = out.getvalue().splitlines()
        assert lines[1].strip() == "├─ surface: title"
        assert lines[2].strip() == "└─ total: 1"

    def test_level_filter(self):
        logger, out = make_logger(min_level=LogLevel.WARN)
        log = logger.for_category(LogCategory.RENDER)
        log.debug("hidden")
        log.info("hidden too")
        log.error("shown")

        assert out.getvalue().count("\n") == 1
        assert "✗ shown" in out.getvalue()

    def test_no_colors_when_disabled(self):
        logger, out = make_logger()
        logger.for_category(LogCategory.CONFIG).warn("careful")

        assert "\033[" not in out.getvalue()

    def test_colors_when_enabled(self):
        out = io.StringIO()
        Logger(use_colors=True, stream=out).for_category(LogCategory.SCHEDULER).info("tick")

        assert "\033[" in out.getvalue()
        assert "SCHEDULER" in out.getvalue()


class TestConfigureLogger:

    def test_configures_singleton_in_place(self):
        logger = get_logger()
        saved = (logger.min_level, logger.use_colors, logger.stream)
        out = io.StringIO()
        try:
            configure_logger(LogLevel.INFO, use_colors=False, stream=out)
            assert get_logger() is logger

            get_logger().for_category(LogCategory.SYSTEM).info("configured")
            assert "configured" in out.getvalue()
        finally:
            configure_logger(*saved)
