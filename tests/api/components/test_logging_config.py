"""Tests for LoggingConfigurator component."""

import logging

import pytest

from hubdocs.api.components.logging_config import (
    LoggingConfigurator,
    SchemaDegradationFilter,
)


def make_record(type_name=None):
    record = logging.LogRecord("hubdocs.core.schema", logging.DEBUG, __file__, 1, "degraded", None, None)
    if type_name is not None:
        record.type_name = type_name
    return record


class TestSchemaDegradationFilter:
    """Test repeated degradation suppression."""

    def test_first_record_passes(self):
        """Test that the first record for a type is logged."""
        assert SchemaDegradationFilter().filter(make_record("Broken")) is True

    def test_repeated_record_is_suppressed(self):
        """Test that later records for the same type are dropped."""
        filter_instance = SchemaDegradationFilter()
        filter_instance.filter(make_record("Broken"))

        assert filter_instance.filter(make_record("Broken")) is False
        assert filter_instance.filter(make_record("Other")) is True

    def test_records_without_type_pass(self):
        """Test that unrelated records are never filtered."""
        filter_instance = SchemaDegradationFilter()
        assert filter_instance.filter(make_record()) is True
        assert filter_instance.filter(make_record()) is True

    def test_reset(self):
        """Test that reset forgets seen types."""
        filter_instance = SchemaDegradationFilter()
        filter_instance.filter(make_record("Broken"))
        filter_instance.reset()
        assert filter_instance.filter(make_record("Broken")) is True


class TestLoggingConfigurator:
    """Test logger setup."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("hubdocs")
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_configure_sets_level(self):
        """Test that the level name is applied."""
        assert LoggingConfigurator.configure("debug").level == logging.DEBUG
        assert LoggingConfigurator.configure("WARNING").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        """Test that unknown level names use info."""
        assert LoggingConfigurator.configure("verbose").level == logging.INFO

    def test_handler_is_added_once(self):
        """Test that repeated configuration does not duplicate handlers."""
        logger = LoggingConfigurator.configure()
        LoggingConfigurator.configure()

        handlers = [h for h in logger.handlers if getattr(h, "_hubdocs_handler", False)]
        assert len(handlers) == 1
        assert any(isinstance(f, SchemaDegradationFilter) for f in handlers[0].filters)
