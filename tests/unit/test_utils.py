"""
Unit tests for collection helpers and logging setup.
"""

import logging

import pytest
from static_schema.utils import (
    eq_strict,
    has_own_property,
    intersect,
    is_non_empty,
    map_non_empty,
    setup_logging,
)


class TestCollections:
    """Test collection helpers."""

    def test_is_non_empty(self):
        """Test non-empty detection."""
        assert is_non_empty([1])
        assert not is_non_empty([])
        assert not is_non_empty(())

    def test_has_own_property_mapping(self):
        """Test mapping keys count as own properties."""
        assert has_own_property({"a": 1}, "a")
        assert not has_own_property({"a": 1}, "b")

    def test_has_own_property_object(self):
        """Test only instance attributes count."""
        class Point:
            kind = "point"

            def __init__(self):
                self.x = 1

        point = Point()
        assert has_own_property(point, "x")
        assert not has_own_property(point, "kind")

    def test_eq_strict(self):
        """Test strict equality distinguishes types."""
        assert eq_strict(1, 1)
        assert not eq_strict(1, True)
        assert not eq_strict(1, 1.0)

    def test_intersect_mappings(self):
        """Test mappings merge, preferring the second."""
        assert intersect({"a": 1, "b": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_intersect_does_not_mutate(self):
        """Test the operands are left untouched."""
        a, b = {"a": 1}, {"b": 2}
        intersect(a, b)
        assert a == {"a": 1}
        assert b == {"b": 2}

    def test_intersect_non_composite(self):
        """Test non-composite values resolve to the second."""
        assert intersect(1, 2) == 2
        assert intersect("a", "b") == "b"

    def test_intersect_missing_operand(self):
        """Test a missing operand returns the second value."""
        assert intersect(None, {"a": 1}) == {"a": 1}
        assert intersect({"a": 1}, None) is None

    def test_map_non_empty(self):
        """Test mapping keeps order."""
        assert map_non_empty([1, 2, 3], lambda x: x * 2) == (2, 4, 6)

    def test_map_non_empty_rejects_empty(self):
        """Test empty input raises."""
        with pytest.raises(ValueError, match="non-empty"):
            map_non_empty([], str)


class TestLoggingSetup:
    """Test logging configuration."""

    def test_setup_logging_level(self):
        """Test the package logger level is set."""
        logger = setup_logging(level="DEBUG")
        assert logger.name == "static_schema"
        assert logger.level == logging.DEBUG

    def test_setup_logging_replaces_handlers(self):
        """Test repeated setup does not stack handlers."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_setup_logging_file(self, tmp_path):
        """Test records are also written to a log file."""
        log_file = tmp_path / "logs" / "static_schema.log"
        logger = setup_logging(level="INFO", log_file=log_file)

        logging.getLogger("static_schema.test").info("hello from test")
        for handler in logger.handlers:
            handler.flush()

        assert "hello from test" in log_file.read_text()
        setup_logging(level="WARNING")
