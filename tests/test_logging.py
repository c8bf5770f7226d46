"""
Tests for the logging helper.
"""

import logging

from apps.api.core.logging import get_logger


def test_logger_does_not_propagate_to_root():
    logger = get_logger("biztime.tests.propagation")

    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_repeated_calls_do_not_add_handlers():
    first = get_logger("biztime.tests.handlers")
    second = get_logger("biztime.tests.handlers", level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
