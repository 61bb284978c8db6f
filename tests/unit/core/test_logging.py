"""
GWT Unit Tests for structured logging.
"""

import logging

from indexconsole.core.logging import configure_logging, get_logger


def test_get_logger_given_same_name_when_called_twice_then_same_instance():
    assert get_logger("indexconsole.test.a") is get_logger("indexconsole.test.a")


def test_format_given_fields_when_formatted_then_appended_as_pairs():
    logger = get_logger("indexconsole.test.b")

    message = logger._format_message("Index created", index="RFP-2024", documents=0)

    assert message == "Index created | index=RFP-2024 | documents=0"


def test_configure_given_existing_logger_when_level_changed_then_logger_follows():
    logger = get_logger("indexconsole.test.c")

    configure_logging(level="DEBUG", console=False)
    try:
        assert logger.logger.level == logging.DEBUG
        assert logger.logger.handlers == []
    finally:
        configure_logging()

    assert logger.logger.level == logging.WARNING
