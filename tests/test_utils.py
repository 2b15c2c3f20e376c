import io
import logging

from bikecalc.utils import setup_logger


def test_setup_logger_once():
    logger = setup_logger("bikecalc.test_utils")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO

    logger = setup_logger("bikecalc.test_utils", level=logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_setup_logger_stream():
    first, second = io.StringIO(), io.StringIO()
    logger = setup_logger("bikecalc.test_stream", stream=first)
    logger.info("one")

    logger = setup_logger("bikecalc.test_stream", stream=second)
    assert len(logger.handlers) == 1
    logger.info("two")

    assert first.getvalue().endswith("INFO - one\n")
    assert second.getvalue().endswith("INFO - two\n")
    assert "two" not in first.getvalue()
