import logging
import sys

from qr_link_generator.logging_config import setup_logging


def test_setup_sets_level_and_stderr_handler():
    logger = setup_logging(logging.INFO)
    assert logger.name == "qr_link_generator"
    assert logger.level == logging.INFO
    (handler,) = logger.handlers
    assert handler.stream is sys.stderr


def test_repeated_setup_keeps_one_handler():
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.ERROR)
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR


def test_module_loggers_propagate_to_package(capsys):
    setup_logging(logging.DEBUG)
    logging.getLogger("qr_link_generator.cli").debug("hello from cli")
    err = capsys.readouterr().err
    assert "qr_link_generator.cli - DEBUG - hello from cli" in err
