import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("qr_link_generator")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
