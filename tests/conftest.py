import logging

import pytest

from statebox.logging_config import HumanFormatter, JSONFormatter


@pytest.fixture
def restore_logging():
    """Undo configure_logging(): drop its handlers, restore level and logger class."""
    root = logging.getLogger()
    level = root.level
    logger_class = logging.getLoggerClass()
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (HumanFormatter, JSONFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.setLoggerClass(logger_class)
