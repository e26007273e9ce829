import logging

import pytest

from org_showcase.logging_config import HANDLER_PREFIX


@pytest.fixture(autouse=True)
def _reset_site_logging():
    """Drop handlers installed by setup_logging so tests don't leak them."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()
