import logging

import pytest


@pytest.fixture(autouse=True)
def _enable_logging():
    # The CLI disables logging globally when run without -v.
    yield
    logging.disable(logging.NOTSET)
