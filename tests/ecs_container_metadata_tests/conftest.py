import logging
from logging import Logger

import pytest


@pytest.fixture(scope="session")
def logger() -> Logger:
    return logging.getLogger()


@pytest.fixture(scope="session")
def metadata_uri() -> str:
    return 'http://169.254.170.2/v4/6c1b8a2e-7a0c-4e73-9d3f-2c1f0e8a1b4d'
