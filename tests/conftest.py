import os
from logging import Logger, getLogger

import pytest

from subnet_options.config import get_settings
from subnet_options.models.subnets import SubnetCreationRequest
from tests.schemas.utils import subnet_request_dict
from tests.utils import random_lower_string


@pytest.fixture(autouse=True)
def clear_os_environment() -> None:
    """Clear the OS environment and the cached settings."""
    os.environ.clear()
    get_settings.cache_clear()


@pytest.fixture
def logger() -> Logger:
    """Fixture with a logger without dedicated handlers."""
    return getLogger(random_lower_string())


@pytest.fixture
def subnet_request() -> SubnetCreationRequest:
    """Fixture with a SubnetCreationRequest in a specific data center."""
    d = subnet_request_dict()
    return SubnetCreationRequest.create_in_data_center(
        d["parent_network_id"],
        random_lower_string(),
        d["cidr"],
        d["name"],
        d["description"],
    )
