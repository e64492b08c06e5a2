from typing import Any

from tests.utils import random_cidr, random_lower_string


def tag_dict() -> dict[str, Any]:
    """Dict with Tag minimal attributes."""
    return {"key": random_lower_string(), "value": random_lower_string()}


def subnet_request_dict() -> dict[str, Any]:
    """Dict with SubnetCreationRequest minimal attributes."""
    return {
        "parent_network_id": random_lower_string(),
        "cidr": random_cidr(),
        "name": random_lower_string(),
        "description": random_lower_string(),
    }


def yaml_subnet_dict() -> dict[str, Any]:
    """Dict with YamlSubnet minimal attributes."""
    return subnet_request_dict()
