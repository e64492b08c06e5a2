import string
from ipaddress import IPv4Network
from random import choices, randint


def random_lower_string() -> str:
    """Return a generic random string."""
    return "".join(choices(string.ascii_lowercase, k=32))


def random_cidr() -> str:
    """Return a random private IPv4 CIDR."""
    prefix = randint(16, 30)
    address = (10 << 24) + randint(0, 2**24 - 1)
    return str(IPv4Network((address, prefix), strict=False))
