"""Application utilities."""


def invalid_empty(v: str | None) -> str | None:
    """An empty string is not a valid input.

    Args:
        v (str | None): input string.

    Returns:
        str | None: the input string

    """
    if v == "":
        raise ValueError("Empty string is not a valid value")
    return v
