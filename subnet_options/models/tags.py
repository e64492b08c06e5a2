"""Pydantic model of a key/value pair attached to a cloud resource."""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from subnet_options.utils import invalid_empty


class Tag(BaseModel):
    """Model with a single metadata entry.

    Attributes:
    ----------
        key (str): Metadata key.
        value (Any): Metadata value.
    """

    key: Annotated[
        str, Field(description="Metadata key."), AfterValidator(invalid_empty)
    ]
    value: Annotated[Any, Field(default=None, description="Metadata value.")]

    model_config = ConfigDict(frozen=True)
