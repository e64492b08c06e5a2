"""Application settings."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from subnet_options.utils import invalid_empty


class Settings(BaseSettings):
    """Settings for the application."""

    APP_NAME: Annotated[
        str, Field(default="Subnet Options", description="Application name.")
    ]
    SUBNETS_CONF_DIR: Annotated[
        Path,
        Field(
            default=Path("subnets-conf"),
            description="Path to the directory containing the yaml files describing "
            "the subnets to create.",
        ),
    ]
    DEFAULT_METADATA: Annotated[
        dict[Annotated[str, AfterValidator(invalid_empty)], str],
        Field(
            default_factory=dict,
            description="Metadata added to each subnet creation request. "
            "Keys defined by the request's tags take precedence.",
        ),
    ]
    DEFAULT_DATA_CENTER: Annotated[
        str | None,
        Field(
            default=None,
            description="Data center used by the subnets not specifying one. "
            "When not set the provider chooses the placement.",
        ),
        AfterValidator(invalid_empty),
    ]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Retrieve cached settings.

    Returns:
        Settings: Cached settings value.

    """
    return Settings()
