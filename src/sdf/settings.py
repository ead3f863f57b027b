"""Writer settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

from loguru import logger
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .data_types import MissingTrailer


class Settings(BaseSettings):
    """
    Writer-wide policies.

    Settings can be configured via:

    1. Environment variables (e.g., SDF_Z_DECIMALS=5)
    2. .env file in the working directory
    3. Default values defined below

    All settings use the SDF_ prefix for environment variables.

    .. rubric:: Examples

    Write heights with 5 decimals and omit empty trailers::

        export SDF_Z_DECIMALS=5
        export SDF_MISSING_TRAILER=omit
    """

    force_default_extension: Annotated[
        bool,
        Field(
            default=True,
            description="If True, the extension of the output file is replaced by '.sdf'.",
        ),
    ]

    z_decimals: Annotated[
        int,
        Field(
            default=6,
            ge=5,
            le=6,
            description="Number of decimals of height values written in micrometers.",
        ),
    ]

    missing_trailer: Annotated[
        MissingTrailer,
        Field(
            default=MissingTrailer.DELIMITER_ONLY,
            description="Trailer rendered when no trailer entries are supplied.",
        ),
    ]

    append_writer_info: Annotated[
        bool,
        Field(
            default=False,
            description="If True, the writer name and version are appended to the trailer.",
        ),
    ]

    writer_name: Annotated[
        str, Field(default="sdf-writer", description="Writer name")
    ]

    model_config = SettingsConfigDict(
        env_prefix="SDF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="ignore",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def writer_version(self) -> str:
        """
        Get the writer version (major.minor) from package metadata.

        :return: The version from pyproject.toml, "0.0" if it cannot be determined.
        """
        try:
            major, minor, *_ = version("sdf-writer").split(".")
        except (PackageNotFoundError, ValueError):
            logger.warning("Could not determine package version, using fallback '0.0'")
            return "0.0"
        return f"{major}.{minor}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The writer settings instance.
    """
    return Settings()  # type: ignore
