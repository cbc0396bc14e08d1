# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from arrayds.enums import LoggerType


class AppSettings(BaseSettings):
    """Global app settings."""

    model_config = SettingsConfigDict(
        env_prefix="arrayds_", env_file=".env", extra="ignore"
    )

    logger_type: LoggerType = Field(
        LoggerType.STRUCTLOG,
        description="The type of logger to use.",
    )

    # Logging settings.
    log_level: str = Field("INFO", description="Log level used for logging statements.")

    default_name_prefix: str = Field(
        "DataSet@",
        description="Prefix of the name given to datasets built without an explicit name. "
        "The wall-clock time in milliseconds is appended to it.",
    )
