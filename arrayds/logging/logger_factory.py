# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from arrayds.enums import LoggerType
from arrayds.logging.base_logger import BaseLogger
from arrayds.logging.standard_logger import StandardLogger
from arrayds.logging.structlog_logger import StructlogLogger
from arrayds.settings import Settings


def get_logger(name: str, logger_type: LoggerType | str | None = None) -> BaseLogger:
    """Create a logger of the configured type.

    Args:
        name: Name of the logger, usually the module __name__.
        logger_type: Overrides Settings.logger_type when given.

    Returns:
        A logger implementing the common BaseLogger interface.

    Raises:
        ValueError: If the logger type is unknown.
    """
    if logger_type is None:
        logger_type = Settings.logger_type

    if logger_type == LoggerType.STANDARD:
        return StandardLogger(name, Settings.log_level)
    elif logger_type == LoggerType.STRUCTLOG:
        return StructlogLogger(name, Settings.log_level)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}")
