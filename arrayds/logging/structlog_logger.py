# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import logging
from typing import Any

import structlog

from arrayds.logging.base_logger import BaseLogger


class StructlogLogger(BaseLogger):
    """Logger backed by structlog, filtering below the configured level."""

    def __init__(self, name: str, log_level: str, logger: Any = None):
        if logger is None:
            structlog.configure(
                wrapper_class=structlog.make_filtering_bound_logger(
                    logging.getLevelName(log_level)
                )
            )
            logger = structlog.get_logger(name)
        self.name = name
        self.log_level = log_level
        self.logger = logger

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self.logger.exception(message, **kwargs)

    def bind(self, **kwargs: Any) -> "StructlogLogger":
        return StructlogLogger(self.name, self.log_level, logger=self.logger.bind(**kwargs))
