# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import logging
from typing import Any

from arrayds.logging.base_logger import BaseLogger


class StandardLogger(BaseLogger):
    """Logger backed by the standard library; bound context is passed as extra."""

    def __init__(self, name: str, log_level: str, context: dict[str, Any] | None = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)
        self.log_level = log_level
        self.context = dict(context or {})

    def _extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        return {**self.context, **kwargs}

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, extra=self._extra(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, extra=self._extra(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, extra=self._extra(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(message, extra=self._extra(kwargs))

    def exception(self, message: str, **kwargs: Any) -> None:
        self.logger.exception(message, extra=self._extra(kwargs))

    def bind(self, **kwargs: Any) -> "StandardLogger":
        return StandardLogger(self.logger.name, self.log_level, self._extra(kwargs))
