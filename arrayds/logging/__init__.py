# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Logger factory selecting structlog or the standard library from the app settings."""
from arrayds.logging.base_logger import BaseLogger
from arrayds.logging.logger_factory import get_logger

__all__ = ["BaseLogger", "get_logger"]
