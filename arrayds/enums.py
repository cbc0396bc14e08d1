# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Enumerations shared by the dataset builder and the datasets it produces."""
from enum import StrEnum

import numpy as np

# Conventional dimension indices of 2D and 3D datasets.
DIM_X = 0
DIM_Y = 1
DIM_Z = 2


class Precision(StrEnum):
    """Numeric representation of a buffer."""

    DOUBLE = "double"
    SINGLE = "single"

    @property
    def dtype(self) -> np.dtype:
        """The numpy dtype backing this precision."""
        if self is Precision.SINGLE:
            return np.dtype(np.float32)
        return np.dtype(np.float64)


class ErrorSign(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class ShapeFamily(StrEnum):
    """Concrete dataset shapes the builder can produce."""

    DOUBLE = "double"
    FLOAT = "float"
    DOUBLE_ERROR = "double_error"
    MULTI_DIM_DOUBLE = "multi_dim_double"


class LoggerType(StrEnum):
    STANDARD = "logging"
    STRUCTLOG = "structlog"
