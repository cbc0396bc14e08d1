# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Numeric buffers tagged with their precision.

A registered contribution is either a double or a single precision array. The
tag travels with the data so the builder can decide whether a buffer can be
used as-is or has to be cast to the requested output precision.
"""
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

import numpy as np

from arrayds.enums import Precision
from arrayds.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class TypedBuffer:
    """A one dimensional array together with its numeric precision.

    Attributes:
        precision: Whether the data is stored in single or double precision.
        data: The one dimensional array, with a dtype matching ``precision``.
    """

    precision: Precision
    data: np.ndarray

    def __post_init__(self):
        if self.data.dtype != self.precision.dtype:
            raise InvalidArgumentError(
                f"Buffer dtype {self.data.dtype} does not match precision '{self.precision}'"
            )
        if self.data.ndim != 1:
            raise InvalidArgumentError(f"Buffer must be one dimensional, got {self.data.ndim} dimensions")

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def from_values(cls, values: Sequence[float] | np.ndarray, copy: bool = True) -> Self:
        """Wrap array-like input in a typed buffer.

        Arrays with dtype float32 are registered as single precision, all other
        input is converted to double precision.

        Args:
            values: Array-like numeric input.
            copy: If False, float32 and float64 arrays are stored without copying.
                Other input always results in a new array.

        Returns:
            The tagged buffer.
        """
        if isinstance(values, np.ndarray) and values.dtype == np.float32:
            precision = Precision.SINGLE
        else:
            precision = Precision.DOUBLE

        if copy:
            data = np.array(values, dtype=precision.dtype)
        else:
            data = np.asarray(values, dtype=precision.dtype)
        return cls(precision=precision, data=data)

    def as_precision(self, precision: Precision, size: int) -> np.ndarray:
        """Return exactly ``size`` elements in the given precision.

        The tail is zero padded if the buffer is shorter and truncated if it is
        longer. When precision and length already match, the underlying array is
        returned without copying.

        Args:
            precision: Output precision.
            size: Number of elements of the result.

        Returns:
            Array of length ``size`` with the dtype of ``precision``.
        """
        if precision == self.precision and len(self.data) == size:
            return self.data

        result = np.zeros(size, dtype=precision.dtype)
        n_copy = min(size, len(self.data))
        result[:n_copy] = self.data[:n_copy]
        return result
