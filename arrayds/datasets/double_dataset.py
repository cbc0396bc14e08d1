# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Plain two dimensional datasets in double and single precision."""

from collections.abc import Sequence

import numpy as np

from arrayds.datasets.dataset import DataSet, check_equal_lengths
from arrayds.enums import DIM_X, DIM_Y, Precision
from arrayds.exceptions import InvalidArgumentError


class TwoSeriesDataSet(DataSet):
    """A dataset of X/Y pairs stored in the precision of the class.

    Example:
        >>> ds = DoubleDataSet("example", x=[0.0, 1.0, 2.0], y=[5.0, 6.0, 7.0])
        >>> ds.data_count
        3
        >>> ds.get(1, 2)
        7.0
    """

    def __init__(
        self,
        name: str,
        x: Sequence[float] | np.ndarray,
        y: Sequence[float] | np.ndarray,
        *,
        copy: bool = True,
    ):
        """Initialize the dataset.

        Args:
            name: Name of the dataset.
            x: Values of the X dimension.
            y: Values of the Y dimension, same length as ``x``.
            copy: If False, arrays that already have the dataset dtype are used without copying.

        Raises:
            InvalidArgumentError: If ``x`` and ``y`` differ in length.
        """
        super().__init__(name, n_dims=2)
        self._values = [self._as_array(x, copy), self._as_array(y, copy)]
        check_equal_lengths(name, x=self._values[DIM_X], y=self._values[DIM_Y])
        self.recompute_limits()

    def _as_array(self, values: Sequence[float] | np.ndarray, copy: bool) -> np.ndarray:
        if copy:
            return np.array(values, dtype=self.precision.dtype)
        return np.asarray(values, dtype=self.precision.dtype)

    def get_values(self, dim: int) -> np.ndarray:
        if dim not in (DIM_X, DIM_Y):
            raise InvalidArgumentError(f"Dataset '{self.name}' has no dimension {dim}")
        return self._values[dim]

    @property
    def x_values(self) -> np.ndarray:
        return self._values[DIM_X]

    @property
    def y_values(self) -> np.ndarray:
        return self._values[DIM_Y]


class DoubleDataSet(TwoSeriesDataSet):
    """Two dimensional dataset in double precision."""

    precision = Precision.DOUBLE


class FloatDataSet(TwoSeriesDataSet):
    """Two dimensional dataset in single precision."""

    precision = Precision.SINGLE
