# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""N-dimensional double precision dataset.

Each dimension owns an independent value array. For gridded data the leading
dimensions hold the grid axes and the last dimension holds the values on the
grid, flattened row-major, so its length is the product of the axis lengths.
"""

from collections.abc import Sequence
from typing_extensions import override

import numpy as np
import pandas as pd

from arrayds.datasets.dataset import DataSet
from arrayds.enums import Precision
from arrayds.exceptions import InvalidArgumentError


class MultiDimDoubleDataSet(DataSet):
    """Dataset with an arbitrary number of independently sized dimensions.

    Example:
        >>> ds = MultiDimDoubleDataSet("grid", [[0.0, 1.0], [0.0, 1.0, 2.0], [0.0] * 6])
        >>> ds.shape
        (2, 3, 6)
        >>> ds.values_as_grid().shape
        (3, 2)
    """

    precision = Precision.DOUBLE

    def __init__(self, name: str, values: Sequence[Sequence[float] | np.ndarray], *, copy: bool = True):
        """Initialize the dataset.

        Args:
            name: Name of the dataset.
            values: One array per dimension.
            copy: If False, float64 arrays are used without copying.
        """
        super().__init__(name, n_dims=len(values))
        if copy:
            self._values = [np.array(dim_values, dtype=np.float64) for dim_values in values]
        else:
            self._values = [np.asarray(dim_values, dtype=np.float64) for dim_values in values]
        self.recompute_limits()

    def get_values(self, dim: int) -> np.ndarray:
        if not 0 <= dim < self.dimension:
            raise InvalidArgumentError(f"Dataset '{self.name}' has no dimension {dim}")
        return self._values[dim]

    @property
    def shape(self) -> tuple[int, ...]:
        """Length of every dimension."""
        return tuple(len(dim_values) for dim_values in self._values)

    def values_as_grid(self) -> np.ndarray:
        """Reshape the last dimension onto the grid spanned by the leading dimensions.

        The first dimension varies fastest, so for three dimensions the result has
        shape ``(len(dim 1), len(dim 0))`` and element ``[j, i]`` belongs to
        ``(x[i], y[j])``.

        Returns:
            A view of the last dimension with one axis per leading dimension.

        Raises:
            InvalidArgumentError: If the dataset has less than two dimensions or the
                last dimension does not match the grid size.
        """
        if self.dimension < 2:
            raise InvalidArgumentError(f"Dataset '{self.name}' needs at least two dimensions to form a grid")
        grid_shape = tuple(reversed(self.shape[:-1]))
        if int(np.prod(grid_shape)) != self.data_count:
            raise InvalidArgumentError(
                f"Last dimension of dataset '{self.name}' has {self.data_count} values, "
                f"which does not fit a grid of shape {grid_shape}"
            )
        return self._values[-1].reshape(grid_shape)

    @override
    def to_pandas(self) -> pd.DataFrame:
        """Convert the dataset to a pandas DataFrame.

        Dimensions of unequal length are padded with NaN to the longest one.

        Returns:
            DataFrame with one column per dimension and metadata in attrs.
        """
        df = pd.DataFrame(
            {
                column: pd.Series(self._values[dim])
                for dim, column in enumerate(self._column_names())
            }
        )
        self._add_attrs(df)
        return df
