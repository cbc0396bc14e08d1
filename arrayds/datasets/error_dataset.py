# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Two dimensional double precision dataset with asymmetric Y errors."""

from collections.abc import Sequence
from typing_extensions import override

import numpy as np
import pandas as pd

from arrayds.datasets.dataset import check_equal_lengths
from arrayds.datasets.double_dataset import DoubleDataSet
from arrayds.enums import DIM_Y


class DoubleErrorDataSet(DoubleDataSet):
    """X/Y dataset where every Y value carries a negative and a positive error.

    Errors are only stored for the Y dimension; X errors are always zero.
    """

    def __init__(
        self,
        name: str,
        x: Sequence[float] | np.ndarray,
        y: Sequence[float] | np.ndarray,
        y_errors_negative: Sequence[float] | np.ndarray,
        y_errors_positive: Sequence[float] | np.ndarray,
        *,
        copy: bool = True,
    ):
        """Initialize the dataset.

        Args:
            name: Name of the dataset.
            x: Values of the X dimension.
            y: Values of the Y dimension.
            y_errors_negative: Negative errors of the Y values.
            y_errors_positive: Positive errors of the Y values.
            copy: If False, arrays that already have dtype float64 are used without copying.

        Raises:
            InvalidArgumentError: If the arrays differ in length.
        """
        super().__init__(name, x, y, copy=copy)
        self._y_errors_negative = self._as_array(y_errors_negative, copy)
        self._y_errors_positive = self._as_array(y_errors_positive, copy)
        check_equal_lengths(
            name,
            y=self.y_values,
            y_errors_negative=self._y_errors_negative,
            y_errors_positive=self._y_errors_positive,
        )

    @property
    @override
    def has_errors(self) -> bool:
        return True

    @override
    def get_errors_negative(self, dim: int) -> np.ndarray:
        if dim == DIM_Y:
            return self._y_errors_negative
        return super().get_errors_negative(dim)

    @override
    def get_errors_positive(self, dim: int) -> np.ndarray:
        if dim == DIM_Y:
            return self._y_errors_positive
        return super().get_errors_positive(dim)

    @override
    def to_pandas(self) -> pd.DataFrame:
        df = super().to_pandas()
        y_column = self._column_names()[DIM_Y]
        df[f"{y_column}_error_negative"] = self._y_errors_negative
        df[f"{y_column}_error_positive"] = self._y_errors_positive
        return df
