# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Abstract dataset capability set.

Every dataset shape produced by the builder shares the same interface: per
dimension value and error access, axis descriptions, a metadata bag and per
data point labels and styles. Concrete shapes only decide how their numeric
buffers are stored.
"""

from abc import ABC, abstractmethod

import numpy as np
import pandas as pd

from arrayds.data_classes.axis_description import AxisDescription
from arrayds.enums import Precision
from arrayds.exceptions import InvalidArgumentError


class DataSet(ABC):
    """Base class of all dataset shapes.

    Subclasses store their numeric buffers and implement ``get_values``; all
    other capabilities are provided here.

    Attributes:
        name: Name of the dataset.
        info_list: Informational messages attached to the data.
        warning_list: Warnings attached to the data.
        error_list: Errors attached to the data.
        meta_info: Free-form key/value metadata.
        data_labels: Labels by data point index.
        data_styles: Style strings by data point index.
    """

    precision: Precision = Precision.DOUBLE

    def __init__(self, name: str, n_dims: int):
        self.name = name
        self.info_list: list[str] = []
        self.warning_list: list[str] = []
        self.error_list: list[str] = []
        self.meta_info: dict[str, str] = {}
        self.data_labels: dict[int, str] = {}
        self.data_styles: dict[int, str] = {}
        self._axis_descriptions = [AxisDescription() for _ in range(n_dims)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, dimension={self.dimension}, data_count={self.data_count})"

    @property
    def dimension(self) -> int:
        """Number of dimensions of the dataset."""
        return len(self._axis_descriptions)

    @property
    def data_count(self) -> int:
        """Number of data points, i.e. the length of the last dimension."""
        if self.dimension == 0:
            return 0
        return self.get_data_count(self.dimension - 1)

    def get_data_count(self, dim: int) -> int:
        return len(self.get_values(dim))

    @abstractmethod
    def get_values(self, dim: int) -> np.ndarray:
        """Return the values of a dimension.

        Args:
            dim: Dimension index.

        Returns:
            The stored array of the dimension (not a copy).
        """
        raise NotImplementedError

    def get(self, dim: int, index: int) -> float:
        return float(self.get_values(dim)[index])

    @property
    def has_errors(self) -> bool:
        return False

    def get_errors_negative(self, dim: int) -> np.ndarray:
        """Negative errors of a dimension; zeros for datasets without errors."""
        return np.zeros(self.get_data_count(dim), dtype=self.precision.dtype)

    def get_errors_positive(self, dim: int) -> np.ndarray:
        """Positive errors of a dimension; zeros for datasets without errors."""
        return np.zeros(self.get_data_count(dim), dtype=self.precision.dtype)

    def get_error_negative(self, dim: int, index: int) -> float:
        return float(self.get_errors_negative(dim)[index])

    def get_error_positive(self, dim: int, index: int) -> float:
        return float(self.get_errors_positive(dim)[index])

    @property
    def axis_descriptions(self) -> list[AxisDescription]:
        return self._axis_descriptions

    def get_axis_description(self, dim: int) -> AxisDescription:
        """Return the description of a dimension.

        Raises:
            InvalidArgumentError: If the dimension does not exist.
        """
        if not 0 <= dim < self.dimension:
            raise InvalidArgumentError(f"Dataset '{self.name}' has no dimension {dim}")
        return self._axis_descriptions[dim]

    def recompute_limits(self, dim: int | None = None) -> None:
        """Recompute axis ranges from the data.

        Args:
            dim: Dimension to recompute; all dimensions if None.
        """
        dims = range(self.dimension) if dim is None else [dim]
        for d in dims:
            self.get_axis_description(d).recompute(self.get_values(d))

    def add_data_label(self, index: int, label: str) -> None:
        self.data_labels[index] = label

    def get_data_label(self, index: int) -> str | None:
        return self.data_labels.get(index)

    def add_data_style(self, index: int, style: str) -> None:
        self.data_styles[index] = style

    def get_style(self, index: int) -> str | None:
        return self.data_styles.get(index)

    def _column_names(self) -> list[str]:
        return [axis.name or f"dim_{dim}" for dim, axis in enumerate(self._axis_descriptions)]

    def to_pandas(self) -> pd.DataFrame:
        """Convert the dataset to a pandas DataFrame with metadata stored in attrs.

        Each dimension becomes a column named after its axis (or ``dim_<index>``
        for unnamed axes). All dimensions must have the same length; shapes where
        they differ override this method.

        Returns:
            DataFrame with one column per dimension and the dataset name, metadata,
            labels and styles in attrs.
        """
        df = pd.DataFrame(
            {column: self.get_values(dim) for dim, column in enumerate(self._column_names())}
        )
        self._add_attrs(df)
        return df

    def _add_attrs(self, df: pd.DataFrame) -> None:
        df.attrs["name"] = self.name
        df.attrs["info_list"] = list(self.info_list)
        df.attrs["warning_list"] = list(self.warning_list)
        df.attrs["error_list"] = list(self.error_list)
        df.attrs["meta_info"] = dict(self.meta_info)
        df.attrs["data_labels"] = dict(self.data_labels)
        df.attrs["data_styles"] = dict(self.data_styles)


def check_equal_lengths(name: str, **arrays: np.ndarray) -> int:
    """Check that all given arrays have the same length.

    Returns:
        The common length.

    Raises:
        InvalidArgumentError: If the lengths differ.
    """
    lengths = {key: len(value) for key, value in arrays.items()}
    if len(set(lengths.values())) > 1:
        raise InvalidArgumentError(f"Arrays of dataset '{name}' differ in length: {lengths}")
    return next(iter(lengths.values()), 0)
