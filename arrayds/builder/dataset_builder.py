# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Flexible and efficient allocation of new datasets.

Values, errors and metadata are registered per dimension index together with
requirements for the resulting dataset. On ``build`` the number of dimensions
and the size of every dimension are inferred, buffers are converted between
single and double precision where needed and one of the following datasets is
created:

    - n_dims <= 2, use_float=False, errors=False: ``DoubleDataSet``
    - n_dims <= 2, use_float=True, errors=False: ``FloatDataSet``
    - n_dims <= 2, use_float=False, errors=True: ``DoubleErrorDataSet``
    - n_dims >= 3, use_float=False, errors=False: ``MultiDimDoubleDataSet``

All other combinations raise a ``ShapeUnsupportedError``.

Example:
    >>> dataset = (
    ...     DataSetBuilder("example")
    ...     .set_values(DIM_X, [0.0, 1.0, 2.0])
    ...     .set_values(DIM_Y, [5.0, 6.0, 7.0])
    ...     .set_pos_error(DIM_Y, [0.1, 0.1, 0.1])
    ...     .build()
    ... )
    >>> type(dataset).__name__
    'DoubleErrorDataSet'
    >>> dataset.get_error_negative(DIM_Y, 0)
    0.1
"""

import time
import warnings
from collections.abc import Mapping, Sequence
from itertools import chain
from typing import Self

import numpy as np
from pydantic import ValidationError

from arrayds.builder.inference import resolve_dimension, resolve_sizes
from arrayds.builder.materialize import materialize_errors, materialize_values
from arrayds.builder.shape import select_shape_family
from arrayds.data_classes.axis_description import AxisDescription
from arrayds.data_classes.typed_buffer import TypedBuffer
from arrayds.datasets import DataSet, DoubleDataSet, DoubleErrorDataSet, FloatDataSet, MultiDimDoubleDataSet
from arrayds.enums import DIM_X, DIM_Y, ErrorSign, Precision, ShapeFamily
from arrayds.exceptions import InvalidArgumentError
from arrayds.logging import get_logger
from arrayds.settings import Settings

logger = get_logger(__name__)

ArrayLike = Sequence[float] | np.ndarray


def _warn_deprecated(name: str, replacement: str) -> None:
    warnings.warn(f"{name} is deprecated, use {replacement} instead", DeprecationWarning, stacklevel=3)


def _is_nested(values: ArrayLike | Sequence[Sequence[float]]) -> bool:
    if isinstance(values, np.ndarray):
        return values.ndim > 1
    if not isinstance(values, Sequence) or len(values) == 0:
        return False
    first = values[0]
    return isinstance(first, Sequence | np.ndarray) and not isinstance(first, str)


class DataSetBuilder:
    """Collects per-dimension contributions and builds a dataset from them.

    The builder is meant to be configured by a single owner and consumed by one
    call to ``build``. Every setter returns the builder itself for chaining.

    Values and errors given as float32 numpy arrays are registered in single
    precision, any other input in double precision. Registering a buffer for a
    dimension and role replaces the previous one, whatever its precision.

    Attributes:
        name: Name of the dataset to build; synthesized from a timestamp if None.
        values: Registered values by dimension index.
        errors: Registered errors by sign and dimension index.
        initial_capacity: Explicit sizes for the first dimensions, if any.
        dimension: Explicit number of dimensions, None to infer it from the data.
        use_errors: Whether the result must carry errors.
        use_float: Whether the result must be single precision.
    """

    def __init__(self, name: str | None = None):
        """Initialize an empty builder.

        Args:
            name: Name of the dataset to build.
        """
        self.name = name
        self.values: dict[int, TypedBuffer] = {}
        self.errors: dict[ErrorSign, dict[int, TypedBuffer]] = {sign: {} for sign in ErrorSign}
        self.initial_capacity: tuple[int, ...] | None = None
        self.dimension: int | None = None
        self.use_errors = False
        self.use_float = False
        # Metadata
        self.info_list: list[str] = []
        self.warning_list: list[str] = []
        self.error_list: list[str] = []
        self.meta_info_map: dict[str, str] = {}
        # Labels and styles by data point index
        self.data_labels: dict[int, str] = {}
        self.data_styles: dict[int, str] = {}
        self.axis_descriptions: dict[int, AxisDescription] = {}

    @staticmethod
    def _check_dim_index(dim: int) -> None:
        if dim < 0:
            raise InvalidArgumentError(f"Dimension index cannot be negative: {dim}")

    def set_name(self, name: str | None) -> Self:
        self.name = name
        return self

    # Values

    def set_values(self, dim: int, values: ArrayLike | Sequence[Sequence[float]]) -> Self:
        """Register a copy of the values of a dimension.

        Nested (two dimensional) input is flattened, see ``set_values_from_matrix``.

        Args:
            dim: Dimension index the values are for.
            values: The values; float32 numpy arrays are kept in single precision.

        Returns:
            The builder itself.
        """
        if _is_nested(values):
            return self.set_values_from_matrix(dim, values)
        self._check_dim_index(dim)
        self.values[dim] = TypedBuffer.from_values(values, copy=True)
        return self

    def set_values_no_copy(self, dim: int, values: ArrayLike) -> Self:
        """Register the values of a dimension without copying.

        float32 and float64 numpy arrays are stored as-is and end up in the built
        dataset unless they have to be resized or cast. The caller must not modify
        them afterwards.

        Args:
            dim: Dimension index the values are for.
            values: The values.

        Returns:
            The builder itself.
        """
        self._check_dim_index(dim)
        self.values[dim] = TypedBuffer.from_values(values, copy=False)
        return self

    def set_values_from_matrix(self, dim: int, matrix: Sequence[Sequence[float]] | np.ndarray) -> Self:
        """Register values given as a rectangular nested array.

        The rows are concatenated into one linear buffer (row-major), which is the
        layout of the last dimension of a gridded dataset.

        Args:
            dim: Dimension index the values are for.
            matrix: Rectangular nested values, e.g. ``[[1, 2], [3, 4]]``.

        Returns:
            The builder itself.

        Raises:
            InvalidArgumentError: If the matrix or its first row is empty, a row is not
                a sequence, or the rows differ in length.
        """
        self._check_dim_index(dim)
        if isinstance(matrix, np.ndarray) and matrix.ndim != 2:
            raise InvalidArgumentError(f"values must be two dimensional, got {matrix.ndim} dimensions")
        if len(matrix) == 0:
            raise InvalidArgumentError("values must not be empty")
        for i, row in enumerate(matrix):
            if isinstance(row, str) or not isinstance(row, Sequence | np.ndarray):
                raise InvalidArgumentError(f"values row {i} is not a sequence: {row!r}")
        n_columns = len(matrix[0])
        if n_columns == 0:
            raise InvalidArgumentError("values first row must not be empty")
        for i, row in enumerate(matrix):
            if len(row) != n_columns:
                raise InvalidArgumentError(f"values row {i} has length {len(row)}, expected {n_columns}")

        if isinstance(matrix, np.ndarray) and matrix.dtype == np.float32:
            flat = np.array(matrix, dtype=np.float32).reshape(-1)
        else:
            flat = np.array(matrix, dtype=np.float64).reshape(-1)
        return self.set_values_no_copy(dim, flat)

    # Errors

    def _set_error(self, sign: ErrorSign, dim: int, errors: ArrayLike, copy: bool) -> Self:
        self._check_dim_index(dim)
        self.errors[sign][dim] = TypedBuffer.from_values(errors, copy=copy)
        return self.set_enable_errors(True)

    def set_pos_error(self, dim: int, errors: ArrayLike) -> Self:
        """Register a copy of the positive errors of a dimension; enables errors."""
        return self._set_error(ErrorSign.POSITIVE, dim, errors, copy=True)

    def set_pos_error_no_copy(self, dim: int, errors: ArrayLike) -> Self:
        """Register the positive errors of a dimension without copying; enables errors."""
        return self._set_error(ErrorSign.POSITIVE, dim, errors, copy=False)

    def set_neg_error(self, dim: int, errors: ArrayLike) -> Self:
        """Register a copy of the negative errors of a dimension; enables errors."""
        return self._set_error(ErrorSign.NEGATIVE, dim, errors, copy=True)

    def set_neg_error_no_copy(self, dim: int, errors: ArrayLike) -> Self:
        """Register the negative errors of a dimension without copying; enables errors."""
        return self._set_error(ErrorSign.NEGATIVE, dim, errors, copy=False)

    # Size and type of the dataset

    def set_dimension(self, n_dims: int | None) -> Self:
        """Set the number of dimensions of the dataset to build.

        Args:
            n_dims: Number of dimensions, or None to infer it from the registered data.

        Returns:
            The builder itself.

        Raises:
            InvalidArgumentError: If ``n_dims`` is negative.
        """
        if n_dims is not None and n_dims < 0:
            raise InvalidArgumentError(f"Number of dimensions cannot be negative: {n_dims}")
        self.dimension = n_dims
        return self

    def set_initial_capacity(self, *capacities: int) -> Self:
        """Set the size of the dataset per dimension.

        If the dataset has more dimensions than sizes are given, the last size is
        used for the remaining ones, so a single value sizes every dimension.

        Args:
            *capacities: Sizes of the first dimensions.

        Returns:
            The builder itself.

        Raises:
            InvalidArgumentError: If any size is negative.
        """
        for capacity in capacities:
            if capacity < 0:
                raise InvalidArgumentError(f"Capacity cannot be negative: {capacity}")
        self.initial_capacity = tuple(capacities)
        return self

    def set_enable_errors(self, enable_errors: bool) -> Self:
        """Set whether the dataset must carry errors.

        All error setters enable errors implicitly.
        """
        self.use_errors = enable_errors
        return self

    def set_use_float(self, use_float: bool) -> Self:
        self.use_float = use_float
        return self

    # Axis descriptions

    def _get_axis_description(self, dim: int) -> AxisDescription:
        if dim < 0:
            raise InvalidArgumentError(f"Axis dimension cannot be negative: {dim}")
        return self.axis_descriptions.setdefault(dim, AxisDescription())

    def set_axis_name(self, dim: int, name: str) -> Self:
        self._get_axis_description(dim).name = name
        return self

    def set_axis_unit(self, dim: int, unit: str) -> Self:
        self._get_axis_description(dim).unit = unit
        return self

    def _set_axis_limit(self, dim: int, limit: str, value: float) -> Self:
        description = self._get_axis_description(dim)
        try:
            setattr(description, limit, value)
        except ValidationError as e:
            raise InvalidArgumentError(f"Axis {limit} must be a number, got {value!r}") from e
        return self

    def set_axis_min(self, dim: int, value: float) -> Self:
        """Set the lower limit of an axis.

        Raises:
            InvalidArgumentError: If ``dim`` is negative or ``value`` is not a number.
        """
        return self._set_axis_limit(dim, "min", value)

    def set_axis_max(self, dim: int, value: float) -> Self:
        """Set the upper limit of an axis.

        Raises:
            InvalidArgumentError: If ``dim`` is negative or ``value`` is not a number.
        """
        return self._set_axis_limit(dim, "max", value)

    # Metadata, labels and styles

    def set_meta_info_list(self, infos: Sequence[str]) -> Self:
        self.info_list.extend(infos)
        return self

    def set_meta_warning_list(self, warning_messages: Sequence[str]) -> Self:
        self.warning_list.extend(warning_messages)
        return self

    def set_meta_error_list(self, errors: Sequence[str]) -> Self:
        self.error_list.extend(errors)
        return self

    def set_meta_info_map(self, meta_info: Mapping[str, str] | None) -> Self:
        if meta_info:
            self.meta_info_map.update(meta_info)
        return self

    def set_data_label_map(self, labels: Mapping[int, str] | None) -> Self:
        """Add labels by data point index; None or empty mappings are ignored."""
        if labels:
            self.data_labels.update(labels)
        return self

    def set_data_style_map(self, styles: Mapping[int, str] | None) -> Self:
        """Add styles by data point index; None or empty mappings are ignored."""
        if styles:
            self.data_styles.update(styles)
        return self

    # Build

    def build(self) -> DataSet:
        """Build the requested dataset.

        If no name was set, the name is the configured prefix followed by the
        current time in milliseconds. Datasets built within the same millisecond
        therefore get the same generated name.

        Returns:
            The dataset with all registered data, metadata, axis descriptions, labels
            and styles.

        Raises:
            CapacityConflictError: If data was registered for a dimension beyond the
                explicitly requested number of dimensions.
            ShapeUnsupportedError: If no dataset implementation exists for the
                requested combination of dimensions, precision and errors.
        """
        if self.name is None:
            name = f"{Settings.default_name_prefix}{time.time_ns() // 1_000_000}"
            logger.debug("Generated dataset name", dataset_name=name)
        else:
            name = self.name

        dataset = self._build_raw_dataset(name)
        self._add_meta_data(dataset)
        self._add_data_ranges(dataset)
        self._add_data_label_style_map(dataset)
        return dataset

    def _referenced_dimensions(self) -> set[int]:
        return set(
            chain(
                self.values,
                *(errors.keys() for errors in self.errors.values()),
                self.axis_descriptions,
            )
        )

    def _buffer_lengths(self) -> dict[int, list[int]]:
        lengths: dict[int, list[int]] = {}
        for buffers in (self.values, *self.errors.values()):
            for dim, buffer in buffers.items():
                lengths.setdefault(dim, []).append(len(buffer))
        return lengths

    def _build_raw_dataset(self, name: str) -> DataSet:
        n_dims = resolve_dimension(self.dimension, self._referenced_dimensions())
        sizes = resolve_sizes(
            n_dims,
            self.initial_capacity,
            self._buffer_lengths(),
            chain(self.data_labels, self.data_styles),
        )
        use_errors = self.use_errors or any(self.errors.values())
        x_errors = any(DIM_X in errors for errors in self.errors.values())
        shape_family = select_shape_family(n_dims, self.use_float, use_errors, x_errors)
        logger.debug("Building dataset", dataset_name=name, shape_family=shape_family, n_dims=n_dims, sizes=sizes)

        # X/Y datasets always have the same number of points in both dimensions
        data_count = max(sizes, default=0)
        match shape_family:
            case ShapeFamily.DOUBLE:
                return DoubleDataSet(name, *self._two_series_values(data_count, Precision.DOUBLE), copy=False)
            case ShapeFamily.FLOAT:
                return FloatDataSet(name, *self._two_series_values(data_count, Precision.SINGLE), copy=False)
            case ShapeFamily.DOUBLE_ERROR:
                return self._build_error_dataset(name, data_count)
            case ShapeFamily.MULTI_DIM_DOUBLE:
                values = [
                    materialize_values(self.values.get(dim), dim, size, Precision.DOUBLE)
                    for dim, size in enumerate(sizes)
                ]
                return MultiDimDoubleDataSet(name, values, copy=False)

    def _two_series_values(self, data_count: int, precision: Precision) -> tuple[np.ndarray, np.ndarray]:
        x_values = materialize_values(self.values.get(DIM_X), DIM_X, data_count, precision)
        y_values = materialize_values(self.values.get(DIM_Y), DIM_Y, data_count, precision)
        return x_values, y_values

    def _build_error_dataset(self, name: str, data_count: int) -> DoubleErrorDataSet:
        x_values, y_values = self._two_series_values(data_count, Precision.DOUBLE)
        positive = self.errors[ErrorSign.POSITIVE].get(DIM_Y)
        negative = self.errors[ErrorSign.NEGATIVE].get(DIM_Y)
        y_errors_negative = materialize_errors(negative, positive, data_count, Precision.DOUBLE)
        y_errors_positive = materialize_errors(positive, negative, data_count, Precision.DOUBLE)
        return DoubleErrorDataSet(name, x_values, y_values, y_errors_negative, y_errors_positive, copy=False)

    def _add_meta_data(self, dataset: DataSet) -> None:
        dataset.info_list.extend(self.info_list)
        dataset.warning_list.extend(self.warning_list)
        dataset.error_list.extend(self.error_list)
        dataset.meta_info.update(self.meta_info_map)

    def _add_data_ranges(self, dataset: DataSet) -> None:
        for dim, axis_description in self.axis_descriptions.items():
            dataset.get_axis_description(dim).update(axis_description)

    def _add_data_label_style_map(self, dataset: DataSet) -> None:
        for index, label in self.data_labels.items():
            dataset.add_data_label(index, label)
        for index, style in self.data_styles.items():
            dataset.add_data_style(index, style)

    # Deprecated X/Y aliases

    def set_x_values(self, values: ArrayLike) -> Self:
        """Deprecated, use ``set_values(DIM_X, values)`` instead."""
        _warn_deprecated("set_x_values", "set_values(DIM_X, values)")
        return self.set_values(DIM_X, values)

    def set_y_values(self, values: ArrayLike) -> Self:
        """Deprecated, use ``set_values(DIM_Y, values)`` instead."""
        _warn_deprecated("set_y_values", "set_values(DIM_Y, values)")
        return self.set_values(DIM_Y, values)

    def set_x_values_no_copy(self, values: ArrayLike) -> Self:
        """Deprecated, use ``set_values_no_copy(DIM_X, values)`` instead."""
        _warn_deprecated("set_x_values_no_copy", "set_values_no_copy(DIM_X, values)")
        return self.set_values_no_copy(DIM_X, values)

    def set_y_values_no_copy(self, values: ArrayLike) -> Self:
        """Deprecated, use ``set_values_no_copy(DIM_Y, values)`` instead."""
        _warn_deprecated("set_y_values_no_copy", "set_values_no_copy(DIM_Y, values)")
        return self.set_values_no_copy(DIM_Y, values)

    def set_x_pos_error(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_pos_error(DIM_X, errors)`` instead."""
        _warn_deprecated("set_x_pos_error", "set_pos_error(DIM_X, errors)")
        return self.set_pos_error(DIM_X, errors)

    def set_y_pos_error(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_pos_error(DIM_Y, errors)`` instead."""
        _warn_deprecated("set_y_pos_error", "set_pos_error(DIM_Y, errors)")
        return self.set_pos_error(DIM_Y, errors)

    def set_x_pos_error_no_copy(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_pos_error_no_copy(DIM_X, errors)`` instead."""
        _warn_deprecated("set_x_pos_error_no_copy", "set_pos_error_no_copy(DIM_X, errors)")
        return self.set_pos_error_no_copy(DIM_X, errors)

    def set_y_pos_error_no_copy(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_pos_error_no_copy(DIM_Y, errors)`` instead."""
        _warn_deprecated("set_y_pos_error_no_copy", "set_pos_error_no_copy(DIM_Y, errors)")
        return self.set_pos_error_no_copy(DIM_Y, errors)

    def set_x_neg_error(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_neg_error(DIM_X, errors)`` instead."""
        _warn_deprecated("set_x_neg_error", "set_neg_error(DIM_X, errors)")
        return self.set_neg_error(DIM_X, errors)

    def set_y_neg_error(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_neg_error(DIM_Y, errors)`` instead."""
        _warn_deprecated("set_y_neg_error", "set_neg_error(DIM_Y, errors)")
        return self.set_neg_error(DIM_Y, errors)

    def set_x_neg_error_no_copy(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_neg_error_no_copy(DIM_X, errors)`` instead."""
        _warn_deprecated("set_x_neg_error_no_copy", "set_neg_error_no_copy(DIM_X, errors)")
        return self.set_neg_error_no_copy(DIM_X, errors)

    def set_y_neg_error_no_copy(self, errors: ArrayLike) -> Self:
        """Deprecated, use ``set_neg_error_no_copy(DIM_Y, errors)`` instead."""
        _warn_deprecated("set_y_neg_error_no_copy", "set_neg_error_no_copy(DIM_Y, errors)")
        return self.set_neg_error_no_copy(DIM_Y, errors)
