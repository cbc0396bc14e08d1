# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import numpy as np
import pytest

from arrayds.builder.materialize import materialize_errors, materialize_values
from arrayds.data_classes.typed_buffer import TypedBuffer
from arrayds.enums import DIM_X, DIM_Y, Precision


@pytest.fixture
def double_buffer() -> TypedBuffer:
    return TypedBuffer.from_values([1.0, 2.0, 3.0])


@pytest.fixture
def single_buffer() -> TypedBuffer:
    return TypedBuffer.from_values(np.array([0.5, 1.5], dtype=np.float32))


@pytest.mark.parametrize(
    ("dim", "expected"),
    [
        pytest.param(DIM_X, [0.0, 1.0, 2.0, 3.0], id="x_index_sequence"),
        pytest.param(DIM_Y, [0.0, 0.0, 0.0, 0.0], id="other_zeros"),
        pytest.param(4, [0.0, 0.0, 0.0, 0.0], id="higher_zeros"),
    ],
)
@pytest.mark.parametrize("precision", list(Precision))
def test_materialize_values_defaults(dim: int, expected: list[float], precision: Precision):
    # Act
    result = materialize_values(None, dim, 4, precision)

    # Assert
    assert result.dtype == precision.dtype
    np.testing.assert_array_equal(result, expected)


def test_materialize_values_same_precision_same_size_is_not_copied(double_buffer: TypedBuffer):
    assert materialize_values(double_buffer, DIM_Y, 3, Precision.DOUBLE) is double_buffer.data


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        pytest.param(5, [1.0, 2.0, 3.0, 0.0, 0.0], id="padded"),
        pytest.param(2, [1.0, 2.0], id="truncated"),
        pytest.param(0, [], id="empty"),
    ],
)
def test_materialize_values_resizes(double_buffer: TypedBuffer, size: int, expected: list[float]):
    np.testing.assert_array_equal(materialize_values(double_buffer, DIM_X, size, Precision.DOUBLE), expected)


def test_materialize_values_casts_and_guards_short_source(single_buffer: TypedBuffer):
    # Act
    result = materialize_values(single_buffer, DIM_X, 4, Precision.DOUBLE)

    # Assert - explicit data replaces the index sequence, missing elements are zero
    assert result.dtype == np.float64
    np.testing.assert_array_equal(result, [0.5, 1.5, 0.0, 0.0])


def test_materialize_values_narrows_to_single(double_buffer: TypedBuffer):
    # Act
    result = materialize_values(double_buffer, DIM_Y, 2, Precision.SINGLE)

    # Assert
    assert result.dtype == np.float32
    np.testing.assert_array_equal(result, np.array([1.0, 2.0], dtype=np.float32))


def test_materialize_errors_prefers_own_sign(double_buffer: TypedBuffer, single_buffer: TypedBuffer):
    result = materialize_errors(single_buffer, double_buffer, 2, Precision.DOUBLE)

    np.testing.assert_array_equal(result, [0.5, 1.5])


def test_materialize_errors_falls_back_to_opposite_sign(single_buffer: TypedBuffer):
    result = materialize_errors(None, single_buffer, 3, Precision.DOUBLE)

    np.testing.assert_array_equal(result, [0.5, 1.5, 0.0])


def test_materialize_errors_defaults_to_zeros():
    result = materialize_errors(None, None, 3, Precision.DOUBLE)

    np.testing.assert_array_equal(result, np.zeros(3))


def test_materialize_errors_stand_in_is_a_copy(double_buffer: TypedBuffer):
    result = materialize_errors(None, double_buffer, len(double_buffer.data), Precision.DOUBLE)

    assert not np.shares_memory(result, double_buffer.data)
