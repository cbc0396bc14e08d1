# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import numpy as np
import pytest

from arrayds.data_classes.typed_buffer import TypedBuffer
from arrayds.enums import Precision
from arrayds.exceptions import InvalidArgumentError


@pytest.mark.parametrize(
    ("values", "expected_precision"),
    [
        pytest.param([1, 2, 3], Precision.DOUBLE, id="list"),
        pytest.param(np.array([1.0, 2.0]), Precision.DOUBLE, id="float64"),
        pytest.param(np.array([1, 2]), Precision.DOUBLE, id="int_array"),
        pytest.param(np.array([1.0, 2.0], dtype=np.float32), Precision.SINGLE, id="float32"),
    ],
)
def test_from_values_detects_precision(values, expected_precision: Precision):
    # Act
    buffer = TypedBuffer.from_values(values)

    # Assert
    assert buffer.precision == expected_precision
    assert buffer.data.dtype == expected_precision.dtype


def test_from_values_copy():
    # Arrange
    values = np.array([1.0, 2.0])

    # Act
    copied = TypedBuffer.from_values(values, copy=True)
    shared = TypedBuffer.from_values(values, copy=False)

    # Assert
    assert not np.shares_memory(copied.data, values)
    assert shared.data is values


def test_mismatching_dtype_raises():
    with pytest.raises(InvalidArgumentError):
        TypedBuffer(precision=Precision.SINGLE, data=np.zeros(2))


def test_scalar_input_raises():
    with pytest.raises(InvalidArgumentError):
        TypedBuffer.from_values(1.0)


def test_as_precision_returns_new_array_when_resized():
    # Arrange
    buffer = TypedBuffer.from_values([1.0, 2.0])

    # Act
    resized = buffer.as_precision(Precision.DOUBLE, 3)
    resized[0] = 10.0

    # Assert
    np.testing.assert_array_equal(buffer.data, [1.0, 2.0])
    assert len(buffer) == 2
