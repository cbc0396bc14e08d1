# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import math

import numpy as np
import pytest
from pydantic import ValidationError

from arrayds.data_classes.axis_description import AxisDescription


def test_default_axis_is_undefined():
    # Act
    axis = AxisDescription()

    # Assert
    assert axis.name == ""
    assert axis.unit == ""
    assert not axis.is_defined()


def test_recompute_ignores_non_finite_values():
    # Act
    axis = AxisDescription().recompute(np.array([3.0, np.nan, -1.0, np.inf]))

    # Assert
    assert (axis.min, axis.max) == (-1.0, 3.0)


def test_recompute_without_finite_values_clears_range():
    # Arrange
    axis = AxisDescription(min=0.0, max=1.0)

    # Act
    axis.recompute(np.array([np.nan]))

    # Assert
    assert math.isnan(axis.min)
    assert math.isnan(axis.max)


def test_update_keeps_range_where_other_is_undefined():
    # Arrange
    axis = AxisDescription(name="old", min=0.0, max=10.0)
    other = AxisDescription(name="time", unit="s", max=5.0)

    # Act
    axis.update(other)

    # Assert
    assert axis.model_dump() == {"name": "time", "unit": "s", "min": 0.0, "max": 5.0}


def test_assignment_is_validated():
    # Arrange
    axis = AxisDescription()

    # Act & Assert
    with pytest.raises(ValidationError):
        axis.min = "not a number"
