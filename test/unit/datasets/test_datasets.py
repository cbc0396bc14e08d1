# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import numpy as np
import pandas as pd
import pytest

from arrayds.datasets import DoubleDataSet, DoubleErrorDataSet, FloatDataSet, MultiDimDoubleDataSet
from arrayds.enums import DIM_X, DIM_Y, DIM_Z
from arrayds.exceptions import InvalidArgumentError


@pytest.fixture
def error_dataset() -> DoubleErrorDataSet:
    return DoubleErrorDataSet(
        "errors",
        x=[0.0, 1.0, 2.0],
        y=[2.0, 4.0, 8.0],
        y_errors_negative=[0.1, 0.2, 0.3],
        y_errors_positive=[0.4, 0.5, 0.6],
    )


def test_double_dataset_computes_axis_ranges():
    # Act
    dataset = DoubleDataSet("ds", x=[3.0, 1.0, 2.0], y=[-1.0, 0.0, 1.0])

    # Assert
    assert (dataset.get_axis_description(DIM_X).min, dataset.get_axis_description(DIM_X).max) == (1.0, 3.0)
    assert (dataset.get_axis_description(DIM_Y).min, dataset.get_axis_description(DIM_Y).max) == (-1.0, 1.0)


def test_float_dataset_stores_single_precision():
    # Act
    dataset = FloatDataSet("ds", x=[0.0, 1.0], y=[0.5, 0.25])

    # Assert
    assert dataset.get_values(DIM_X).dtype == np.float32
    assert dataset.get_errors_negative(DIM_Y).dtype == np.float32
    assert dataset.get(DIM_Y, 1) == 0.25


def test_two_series_dataset_rejects_unequal_lengths():
    with pytest.raises(InvalidArgumentError):
        DoubleDataSet("ds", x=[0.0, 1.0], y=[1.0])


def test_error_dataset_rejects_unequal_error_length():
    with pytest.raises(InvalidArgumentError):
        DoubleErrorDataSet("ds", x=[0.0], y=[1.0], y_errors_negative=[0.1, 0.2], y_errors_positive=[0.1])


def test_two_series_dataset_has_no_third_dimension():
    # Arrange
    dataset = DoubleDataSet("ds", x=[0.0], y=[1.0])

    # Act & Assert
    with pytest.raises(InvalidArgumentError):
        dataset.get_values(DIM_Z)
    with pytest.raises(InvalidArgumentError):
        dataset.get_axis_description(DIM_Z)


def test_error_dataset_errors(error_dataset: DoubleErrorDataSet):
    assert error_dataset.has_errors
    assert error_dataset.get_error_negative(DIM_Y, 2) == 0.3
    assert error_dataset.get_error_positive(DIM_Y, 0) == 0.4
    assert error_dataset.get_error_positive(DIM_X, 0) == 0.0


def test_error_dataset_to_pandas(error_dataset: DoubleErrorDataSet):
    # Arrange
    error_dataset.get_axis_description(DIM_Y).name = "load"
    error_dataset.info_list.append("measured")
    error_dataset.add_data_label(1, "peak")

    # Act
    df = error_dataset.to_pandas()

    # Assert
    expected = pd.DataFrame({
        "dim_0": [0.0, 1.0, 2.0],
        "load": [2.0, 4.0, 8.0],
        "load_error_negative": [0.1, 0.2, 0.3],
        "load_error_positive": [0.4, 0.5, 0.6],
    })
    pd.testing.assert_frame_equal(df, expected)
    assert df.attrs["name"] == "errors"
    assert df.attrs["info_list"] == ["measured"]
    assert df.attrs["data_labels"] == {1: "peak"}


def test_no_copy_dataset_shares_input():
    # Arrange
    x = np.array([0.0, 1.0])

    # Act
    dataset = DoubleDataSet("ds", x=x, y=np.array([1.0, 2.0]), copy=False)

    # Assert
    assert dataset.x_values is x


def test_multi_dim_dataset_to_pandas_pads_short_dimensions():
    # Arrange
    dataset = MultiDimDoubleDataSet("grid", [[0.0, 1.0], [5.0], [1.0, 2.0]])

    # Act
    df = dataset.to_pandas()

    # Assert
    assert list(df.columns) == ["dim_0", "dim_1", "dim_2"]
    assert len(df) == 2
    assert np.isnan(df["dim_1"].iloc[1])


def test_multi_dim_dataset_grid_mismatch_raises():
    # Arrange
    dataset = MultiDimDoubleDataSet("grid", [[0.0, 1.0], [0.0, 1.0], [1.0, 2.0, 3.0]])

    # Act & Assert
    with pytest.raises(InvalidArgumentError):
        dataset.values_as_grid()


def test_multi_dim_dataset_data_count_is_last_dimension():
    # Act
    dataset = MultiDimDoubleDataSet("grid", [[0.0, 1.0], [0.0, 1.0, 2.0], np.arange(6.0)])

    # Assert
    assert dataset.dimension == 3
    assert dataset.data_count == 6
    assert dataset.get_data_count(DIM_Y) == 3
    assert dataset.values_as_grid()[1, 0] == 2.0
