# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Dataset shapes produced by the dataset builder.

    - DoubleDataSet: X/Y series in double precision
    - FloatDataSet: X/Y series in single precision
    - DoubleErrorDataSet: X/Y series with asymmetric Y errors
    - MultiDimDoubleDataSet: any number of independently sized dimensions
"""

from arrayds.datasets.dataset import DataSet
from arrayds.datasets.double_dataset import DoubleDataSet, FloatDataSet, TwoSeriesDataSet
from arrayds.datasets.error_dataset import DoubleErrorDataSet
from arrayds.datasets.multi_dim_dataset import MultiDimDoubleDataSet

__all__ = [
    "DataSet",
    "DoubleDataSet",
    "DoubleErrorDataSet",
    "FloatDataSet",
    "MultiDimDoubleDataSet",
    "TwoSeriesDataSet",
]
