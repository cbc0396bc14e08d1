# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Selection of the dataset shape family.

=========  =========  =======  ==========================
n_dims     use_float  errors   shape family
=========  =========  =======  ==========================
0, 1, 2    no         no       ShapeFamily.DOUBLE
0, 1, 2    yes        no       ShapeFamily.FLOAT
0, 1, 2    no         yes      ShapeFamily.DOUBLE_ERROR
>= 3       no         no       ShapeFamily.MULTI_DIM_DOUBLE
=========  =========  =======  ==========================

Every other combination is rejected with a ``ShapeUnsupportedError``.
"""

from arrayds.enums import ShapeFamily
from arrayds.exceptions import ShapeUnsupportedError

MAX_TWO_SERIES_DIMS = 2


def select_shape_family(n_dims: int, use_float: bool, use_errors: bool, x_errors: bool = False) -> ShapeFamily:
    """Select the dataset shape for the requested configuration.

    Args:
        n_dims: Number of dimensions of the result.
        use_float: Whether the result must be single precision.
        use_errors: Whether errors were requested or any error buffer was registered.
        x_errors: Whether an error buffer was registered for the X dimension.

    Returns:
        The shape family to construct.

    Raises:
        ShapeUnsupportedError: If no dataset implementation exists for the combination.
    """
    if n_dims <= MAX_TWO_SERIES_DIMS:
        if not use_errors:
            return ShapeFamily.FLOAT if use_float else ShapeFamily.DOUBLE
        if use_float:
            raise ShapeUnsupportedError(n_dims, use_float, use_errors, "no single precision error dataset")
        if x_errors:
            raise ShapeUnsupportedError(n_dims, use_float, use_errors, "X errors are not supported")
        return ShapeFamily.DOUBLE_ERROR

    if use_float:
        raise ShapeUnsupportedError(n_dims, use_float, use_errors, "no single precision dataset for n_dims > 2")
    if use_errors:
        raise ShapeUnsupportedError(n_dims, use_float, use_errors, "errors are not supported for n_dims > 2")
    return ShapeFamily.MULTI_DIM_DOUBLE
