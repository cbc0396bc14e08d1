# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Resolution of registered buffers into dataset arrays of a fixed size and precision."""

import numpy as np

from arrayds.data_classes.typed_buffer import TypedBuffer
from arrayds.enums import DIM_X, Precision
from arrayds.logging import get_logger

logger = get_logger(__name__)


def materialize_values(buffer: TypedBuffer | None, dim: int, size: int, precision: Precision) -> np.ndarray:
    """Resolve the values of one dimension.

    A registered buffer is resized to ``size`` (zero padded or truncated) and cast
    to ``precision`` if needed. Without a buffer the X dimension gets the index
    sequence ``0 .. size - 1`` and every other dimension gets zeros.

    Args:
        buffer: The registered values, if any.
        dim: Dimension index.
        size: Required number of elements.
        precision: Output precision.

    Returns:
        Array of ``size`` elements in ``precision``.
    """
    if buffer is not None:
        if buffer.precision != precision:
            logger.debug("Casting values", dim=dim, source=buffer.precision, target=precision)
        return buffer.as_precision(precision, size)

    if dim == DIM_X:
        return np.arange(size, dtype=precision.dtype)
    return np.zeros(size, dtype=precision.dtype)


def materialize_errors(
    own: TypedBuffer | None, opposite: TypedBuffer | None, size: int, precision: Precision
) -> np.ndarray:
    """Resolve the errors of one sign for one dimension.

    Args:
        own: Error buffer registered for the requested sign.
        opposite: Error buffer registered for the other sign, used as a stand-in
            when ``own`` is missing. The stand-in is always a fresh copy.
        size: Required number of elements.
        precision: Output precision.

    Returns:
        Array of ``size`` elements in ``precision``; zeros if neither sign was registered.
    """
    if own is not None:
        return own.as_precision(precision, size)
    if opposite is not None:
        logger.debug("Using opposite sign errors as stand-in", source=opposite.precision, size=size)
        # The stand-in must not share memory with the buffer of the other sign.
        return opposite.as_precision(precision, size).copy()
    return np.zeros(size, dtype=precision.dtype)
