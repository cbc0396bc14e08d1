# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Custom exceptions for arrayds.

All failures are usage or configuration errors detected synchronously, either
while registering data on a builder or while building the dataset. None of
them is retried internally; the caller fixes the configuration and builds again.
"""


class DataSetBuilderError(Exception):
    """Base class for all errors raised while assembling a dataset."""


class ShapeUnsupportedError(DataSetBuilderError):
    """Exception raised when no dataset implementation exists for the requested shape."""

    def __init__(self, n_dims: int, use_float: bool, use_errors: bool, reason: str | None = None):
        """Initialize the exception with the rejected shape parameters.

        Args:
            n_dims: The inferred or requested number of dimensions.
            use_float: Whether single precision was requested.
            use_errors: Whether error buffers were requested or supplied.
            reason: Optional human-readable explanation of the rejection.
        """
        self.n_dims = n_dims
        self.use_float = use_float
        self.use_errors = use_errors
        message = f"No dataset implemented for n_dims={n_dims}, use_float={use_float}, use_errors={use_errors}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class CapacityConflictError(DataSetBuilderError):
    """Exception raised when supplied data exceeds the explicitly requested number of dimensions."""

    def __init__(self, n_dims: int, max_dim_index: int):
        """Initialize the exception with the conflicting dimension information.

        Args:
            n_dims: The explicitly requested number of dimensions.
            max_dim_index: The highest dimension index referenced by supplied data.
        """
        self.n_dims = n_dims
        self.max_dim_index = max_dim_index
        super().__init__(
            f"Supplied data dimensions exceed requested number of dimensions: "
            f"data references dimension index {max_dim_index}, but only {n_dims} dimensions were requested."
        )


class InvalidArgumentError(DataSetBuilderError, ValueError):
    """Exception raised for malformed arguments such as negative indices or ragged nested arrays."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive error message.

        Args:
            message: Human-readable description of the invalid argument.
        """
        super().__init__(message)


__all__ = [
    "CapacityConflictError",
    "DataSetBuilderError",
    "InvalidArgumentError",
    "ShapeUnsupportedError",
]
