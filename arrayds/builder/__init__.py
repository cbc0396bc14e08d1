# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Assembly of datasets from sparse per-dimension contributions."""

from arrayds.builder.dataset_builder import DataSetBuilder
from arrayds.builder.inference import resolve_dimension, resolve_sizes
from arrayds.builder.shape import select_shape_family

__all__ = [
    "DataSetBuilder",
    "resolve_dimension",
    "resolve_sizes",
    "select_shape_family",
]
