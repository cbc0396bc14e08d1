# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Inference of the dimensionality and per-dimension size of a dataset.

The builder collects contributions for arbitrary dimension indices. Before a
dataset can be allocated, the number of dimensions and the length of every
dimension have to be derived from those contributions and the optional hints
given by the caller.
"""

from collections.abc import Iterable, Mapping, Sequence

from arrayds.exceptions import CapacityConflictError


def resolve_dimension(explicit: int | None, referenced_dimensions: Iterable[int]) -> int:
    """Determine the number of dimensions of the result.

    Args:
        explicit: Explicitly requested number of dimensions, or None to infer it.
        referenced_dimensions: All dimension indices that data or axis descriptions
            were registered for.

    Returns:
        The explicit count if given, otherwise one more than the highest referenced
        index (0 if nothing was referenced).

    Raises:
        CapacityConflictError: If data references a dimension index that does not fit
            into the explicitly requested number of dimensions.
    """
    max_dim = max(referenced_dimensions, default=-1)
    if explicit is None:
        return max_dim + 1
    if max_dim >= explicit:
        raise CapacityConflictError(n_dims=explicit, max_dim_index=max_dim)
    return explicit


def resolve_size(
    dim: int,
    n_dims: int,
    capacities: Sequence[int] | None,
    buffer_lengths: Mapping[int, Sequence[int]],
    label_keys: Iterable[int] = (),
) -> int:
    """Determine the length of one dimension.

    Explicit capacities take precedence; dimensions beyond the supplied
    capacities reuse the last one. Without capacities the longest buffer
    registered for the dimension decides. For the last dimension the highest
    data label or style index is taken into account as well.

    Args:
        dim: Dimension index to resolve.
        n_dims: Number of dimensions of the result.
        capacities: Explicit per-dimension capacities, if any.
        buffer_lengths: Lengths of all buffers registered per dimension.
        label_keys: Indices of the data labels and styles.

    Returns:
        The number of elements of the dimension.
    """
    if capacities:
        if dim < len(capacities):
            return capacities[dim]
        return capacities[-1]

    size = max(buffer_lengths.get(dim, ()), default=0)
    if dim == n_dims - 1:
        # the highest index itself, not index + 1
        size = max(size, max(label_keys, default=-1))
    return size


def resolve_sizes(
    n_dims: int,
    capacities: Sequence[int] | None,
    buffer_lengths: Mapping[int, Sequence[int]],
    label_keys: Iterable[int] = (),
) -> list[int]:
    """Resolve the length of every dimension, see ``resolve_size``."""
    label_keys = list(label_keys)
    return [resolve_size(dim, n_dims, capacities, buffer_lengths, label_keys) for dim in range(n_dims)]
