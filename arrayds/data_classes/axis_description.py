# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the axis description dataclass."""
import math
from typing import Self

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class AxisDescription(BaseModel):
    """Name, unit and value range of one dataset dimension.

    An undefined range is represented by NaN limits. Limits can be set explicitly
    or computed from data using ``recompute``.

    Example:
        >>> axis = AxisDescription(name="time", unit="s")
        >>> axis.is_defined()
        False
        >>> axis.set_range(0.0, 10.0).is_defined()
        True
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field("", description="Axis name, e.g. 'time'.")
    unit: str = Field("", description="Axis unit, e.g. 's'.")
    min: float = Field(math.nan, description="Lower limit of the axis range, NaN if undefined.")
    max: float = Field(math.nan, description="Upper limit of the axis range, NaN if undefined.")

    def is_defined(self) -> bool:
        """Whether both range limits are set."""
        return not (math.isnan(self.min) or math.isnan(self.max))

    def set_range(self, min_value: float, max_value: float) -> Self:
        self.min = min_value
        self.max = max_value
        return self

    def clear(self) -> Self:
        """Reset the range limits to undefined, keeping name and unit."""
        return self.set_range(math.nan, math.nan)

    def recompute(self, values: np.ndarray) -> Self:
        """Set the range to the finite extent of ``values``.

        Args:
            values: Data of the dimension this axis describes.

        Returns:
            This axis description; the range is cleared if ``values`` has no finite entries.
        """
        finite = values[np.isfinite(values)]
        if finite.size == 0:
            return self.clear()
        return self.set_range(float(finite.min()), float(finite.max()))

    def update(self, other: "AxisDescription") -> Self:
        """Overlay another description onto this one.

        Name and unit are always taken from ``other``. Its limits only replace the
        current ones where they are defined, so a description that merely names an
        axis keeps the range computed from data.

        Args:
            other: The description to copy from.

        Returns:
            This axis description.
        """
        self.name = other.name
        self.unit = other.unit
        if not math.isnan(other.min):
            self.min = other.min
        if not math.isnan(other.max):
            self.max = other.max
        return self
