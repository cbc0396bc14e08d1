# SPDX-FileCopyrightText: 2017-2025 Contributors to the arrayds project <arrayds@users.noreply.github.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.absolute()

try:
    __version__ = version("arrayds")
except PackageNotFoundError:
    # package is not installed
    pass
