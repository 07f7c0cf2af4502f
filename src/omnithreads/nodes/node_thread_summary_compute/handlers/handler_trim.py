# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Filename and package trimming for thread labels.

Both transforms are pure string operations (no filesystem access).
trim_filename is idempotent: trim_filename(trim_filename(x)) == trim_filename(x).
"""

from __future__ import annotations

import re
from typing import Final

_PATH_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[/\\]")

# Drive letter ("C:\") or UNC ("\\") prefix marks a Windows path
_WINDOWS_PATH_PREFIX: Final[re.Pattern[str]] = re.compile(r"^([a-z]:\\|\\\\)", re.I)

_BINARY_SUFFIX: Final[re.Pattern[str]] = re.compile(r"\.(dylib|so|a|dll|exe)$")


def trim_filename(filename: str) -> str:
    """Reduce a path to its last non-empty segment.

    Both ``/`` and ``\\`` count as separators. A string with no non-empty
    segment (e.g. ``"/"``) is returned unchanged.

    Examples:
        >>> trim_filename("/app/src/worker.py")
        'worker.py'
        >>> trim_filename("C:\\\\src\\\\main.c")
        'main.c'
    """
    segments = [segment for segment in _PATH_SEPARATORS.split(filename) if segment]
    if not segments:
        return filename
    return segments[-1]


def trim_package(package: str) -> str:
    """Reduce a package path to its binary name without library suffix.

    Examples:
        >>> trim_package("/usr/lib/libSystem.B.dylib")
        'libSystem.B'
        >>> trim_package("C:\\\\Windows\\\\System32\\\\ntdll.dll")
        'ntdll'
        >>> trim_package("mylib.core")
        'mylib.core'
    """
    separator = "\\" if _WINDOWS_PATH_PREFIX.match(package) else "/"
    pieces = package.split(separator)
    name = pieces[-1] or (pieces[-2] if len(pieces) > 1 else "") or package
    return _BINARY_SUFFIX.sub("", name)


__all__ = ["trim_filename", "trim_package"]
