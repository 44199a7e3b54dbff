# qif_dom/utilities/core_util.py
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from pathlib import Path
from typing import IO, Any, Literal, Optional, Union, overload

PathLike = Union[str, Path]


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


@overload
def open_for_read(path: PathLike, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: PathLike, binary: Literal[False] = ..., **kwargs: Any) -> IO[str]: ...


def open_for_read(path: PathLike, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


@overload
def open_for_write(path: PathLike, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_write(path: PathLike, binary: Literal[False] = ..., **kwargs: Any) -> IO[str]: ...


def open_for_write(path: PathLike, binary: bool = False, **kwargs: Any) -> IO[Any]:
    """Open ``path`` for writing, creating missing parent directories."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    mode = "wb" if binary else "w"
    return open(path, mode, **kwargs)


def to_dict_str(value: object) -> str:
    """String form used in ``to_dict()`` output: ISO dates, enum values."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def compact_dict(**values: object) -> dict[str, str]:
    """Build a ``to_dict()`` mapping, dropping None entries."""
    return {k: to_dict_str(v) for k, v in values.items() if v is not None}
