#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/utils/io_utils.py
"""I/O utilities for handling output destinations.

Rendered text is always produced in memory first; these helpers write it
to a path or file-like object in one step.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or file-like object.

    Files are opened with ``newline=""`` so line terminators chosen by the
    renderer reach the disk unchanged, and an existing file is overwritten.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    OSError
        If the destination cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("a,b\\n", buffer)
        >>> buffer.getvalue()
        'a,b\\n'

    """
    if isinstance(output, (str, Path)):
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


def ensure_directory(path: Union[str, Path]) -> Path:
    """Create a directory, including missing parents, and return it as a Path.

    Parameters
    ----------
    path : str or Path
        Directory to create

    Returns
    -------
    Path
        The directory path

    Raises
    ------
    OSError
        If the directory cannot be created

    """
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


__all__ = ["write_content", "ensure_directory"]
