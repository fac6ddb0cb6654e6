from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Reading component sources and writing generated declarations, always as
UTF-8 regardless of the platform default encoding.
"""

import os
import sys


def read_source(path: str) -> str:
    """
    Read a source file as UTF-8 text.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_stdin() -> str:
    """Read all of standard input, decoding raw bytes as UTF-8 when available."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is not None:
        return buffer.read().decode("utf-8")
    return sys.stdin.read()


def write_text(path: str, text: str) -> None:
    """Write text to ``path``, creating parent directories as needed."""
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    # newline="" keeps the '\n' line endings of the declaration on Windows
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
