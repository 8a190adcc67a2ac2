import os
from typing import IO, Any


def file_size(fp: IO[Any]) -> int:
    """Return the size of an open file, leaving its position unchanged.

    Returns:
        The size in bytes, or -1 if the stream cannot report its position or seek.
    """
    try:
        position = fp.tell()
        end = fp.seek(0, os.SEEK_END)
        fp.seek(position, os.SEEK_SET)
    except (OSError, ValueError):
        return -1

    return end
