"""Move a generated file to the location the project layout expects."""

import errno
import os
import shutil


def relocate_file(source, destination) -> bool:
    """Move source to destination, creating the destination's parent.

    Tries an atomic rename first and falls back to copy-then-delete when
    the two paths are on different filesystems.

    Returns:
        True if the file was moved, False if source does not exist.
    """
    if not os.path.isfile(source):
        return False

    os.makedirs(os.path.dirname(os.path.abspath(destination)), exist_ok=True)
    try:
        os.replace(source, destination)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
        shutil.copy2(source, destination)
        os.remove(source)
    return True
