"""Create a manifest of relative directories under a root."""

from pathlib import Path
from typing import Iterable, List

KEEP_FILE = ".gitkeep"


def materialize_directories(root, paths: Iterable[str], keep_files: bool = False) -> List[Path]:
    """Ensure every relative path in paths exists under root.

    Paths are deduplicated in order. Existing directories and their contents
    are left alone, so running this twice yields the same tree as running it
    once. With keep_files, an empty marker file is written into every listed
    directory that is still empty, so version control keeps it.

    Returns:
        The absolute directories, one per unique path.
    """
    root = Path(root)
    directories = [root / rel for rel in dict.fromkeys(paths)]
    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)

    if keep_files:
        for directory in directories:
            if not any(directory.iterdir()):
                (directory / KEEP_FILE).touch()

    return directories
