"""Copy static files bundled with the scaffolder into a project."""

import os
import shutil
from pathlib import Path

ASSETS_DIR = Path(__file__).parent / "assets"


def copy_asset_file(asset_name, destination):
    """Copy a bundled file to destination, replacing any existing file."""
    source = ASSETS_DIR / asset_name
    if not source.is_file():
        raise FileNotFoundError(f"Asset not found: {asset_name}")
    os.makedirs(os.path.dirname(os.path.abspath(destination)), exist_ok=True)
    shutil.copy2(source, destination)


def copy_asset_tree(source, destination):
    """Recursively copy source into destination.

    Nested directories are recreated and same-named files are overwritten;
    files already in destination that source lacks are kept.
    """
    shutil.copytree(source, destination, dirs_exist_ok=True)
