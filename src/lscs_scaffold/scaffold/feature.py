"""Feature module scaffolding: sub-folders plus a README."""

import os

from lscs_scaffold import console
from lscs_scaffold.scaffold.directories import materialize_directories
from lscs_scaffold.scaffold.layout import FEATURE_FOLDERS, FEATURE_README
from lscs_scaffold.scaffold.manifest import MANIFEST_FILE
from lscs_scaffold.scaffold.template_binding import write_templates


def create_feature(feature_root, feature_name, keep_files=False):
    """Create the feature sub-folders under feature_root and write its README.

    Safe to re-run: existing folders and files inside them are kept, and
    README.md is rewritten.
    """
    materialize_directories(feature_root, FEATURE_FOLDERS, keep_files=keep_files)
    write_templates(feature_root, [FEATURE_README], {"name": feature_name})


def scaffold_feature_module(ctx):
    """Create src/features/<name> inside the project in the working directory."""
    if not os.path.isfile(ctx.cwd / MANIFEST_FILE):
        console.warn(f"No package.json in {ctx.cwd}; creating the feature anyway.")
    create_feature(ctx.root, ctx.name, keep_files=ctx.config.keep_files)
    console.success(
        f'Feature "{ctx.name}" created successfully in src/features/{ctx.name}'
    )
    return ctx
