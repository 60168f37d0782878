"""Project scaffolding steps.

Every step takes a ScaffoldContext and returns it; pipeline.py fixes the
order. Steps that depend on an option return early when it is off.
"""

import os
import shutil

from lscs_scaffold import console
from lscs_scaffold.scaffold.assets import ASSETS_DIR, copy_asset_file, copy_asset_tree
from lscs_scaffold.scaffold.directories import materialize_directories
from lscs_scaffold.scaffold.errors import ScaffoldAborted
from lscs_scaffold.scaffold.feature import create_feature
from lscs_scaffold.scaffold.layout import (
    BASE_FOLDERS,
    FEATURE_FOLDERS,
    GLOBALS_CSS_DESTINATION,
    GLOBALS_CSS_SOURCE,
    PACKAGE_JSON,
    PAGE_PLACEHOLDER,
    PLACEHOLDER_FEATURE,
    PROJECT_README,
    TEST_FOLDERS,
)
from lscs_scaffold.scaffold.manifest import MANIFEST_FILE, patch_manifest_scripts
from lscs_scaffold.scaffold.relocation import relocate_file
from lscs_scaffold.scaffold.runtime_check import check_runtime
from lscs_scaffold.scaffold.scaffold_config import WorkflowPolicy
from lscs_scaffold.scaffold.template_binding import write_templates

PRETTIER_FILES = (".prettierrc", ".prettierignore")
WORKFLOWS_DIR = ".github"


def _params(ctx):
    return {"name": ctx.name, "prettier": ctx.config.prettier, "vitest": ctx.config.vitest}


def verify_runtime(ctx):
    check_runtime(ctx.runner, ctx.config.min_node_major)
    return ctx


def confirm_overwrite(ctx):
    """Ask before removing an existing directory with the project's name."""
    if not os.path.lexists(ctx.root):
        return ctx

    question = f"Directory {ctx.root} already exists. Remove it and continue?"
    if not (ctx.config.assume_yes or ctx.prompter.confirm(question, default=False)):
        raise ScaffoldAborted(f"Not overwriting existing directory {ctx.root}.")

    console.warn(f"Removing {ctx.root}")
    if os.path.isdir(ctx.root) and not os.path.islink(ctx.root):
        shutil.rmtree(ctx.root)
    else:
        os.remove(ctx.root)
    return ctx


def write_package_json(ctx):
    if not ctx.config.replace_manifest:
        return ctx
    console.step("Adding package.json...")
    write_templates(ctx.root, [PACKAGE_JSON], _params(ctx))
    return ctx


def create_base_folders(ctx):
    console.step("Setting up folder structure...")
    materialize_directories(ctx.src_dir, BASE_FOLDERS)
    return ctx


def create_placeholder_feature(ctx):
    feature_root = ctx.src_dir / "features" / PLACEHOLDER_FEATURE
    create_feature(feature_root, PLACEHOLDER_FEATURE)
    return ctx


def relocate_globals_css(ctx):
    """Move the generator's src/app/globals.css into src/styles/."""
    moved = relocate_file(ctx.root / GLOBALS_CSS_SOURCE, ctx.root / GLOBALS_CSS_DESTINATION)
    if moved:
        console.info(f"Moved {GLOBALS_CSS_SOURCE} to {GLOBALS_CSS_DESTINATION}")
    else:
        console.info(f"No {GLOBALS_CSS_SOURCE} to move; skipping.")
    return ctx


def write_page_placeholder(ctx):
    console.step("Adding page.tsx placeholder...")
    write_templates(ctx.root, [PAGE_PLACEHOLDER], _params(ctx))
    return ctx


def add_prettier_config(ctx):
    if not ctx.config.prettier:
        return ctx
    console.step("Adding Prettier configuration...")
    for name in PRETTIER_FILES:
        copy_asset_file(name, ctx.root / name)
    return ctx


def write_readme(ctx):
    console.step("Adding README.md...")
    write_templates(ctx.root, [PROJECT_README], _params(ctx))
    return ctx


def _wants_workflows(ctx):
    policy = ctx.config.workflows
    if policy is WorkflowPolicy.ALWAYS:
        return True
    if policy is WorkflowPolicy.NEVER:
        return False
    if ctx.config.assume_yes:
        return True
    return ctx.prompter.confirm("Include GitHub workflows?", default=False)


def add_github_workflows(ctx):
    if not _wants_workflows(ctx):
        console.info("Skipping GitHub workflows.")
        return ctx
    console.step("Adding GitHub workflows...")
    copy_asset_tree(ASSETS_DIR / WORKFLOWS_DIR, ctx.root / WORKFLOWS_DIR)
    return ctx


def add_vitest_setup(ctx):
    if not ctx.config.vitest:
        return ctx
    console.step("Adding Vitest configuration...")
    copy_asset_file("vitest.config.ts", ctx.root / "vitest.config.ts")
    materialize_directories(ctx.root, TEST_FOLDERS)
    copy_asset_file("setupTests.ts", ctx.root / "test" / "setupTests.ts")
    return ctx


def add_keep_files(ctx):
    """Mark the scaffolded folders that are still empty once every file is in place."""
    if not ctx.config.keep_files:
        return ctx
    feature_root = ctx.src_dir / "features" / PLACEHOLDER_FEATURE
    materialize_directories(ctx.src_dir, BASE_FOLDERS, keep_files=True)
    materialize_directories(feature_root, FEATURE_FOLDERS, keep_files=True)
    if ctx.config.vitest:
        materialize_directories(ctx.root, TEST_FOLDERS, keep_files=True)
    return ctx


def patch_scripts(ctx):
    scripts = ctx.config.manifest_scripts
    if not scripts:
        return ctx
    patch_manifest_scripts(ctx.root / MANIFEST_FILE, scripts)
    return ctx


def print_next_steps(ctx):
    console.success(f'Project "{ctx.name}" created successfully!')
    console.step("Next steps:")
    commands = [f"cd {ctx.name}"]
    if not ctx.config.install:
        commands.append("npm install")
    commands.append("npm run lint")
    if ctx.config.vitest:
        commands.append("npm run test")
    commands.append("npm run dev")
    for command in commands:
        console.step(f"   {command}")
    return ctx
