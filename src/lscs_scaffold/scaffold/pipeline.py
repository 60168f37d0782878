"""Ordered scaffolding pipelines for projects and features."""

from typing import Callable, List

from lscs_scaffold.scaffold import project_steps
from lscs_scaffold.scaffold.context import ScaffoldContext
from lscs_scaffold.scaffold.feature import scaffold_feature_module
from lscs_scaffold.scaffold.generator import install_dependencies, run_generator

Step = Callable[[ScaffoldContext], ScaffoldContext]

# The runtime check and overwrite confirmation must precede the generator,
# and the generator must precede every step that writes into the project.
PROJECT_STEPS: List[Step] = [
    project_steps.verify_runtime,
    project_steps.confirm_overwrite,
    run_generator,
    project_steps.write_package_json,
    project_steps.create_base_folders,
    project_steps.create_placeholder_feature,
    project_steps.relocate_globals_css,
    project_steps.write_page_placeholder,
    project_steps.add_prettier_config,
    project_steps.write_readme,
    project_steps.add_github_workflows,
    project_steps.add_vitest_setup,
    project_steps.add_keep_files,
    project_steps.patch_scripts,
    install_dependencies,
    project_steps.print_next_steps,
]

FEATURE_STEPS: List[Step] = [
    scaffold_feature_module,
]


def run_pipeline(ctx: ScaffoldContext, steps: List[Step]) -> ScaffoldContext:
    for step in steps:
        ctx = step(ctx)
    return ctx


def scaffold_project(ctx: ScaffoldContext) -> ScaffoldContext:
    return run_pipeline(ctx, PROJECT_STEPS)


def scaffold_feature(ctx: ScaffoldContext) -> ScaffoldContext:
    return run_pipeline(ctx, FEATURE_STEPS)
