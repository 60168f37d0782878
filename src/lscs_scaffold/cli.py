"""Click entry point for create-lscs-next-app."""

from pathlib import Path

import click

from lscs_scaffold import console
from lscs_scaffold.scaffold.command_resolver import Mode, resolve_command
from lscs_scaffold.scaffold.command_runner import CommandRunner
from lscs_scaffold.scaffold.context import ScaffoldContext
from lscs_scaffold.scaffold.pipeline import scaffold_feature, scaffold_project
from lscs_scaffold.scaffold.prompter import ClickPrompter
from lscs_scaffold.scaffold.scaffold_config import ScaffoldConfig, WorkflowPolicy


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("args", nargs=-1)
@click.option("--prettier/--no-prettier", default=True, show_default=True,
              help="Add Prettier config and a format script.")
@click.option("--vitest/--no-vitest", default=True, show_default=True,
              help="Add Vitest config, test folders and a test script.")
@click.option("--workflows", type=click.Choice([p.value for p in WorkflowPolicy]),
              default=WorkflowPolicy.ASK.value, show_default=True,
              help="Copy the bundled GitHub workflows.")
@click.option("--replace-manifest/--keep-manifest", default=True, show_default=True,
              help="Replace the generated package.json with the LSCS template.")
@click.option("--install/--no-install", default=False, show_default=True,
              help="Run npm install after scaffolding.")
@click.option("--keep-files", is_flag=True,
              help="Write a .gitkeep into each empty scaffolded directory.")
@click.option("--yes", "-y", "assume_yes", is_flag=True,
              help="Answer yes to every confirmation.")
@click.option("--min-node-major", type=int, default=18, show_default=True,
              help="Minimum Node.js major version.")
@click.version_option(package_name="lscs-scaffold")
def main(args, prettier, vitest, workflows, replace_manifest, install, keep_files,
         assume_yes, min_node_major):
    """Create an LSCS Next.js app, or add a feature to an existing one.

    \b
      create-lscs-next-app [PROJECT_NAME]
      create-lscs-next-app feature FEATURE_NAME
    """
    config = ScaffoldConfig(
        prettier=prettier,
        vitest=vitest,
        workflows=WorkflowPolicy(workflows),
        replace_manifest=replace_manifest,
        install=install,
        keep_files=keep_files,
        assume_yes=assume_yes,
        min_node_major=min_node_major,
    )
    prompter = ClickPrompter()

    console.banner("LSCS Next.js App & Feature CLI")
    command = resolve_command(args, prompter)

    runner = CommandRunner()
    if command.mode is Mode.FEATURE:
        ctx = ScaffoldContext.for_feature(Path.cwd(), command.name, config, runner, prompter)
        scaffold_feature(ctx)
    else:
        ctx = ScaffoldContext.for_project(Path.cwd(), command.name, config, runner, prompter)
        scaffold_project(ctx)
