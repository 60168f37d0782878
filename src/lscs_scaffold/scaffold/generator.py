"""External commands: the Next.js project generator and the package installer."""

from lscs_scaffold import console
from lscs_scaffold.scaffold.errors import GeneratorFailure, InstallFailure

GENERATOR_FLAGS = ["--typescript", "--eslint", "--tailwind", "--app", "--src-dir"]


def build_generator_command(name, config):
    """Build the create-next-app command line for a project name."""
    return (
        ["npx", config.generator_package, name]
        + GENERATOR_FLAGS
        + ["--import-alias", config.import_alias]
    )


def run_generator(ctx):
    """Generate the Next.js app in the working directory.

    The child inherits the terminal. A non-zero exit aborts the run before
    any of the scaffolder's own files are written.
    """
    console.step("Creating Next.js app...")
    cmd = build_generator_command(ctx.name, ctx.config)
    result = ctx.runner.run(cmd, cwd=str(ctx.cwd))
    if not result.ok:
        raise GeneratorFailure(
            f"Failed to create Next.js app: {' '.join(cmd)} exited with code {result.returncode}"
        )
    return ctx


def install_dependencies(ctx):
    if not ctx.config.install:
        return ctx
    console.step("Installing dependencies...")
    cmd = ["npm", "install"]
    result = ctx.runner.run(cmd, cwd=str(ctx.root))
    if not result.ok:
        raise InstallFailure(f"npm install exited with code {result.returncode}")
    return ctx
