"""Fatal scaffolding conditions.

Each error is a ``click.ClickException``: the CLI prints ``Error: <message>``
to stderr and exits with code 1. Nothing is rolled back.
"""

import click


class ScaffoldError(click.ClickException):
    """Base class for every fatal scaffolding condition."""


class MissingArgument(ScaffoldError):
    """A required project or feature name was not supplied."""


class InvalidName(ScaffoldError):
    """A supplied name cannot be used as a single directory name."""


class UnexpectedArgument(ScaffoldError):
    """More positional arguments were given than the mode consumes."""


class UnsupportedRuntime(ScaffoldError):
    """Node.js or npm is missing, or Node.js is older than required."""


class GeneratorFailure(ScaffoldError):
    """The external project generator exited non-zero."""


class InstallFailure(ScaffoldError):
    """The package installer exited non-zero."""


class ManifestParseFailure(ScaffoldError):
    """package.json could not be read or is not a JSON object."""


class ScaffoldAborted(ScaffoldError):
    """The user declined a destructive confirmation."""
