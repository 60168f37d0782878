"""Decide between project and feature scaffolding from positional arguments."""

from dataclasses import dataclass
from enum import Enum

from lscs_scaffold.scaffold.errors import InvalidName, MissingArgument, UnexpectedArgument

FEATURE_COMMAND = "feature"
PROJECT_NAME_QUESTION = "Enter your project name"


class Mode(Enum):
    PROJECT = "project"
    FEATURE = "feature"


@dataclass(frozen=True)
class ResolvedCommand:
    mode: Mode
    name: str


def resolve_command(argv, prompter) -> ResolvedCommand:
    """Resolve the operating mode and target name.

    ``feature <name>`` selects feature scaffolding; anything else is a new
    project whose name comes from the first argument or, failing that, from
    an interactive prompt.

    Raises:
        MissingArgument: If the feature name is absent or the prompt is empty.
        InvalidName: If the name is not usable as a directory name.
        UnexpectedArgument: If more positional arguments are given than consumed.
    """
    args = list(argv)

    if args and args[0] == FEATURE_COMMAND:
        if len(args) < 2 or not args[1].strip():
            raise MissingArgument(
                "Please provide a feature name: create-lscs-next-app feature <feature-name>"
            )
        _reject_extra_arguments(args, consumed=2)
        return ResolvedCommand(Mode.FEATURE, _validated_name(args[1]))

    if args:
        _reject_extra_arguments(args, consumed=1)
        return ResolvedCommand(Mode.PROJECT, _validated_name(args[0]))

    name = prompter.ask(PROJECT_NAME_QUESTION)
    if not name:
        raise MissingArgument("Project name is required.")
    return ResolvedCommand(Mode.PROJECT, _validated_name(name))


def _reject_extra_arguments(args, consumed):
    if len(args) > consumed:
        raise UnexpectedArgument(
            f"Unexpected extra arguments: {' '.join(args[consumed:])}"
        )


def _validated_name(name):
    name = name.strip()
    if not name:
        raise MissingArgument("A non-empty name is required.")
    if name in (".", "..") or "/" in name or "\\" in name:
        raise InvalidName(f"'{name}' is not a valid name: use a single directory name.")
    return name
