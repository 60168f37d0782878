"""Options dataclass for the scaffold command."""

from dataclasses import dataclass
from enum import Enum


class WorkflowPolicy(Enum):
    """Whether to copy the bundled GitHub workflows into a new project."""

    ASK = "ask"
    ALWAYS = "always"
    NEVER = "never"


FORMAT_SCRIPT = "prettier --write ."
TEST_SCRIPT = "vitest"


@dataclass(frozen=True)
class ScaffoldConfig:
    """All options for the scaffold command."""

    prettier: bool = True
    vitest: bool = True
    workflows: WorkflowPolicy = WorkflowPolicy.ASK
    replace_manifest: bool = True
    install: bool = False
    keep_files: bool = False
    assume_yes: bool = False
    min_node_major: int = 18
    generator_package: str = "create-next-app@latest"
    import_alias: str = "@/*"

    @property
    def manifest_scripts(self) -> dict[str, str]:
        """Script entries this run owns in package.json."""
        scripts = {}
        if self.prettier:
            scripts["format"] = FORMAT_SCRIPT
        if self.vitest:
            scripts["test"] = TEST_SCRIPT
        return scripts
