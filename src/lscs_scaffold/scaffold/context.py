"""ScaffoldContext value object: everything a pipeline step needs."""

import os
from dataclasses import dataclass
from pathlib import Path

from lscs_scaffold.scaffold.scaffold_config import ScaffoldConfig

FEATURES_DIR = os.path.join("src", "features")


@dataclass(frozen=True)
class ScaffoldContext:
    """Target root, resolved name, options, and collaborators for one run.

    Steps receive a context and return one; there is no module-level state.
    """

    cwd: Path
    name: str
    root: Path
    config: ScaffoldConfig
    runner: object
    prompter: object

    @classmethod
    def for_project(cls, cwd, name, config, runner, prompter) -> "ScaffoldContext":
        cwd = Path(cwd)
        return cls(cwd=cwd, name=name, root=cwd / name,
                   config=config, runner=runner, prompter=prompter)

    @classmethod
    def for_feature(cls, cwd, name, config, runner, prompter) -> "ScaffoldContext":
        cwd = Path(cwd)
        return cls(cwd=cwd, name=name, root=cwd / FEATURES_DIR / name,
                   config=config, runner=runner, prompter=prompter)

    @property
    def src_dir(self) -> Path:
        return self.root / "src"
