"""CommandRunner: synchronous execution of external commands.

``run`` inherits the terminal so the child's output streams straight through;
``capture`` collects stdout for short probes like ``node -v``. Tests replace
the runner with a fake that records invocations.
"""

import shutil
import subprocess
from dataclasses import dataclass
from typing import List

COMMAND_NOT_FOUND = 127


@dataclass
class ExitStatus:
    """Exit code and (for captured runs) stripped stdout of a command."""
    returncode: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _resolve_executable(cmd: List[str]) -> List[str]:
    # npx/npm are .cmd shims on Windows and need the resolved path
    executable = shutil.which(cmd[0]) or cmd[0]
    return [executable] + list(cmd[1:])


class CommandRunner:
    """Runs external commands with subprocess, blocking until they exit."""

    def run(self, cmd: List[str], cwd: str) -> ExitStatus:
        """Run cmd in cwd with stdin/stdout/stderr inherited."""
        try:
            result = subprocess.run(_resolve_executable(cmd), cwd=cwd)
        except FileNotFoundError:
            return ExitStatus(returncode=COMMAND_NOT_FOUND)
        return ExitStatus(returncode=result.returncode)

    def capture(self, cmd: List[str]) -> ExitStatus:
        """Run cmd and capture its stdout."""
        try:
            result = subprocess.run(
                _resolve_executable(cmd), capture_output=True, text=True,
            )
        except FileNotFoundError:
            return ExitStatus(returncode=COMMAND_NOT_FOUND)
        return ExitStatus(returncode=result.returncode, stdout=result.stdout.strip())
