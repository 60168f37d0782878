"""Node.js and npm precondition check."""

import re

from lscs_scaffold import console
from lscs_scaffold.scaffold.errors import UnsupportedRuntime

_MAJOR_VERSION = re.compile(r"^v?(\d+)")


def parse_major_version(version: str):
    """Return the major version from strings like 'v20.11.1', or None."""
    match = _MAJOR_VERSION.match(version.strip())
    return int(match.group(1)) if match else None


def check_runtime(runner, min_major: int):
    """Verify node and npm are installed and node is at least min_major.

    Returns:
        (node_version, npm_version) as reported by the tools.

    Raises:
        UnsupportedRuntime: If either tool is missing or node is too old.
    """
    node = runner.capture(["node", "-v"])
    npm = runner.capture(["npm", "-v"])
    if not node.ok or not npm.ok:
        raise UnsupportedRuntime("Node.js and npm must be installed to run this script.")

    console.success(f"Node.js {node.stdout} detected")
    console.success(f"npm {npm.stdout} detected")

    major = parse_major_version(node.stdout)
    if major is None:
        raise UnsupportedRuntime(f"Could not determine the Node.js version from '{node.stdout}'.")
    if major < min_major:
        raise UnsupportedRuntime(
            f"Node.js {min_major} or higher is required for Next.js 14+ (found {node.stdout})."
        )
    return node.stdout, npm.stdout
