"""Read-modify-write of a project's package.json."""

import json

from lscs_scaffold.scaffold.errors import ManifestParseFailure

MANIFEST_FILE = "package.json"


def read_manifest(path) -> dict:
    """Parse path as a JSON object.

    Raises:
        ManifestParseFailure: If the file is unreadable, invalid JSON, or not
            an object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise ManifestParseFailure(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestParseFailure(f"Could not parse {path}: top level is not a JSON object")
    return data


def write_manifest(path, data: dict) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def patch_manifest_scripts(path, scripts: dict) -> dict:
    """Add or overwrite the given entries under "scripts".

    Every other key, and every script not named in scripts, is kept as is
    and in its original order.

    Returns:
        The patched manifest.
    """
    data = read_manifest(path)
    existing = data.get("scripts", {})
    if not isinstance(existing, dict):
        raise ManifestParseFailure(f"Could not patch {path}: \"scripts\" is not a JSON object")

    data["scripts"] = {**existing, **scripts}
    write_manifest(path, data)
    return data
