"""Shared fixtures and helpers for scaffold tests."""

import json
import os
import sys

import pytest

# Ensure tests/scaffold-cmd/ is on sys.path so test files can import the
# fakes unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402
from fake_prompter import FakePrompter  # noqa: E402

from lscs_scaffold.scaffold.context import ScaffoldContext  # noqa: E402
from lscs_scaffold.scaffold.scaffold_config import ScaffoldConfig, WorkflowPolicy  # noqa: E402

GENERATED_CSS = "@import \"tailwindcss\";\n"
GENERATED_MANIFEST = {
    "name": "demo",
    "version": "0.1.0",
    "private": True,
    "scripts": {"dev": "next dev", "build": "next build"},
    "dependencies": {"next": "15.5.3"},
}


def fake_next_app(project_root, manifest=None):
    """Return a callable that writes what create-next-app would leave behind."""
    def _generate():
        app_dir = os.path.join(project_root, "src", "app")
        os.makedirs(app_dir, exist_ok=True)
        with open(os.path.join(app_dir, "globals.css"), "w") as f:
            f.write(GENERATED_CSS)
        with open(os.path.join(app_dir, "page.tsx"), "w") as f:
            f.write("export default function Home() { return null; }\n")
        with open(os.path.join(project_root, "package.json"), "w") as f:
            json.dump(manifest or GENERATED_MANIFEST, f, indent=2)
    return _generate


def make_project_context(cwd, name="demo", config=None, runner=None, prompter=None):
    return ScaffoldContext.for_project(
        cwd, name,
        config or ScaffoldConfig(workflows=WorkflowPolicy.NEVER),
        runner or FakeCommandRunner(),
        prompter or FakePrompter(),
    )


def make_feature_context(cwd, name, config=None):
    return ScaffoldContext.for_feature(
        cwd, name, config or ScaffoldConfig(), FakeCommandRunner(), FakePrompter(),
    )


@pytest.fixture
def runner():
    return FakeCommandRunner()


@pytest.fixture
def prompter():
    return FakePrompter()
