"""Directory layout of a generated LSCS project."""

import os

from lscs_scaffold.scaffold.template_binding import jinja_binding

BASE_FOLDERS = (
    "components",
    "config",
    "features",
    "hooks",
    "lib",
    "providers",
    "queries",
    "services",
    "store",
    "styles",
    "types",
)

FEATURE_FOLDERS = (
    "components",
    "containers",
    "hooks",
    "services",
    "queries",
    "types",
    "data",
)

TEST_FOLDERS = (
    "test",
    os.path.join("__tests__", "unit"),
    os.path.join("__tests__", "e2e"),
)

PLACEHOLDER_FEATURE = "[feature-name]"

GLOBALS_CSS_SOURCE = os.path.join("src", "app", "globals.css")
GLOBALS_CSS_DESTINATION = os.path.join("src", "styles", "globals.css")

FEATURE_README = jinja_binding("README.md", "feature_README.md.j2")
PROJECT_README = jinja_binding("README.md", "README.md.j2")
PACKAGE_JSON = jinja_binding("package.json", "package.json.j2")
PAGE_PLACEHOLDER = jinja_binding(os.path.join("src", "app", "page.tsx"), "page.tsx.j2")
