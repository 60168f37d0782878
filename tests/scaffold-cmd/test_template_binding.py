"""Tests for template bindings and the template writer."""

import json

import pytest

from lscs_scaffold.scaffold.layout import FEATURE_README, PACKAGE_JSON, PAGE_PLACEHOLDER, PROJECT_README
from lscs_scaffold.scaffold.template_binding import TemplateBinding, write_templates


def _manifest_params(name="demo", prettier=True, vitest=True):
    return {"name": name, "prettier": prettier, "vitest": vitest}


@pytest.mark.unit
class TestWriteTemplates:

    def test_writes_rendered_text(self, tmp_path):
        binding = TemplateBinding("hello.txt", lambda params: f"Hello, {params['name']}!\n")

        write_templates(tmp_path, [binding], {"name": "demo"})

        assert (tmp_path / "hello.txt").read_text() == "Hello, demo!\n"

    def test_creates_parent_directories(self, tmp_path):
        binding = TemplateBinding("a/b/c.txt", lambda params: "x")

        write_templates(tmp_path, [binding], {"name": "demo"})

        assert (tmp_path / "a" / "b" / "c.txt").is_file()

    def test_overwrites_existing_file(self, tmp_path):
        (tmp_path / "out.txt").write_text("old content that is longer")
        binding = TemplateBinding("out.txt", lambda params: "new")

        write_templates(tmp_path, [binding], {"name": "demo"})

        assert (tmp_path / "out.txt").read_text() == "new"

    def test_preserves_text_exactly(self, tmp_path):
        text = "\n  leading\r\ntrailing  \n\n✅ ünïcode"
        binding = TemplateBinding("exact.txt", lambda params: text)

        write_templates(tmp_path, [binding], {"name": "demo"})

        assert (tmp_path / "exact.txt").read_bytes() == text.encode("utf-8")

    def test_returns_written_paths(self, tmp_path):
        bindings = [TemplateBinding("a.txt", lambda p: ""), TemplateBinding("b.txt", lambda p: "")]

        written = write_templates(tmp_path, bindings, {"name": "demo"})

        assert written == [tmp_path / "a.txt", tmp_path / "b.txt"]


@pytest.mark.unit
class TestBundledTemplates:

    def test_feature_readme_embeds_name(self):
        text = FEATURE_README.render({"name": "billing"})

        assert text.startswith("# Feature Module: billing\n")

    def test_feature_readme_keeps_placeholder_verbatim(self):
        text = FEATURE_README.render({"name": "[feature-name]"})

        assert "# Feature Module: [feature-name]" in text

    def test_project_readme_embeds_name(self):
        text = PROJECT_README.render({"name": "demo"})

        assert text.startswith("# demo\n")
        assert text.endswith("\n")

    def test_package_json_is_valid_json(self):
        data = json.loads(PACKAGE_JSON.render(_manifest_params()))

        assert data["name"] == "demo"
        assert data["scripts"]["format"] == "prettier --write ."
        assert data["scripts"]["test"] == "vitest"
        assert "next" in data["dependencies"]

    @pytest.mark.parametrize("prettier,vitest", [(True, False), (False, True), (False, False)])
    def test_package_json_omits_disabled_tools(self, prettier, vitest):
        data = json.loads(PACKAGE_JSON.render(_manifest_params(prettier=prettier, vitest=vitest)))

        assert ("format" in data["scripts"]) == prettier
        assert ("prettier" in data["devDependencies"]) == prettier
        assert ("test" in data["scripts"]) == vitest
        assert ("vitest" in data["devDependencies"]) == vitest
        assert data["scripts"]["test:e2e"] == "cypress open"

    def test_package_json_escapes_name(self):
        data = json.loads(PACKAGE_JSON.render(_manifest_params(name='we"ird')))

        assert data["name"] == 'we"ird'

    def test_page_placeholder_imports_relocated_stylesheet(self):
        text = PAGE_PLACEHOLDER.render({"name": "demo"})

        assert 'import "../styles/globals.css";' in text

    def test_rendering_is_deterministic(self):
        assert PROJECT_README.render({"name": "demo"}) == PROJECT_README.render({"name": "demo"})
