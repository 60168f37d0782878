"""Template bindings: output path plus a pure render function."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List

from lscs_scaffold.templates.template_renderer import render_template


@dataclass(frozen=True)
class TemplateBinding:
    """Relative output path and the function that renders its text."""
    path: str
    render: Callable[[dict], str]


def jinja_binding(path: str, template_name: str) -> TemplateBinding:
    """Bind path to a bundled Jinja2 template rendered with the run's parameters."""
    def render(params):
        return render_template(template_name, package=__package__, **params)
    return TemplateBinding(path=path, render=render)


def write_templates(root, bindings: Iterable[TemplateBinding], params: dict) -> List[Path]:
    """Render each binding and write it under root, replacing any existing file.

    Text is written as UTF-8 with no newline translation.
    """
    written = []
    for binding in bindings:
        target = Path(root) / binding.path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(binding.render(params))
        written.append(target)
    return written
