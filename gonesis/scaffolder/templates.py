"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``gonesis/scaffolder/templates/`` directory and renders them with the
project name, description and module path.  The shipped templates are
literal text: rendering must reproduce them byte for byte, so trailing
newlines are kept exactly as they appear in the ``.j2`` files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

MAIN_TEMPLATE = "main.go.j2"
README_TEMPLATE = "README.md.j2"
GITIGNORE_TEMPLATE = "gitignore.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffold's Jinja2 templates.

    Undefined variables are an error rather than an empty string, so a
    template asking for something the context lacks fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"README.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Named scaffold files ----------------------------------------------

    def render_main(self) -> str:
        """The ``cmd/<name>.go`` entry point: prints ``Hello, World!``."""
        return self.render(MAIN_TEMPLATE, {})

    def render_readme(self, project_name: str, description: str, module_path: str) -> str:
        return self.render(
            README_TEMPLATE,
            {
                "project_name": project_name,
                "description": description,
                "module_path": module_path,
            },
        )

    def render_gitignore(self) -> str:
        return self.render(GITIGNORE_TEMPLATE, {})


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def write_file(path: Path, content: str, mode: int | None = None) -> None:
    """Write *content* as UTF-8 without newline translation."""
    path.write_bytes(content.encode("utf-8"))
    if mode is not None:
        path.chmod(mode)
