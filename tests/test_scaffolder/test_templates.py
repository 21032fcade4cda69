"""Tests for the Jinja2 template renderer (gonesis.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from gonesis.scaffolder.templates import TemplateRenderer, write_file

pytestmark = pytest.mark.unit


EXPECTED_MAIN = """package main

import (
\t"fmt"
)

func main() {
\tfmt.Println("Hello, World!")
}
"""

EXPECTED_README = (
    "# myapp\n"
    "A tiny tool\n"
    "\n"
    "Installation \U0001F4E1\n"
    "-------\n"
    "**Go 1.17+**\n"
    "```bash\n"
    "go install -v github.com/alice/myapp@latest\n"
    "```\n"
    "**otherwise**\n"
    "```bash\n"
    "go get -v github.com/alice/myapp\n"
    "```\n"
    "\n"
    "Usage \U0001F4BB\n"
    "-------\n"
    "```bash\n"
    "myapp\n"
    "```\n"
    "\n"
    "Created with [gonesis](https://github.com/edoardottt/gonesis)\u2764\ufe0f"
)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestShippedTemplates:
    def test_main_is_exact(self, renderer):
        assert renderer.render_main() == EXPECTED_MAIN

    def test_readme_is_exact(self, renderer):
        readme = renderer.render_readme("myapp", "A tiny tool", "github.com/alice/myapp")
        assert readme == EXPECTED_README

    def test_readme_does_not_escape_description(self, renderer):
        readme = renderer.render_readme("x", "Uses <html> & \"quotes\"", "github.com/a/x")
        assert "Uses <html> & \"quotes\"" in readme

    def test_readme_with_empty_description(self, renderer):
        readme = renderer.render_readme("x", "", "github.com/a/x")
        assert readme.startswith("# x\n\n\nInstallation")

    def test_gitignore_is_static(self, renderer):
        gitignore = renderer.render_gitignore()
        lines = gitignore.split("\n")
        assert lines[0] == "# Binaries for programs and plugins"
        assert lines[6] == "\t"
        assert "*.dylib" in lines
        assert "# vendor/" in lines
        assert lines[-1] == "go.work"


class TestCustomTemplates:
    def test_undefined_variable_raises(self, tmp_path: Path):
        (tmp_path / "x.txt.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("x.txt.j2", {})

    def test_template_dir_override(self, tmp_path: Path):
        (tmp_path / "x.txt.j2").write_text("Val: {{ v }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("x.txt.j2", {"v": 1}) == "Val: 1\n"


class TestWriteFile:
    def test_no_newline_translation(self, tmp_path: Path):
        target = tmp_path / "f"
        write_file(target, "a\nb")
        assert target.read_bytes() == b"a\nb"

    def test_missing_parent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            write_file(tmp_path / "missing" / "f", "x")
