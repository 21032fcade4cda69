"""gonesis run orchestrator and CLI entry point.

A run is a single pass:

1. PROMPT   -- ask for name, description, GitHub handle and optional folders.
2. SCAFFOLD -- create the folder tree, entry point, go.mod, README and .gitignore.

Usage::

    gonesis
    python -m gonesis
    GONESIS_LAYOUT=extended gonesis
"""

from __future__ import annotations

import sys
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console

from gonesis import __version__
from gonesis.config import Config
from gonesis.errors import ScaffoldError
from gonesis.prompts import Prompter
from gonesis.scaffolder import ProjectGenerator, ScaffoldResult
from gonesis.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


class Pipeline:
    """Runs the prompts and then the generator.

    Attributes:
        config: Run configuration.
        prompter: Reads the operator's answers.
        generator: Writes the project tree.
    """

    def __init__(
        self,
        config: Config,
        stream: TextIO | None = None,
        output: Console | None = None,
        generator: ProjectGenerator | None = None,
    ) -> None:
        self.config = config
        self.prompter = Prompter(config, stream=stream, console=output)
        self.generator = generator or ProjectGenerator(config)

    def run(self) -> ScaffoldResult:
        """Ask every question, then scaffold.  Raises ``ScaffoldError`` on failure."""
        request = self.prompter.collect()
        return self.generator.generate(request)


def summarize(result: ScaffoldResult) -> dict[str, str]:
    """Key/value rows describing a finished scaffold."""
    root = result.root
    return {
        "Project": str(root),
        "Module": result.module_path,
        "Manifest": str(result.manifest.relative_to(root)),
        "Folders": ", ".join(str(d.relative_to(root)) for d in result.directories),
        "Files": str(len(result.files)),
    }


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``gonesis`` and ``python -m gonesis``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="gonesis",
        description=(
            "Create a Go project structure ready to be pushed on GitHub. "
            "All input is asked interactively."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment:\n"
            "  GONESIS_CONFIG          JSON config file\n"
            "  GONESIS_OUTPUT_DIR      where the project folder is created (default: .)\n"
            "  GONESIS_LAYOUT          classic or extended\n"
            "  GONESIS_GO_BINARY       go executable (default: go)\n"
            "  GONESIS_MODULE_HOST     module path prefix (default: github.com)\n"
            "  GONESIS_MANIFEST_IN_ROOT  run go mod init in the project folder (default: true)\n"
            "  GONESIS_GITKEEP         drop .gitkeep files (default: true)\n"
            "  GONESIS_EMPTY_IS_YES    treat an empty answer as yes (default: true)\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args()

    try:
        config = Config.from_env()
    except (ValidationError, OSError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    pipeline = Pipeline(config)
    try:
        result = pipeline.run()
    except ScaffoldError as exc:
        console.print()
        print_error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print()
        print_warning("Aborted.")
        sys.exit(130)

    console.print()
    print_summary_table(summarize(result), title="gonesis")
    print_success(f"Project {result.root.name} created.")


if __name__ == "__main__":
    main()
