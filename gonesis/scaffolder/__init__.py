"""gonesis scaffolder -- materializes a Go project structure.

This module takes a ``ScaffoldRequest`` (the operator's answers) and a
``Config`` and creates the project folder, its entry point, ``go.mod``,
README and ``.gitignore``.

Quick usage::

    from gonesis.config import Config
    from gonesis.scaffolder import ProjectGenerator, ScaffoldRequest

    request = ScaffoldRequest(
        project_name="myapp",
        description="A sample project",
        account_handle="alice",
        features={"api": True, "server": False, "db": False},
    )
    result = ProjectGenerator(Config(output_dir="/tmp/output")).generate(request)
"""

from gonesis.scaffolder.generator import ProjectGenerator, ScaffoldRequest, ScaffoldResult
from gonesis.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "ScaffoldRequest",
    "ScaffoldResult",
    "TemplateRenderer",
]
