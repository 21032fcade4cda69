"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` and materializes the Go project tree under the
configured output directory:

- ``cmd/<name>.go`` hello-world entry point
- ``go.mod`` created by ``go mod init <host>/<handle>/<name>``
- mandatory folders (``pkg``, ``docs``, ``internal``, ``examples``)
- optional folders the operator answered yes to
- ``README.md`` and ``.gitignore``

Steps run strictly in order.  The first failure raises a ``ScaffoldError``
subclass and whatever was already created is left on disk.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gonesis.config import ENTRY_POINT_DIR, Config
from gonesis.errors import FilesystemError, ManifestError
from gonesis.utils import is_valid_project_name, run_command

from .templates import TemplateRenderer, write_file

GITKEEP = ".gitkeep"

CommandRunner = Callable[..., tuple[int, str, str]]


# ---------------------------------------------------------------------------
# Request / result models
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """The operator's answers.  Built once from the prompts, never mutated."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Validated project name")
    description: str = Field(default="")
    account_handle: str = Field(default="")
    features: dict[str, bool] = Field(
        default_factory=dict,
        description="Optional folder name -> whether to create it",
    )

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not is_valid_project_name(value):
            raise ValueError(
                "the project name can contain only alphanumeric characters, _ and -"
            )
        return value

    def module_path(self, host: str = "github.com") -> str:
        """Fully-qualified module path, e.g. ``github.com/alice/myapp``."""
        return f"{host}/{self.account_handle}/{self.project_name}"

    def wants(self, folder: str) -> bool:
        return self.features.get(folder, False)


class ScaffoldResult(BaseModel):
    """What a successful run created."""

    root: Path
    module_path: str
    manifest: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates the project tree described by a ``Config`` and a request.

    The command runner is injectable so the ``go`` invocation can be
    replaced in tests; it must follow ``gonesis.utils.run_command``.
    """

    def __init__(
        self,
        config: Config,
        renderer: TemplateRenderer | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.runner = runner or run_command

    # -- Public API --------------------------------------------------------

    def generate(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Generate the complete project structure.

        Returns:
            A ``ScaffoldResult`` listing the root, the manifest and every
            directory and file written.

        Raises:
            FilesystemError: The root already exists or any directory/file
                could not be created.
            ManifestError: ``go mod init`` could not be run or failed.
        """
        plan = self.config.plan
        toolchain = self.config.toolchain
        root = Path(self.config.output_dir) / request.project_name
        module_path = request.module_path(toolchain.module_host)

        directories: list[Path] = []
        files: list[Path] = []

        # 1. Root folder; an existing one is never reused
        self._make_dir(root)

        # 2. Entry point
        cmd_dir = self._make_subdir(root, ENTRY_POINT_DIR, directories, files)
        main_file = cmd_dir / f"{request.project_name}.{toolchain.source_extension}"
        self._write(main_file, self.renderer.render_main(), files)

        # 3. Manifest
        manifest = self._init_manifest(root, module_path)

        # 4. Mandatory folders
        for folder in plan.mandatory:
            self._make_subdir(root, folder, directories, files)

        # 5. Optional folders, in plan order
        for folder in plan.optional:
            if request.wants(folder):
                self._make_subdir(root, folder, directories, files)

        # 6. README and .gitignore
        readme = self.renderer.render_readme(
            request.project_name, request.description, module_path
        )
        self._write(root / "README.md", readme, files)
        self._write(root / ".gitignore", self.renderer.render_gitignore(), files)

        return ScaffoldResult(
            root=root,
            module_path=module_path,
            manifest=manifest,
            directories=directories,
            files=files,
        )

    # -- Steps -------------------------------------------------------------

    def _init_manifest(self, root: Path, module_path: str) -> Path:
        """Run ``go mod init`` and make sure the manifest ends up in *root*."""
        toolchain = self.config.toolchain
        workdir = root if toolchain.manifest_in_root else Path(self.config.output_dir)
        cmd = [toolchain.go_binary, "mod", "init", module_path]

        try:
            returncode, _stdout, stderr = self.runner(cmd, cwd=workdir)
        except FileNotFoundError as exc:
            raise ManifestError(
                f"{toolchain.go_binary} not found; is the Go toolchain installed?",
                detail=str(exc),
            ) from exc
        except OSError as exc:
            raise ManifestError(
                f"could not run {toolchain.go_binary}: {exc.strerror or exc}",
                detail=str(exc),
            ) from exc

        if returncode != 0:
            raise ManifestError(
                f"{toolchain.manifest_name} already exists in this folder?",
                detail=stderr,
            )

        manifest = root / toolchain.manifest_name
        if not toolchain.manifest_in_root:
            produced = workdir / toolchain.manifest_name
            try:
                produced.rename(manifest)
            except OSError as exc:
                raise FilesystemError(produced, exc) from exc
        return manifest

    # -- Filesystem helpers ------------------------------------------------

    def _make_dir(self, path: Path) -> None:
        try:
            path.mkdir(mode=self.config.dir_mode)
        except OSError as exc:
            raise FilesystemError(path, exc) from exc

    def _make_subdir(
        self,
        root: Path,
        name: str,
        directories: list[Path],
        files: list[Path],
    ) -> Path:
        path = root / name
        self._make_dir(path)
        directories.append(path)
        if self.config.gitkeep:
            self._write(path / GITKEEP, "", files)
        return path

    def _write(self, path: Path, content: str, files: list[Path]) -> None:
        try:
            write_file(path, content, self.config.file_mode)
        except OSError as exc:
            raise FilesystemError(path, exc) from exc
        files.append(path)
