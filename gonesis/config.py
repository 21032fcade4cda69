"""gonesis configuration.

Typed configuration for a scaffolding run.  All settings use Pydantic v2
models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Folder plans
# ---------------------------------------------------------------------------

ENTRY_POINT_DIR = "cmd"

CLASSIC_MANDATORY: tuple[str, ...] = ("pkg", "docs", "internal", "examples")

CLASSIC_OPTIONAL: tuple[tuple[str, str], ...] = (
    ("api", "Will you need APIs?"),
    ("server", "Will you need a server?"),
    ("db", "Will you need a database?"),
)

EXTENDED_OPTIONAL: tuple[tuple[str, str], ...] = CLASSIC_OPTIONAL + (
    ("scripts", "Will you need scripts?"),
    ("test", "Will you need a test folder?"),
    ("init", "Will you need init/system configs?"),
    ("assets", "Will you need assets?"),
)


class FolderPlan(BaseModel):
    """Which subfolders a scaffold contains.

    ``mandatory`` folders are always created.  ``optional`` maps a folder
    name to the yes/no question that decides whether it is created; the
    questions are asked in insertion order.
    """

    mandatory: list[str] = Field(default_factory=lambda: list(CLASSIC_MANDATORY))
    optional: dict[str, str] = Field(default_factory=lambda: dict(CLASSIC_OPTIONAL))

    @model_validator(mode="after")
    def _check_names(self) -> "FolderPlan":
        seen: set[str] = {ENTRY_POINT_DIR}
        for name in [*self.mandatory, *self.optional]:
            if not name or name in (".", "..") or "/" in name or "\\" in name:
                raise ValueError(f"invalid folder name: {name!r}")
            if name in seen:
                raise ValueError(f"folder {name!r} appears more than once in the plan")
            seen.add(name)
        return self

    @classmethod
    def classic(cls) -> "FolderPlan":
        """The original layout: ``api``, ``server`` and ``db`` are optional."""
        return cls()

    @classmethod
    def extended(cls) -> "FolderPlan":
        """Classic layout plus ``scripts``, ``test``, ``init`` and ``assets``."""
        return cls(optional=dict(EXTENDED_OPTIONAL))

    @classmethod
    def for_layout(cls, layout: str) -> "FolderPlan":
        if layout == "extended":
            return cls.extended()
        return cls.classic()

    def all_folders(self) -> list[str]:
        """Every folder the plan can create, mandatory first."""
        return [*self.mandatory, *self.optional]


class ToolchainConfig(BaseModel):
    """The external dependency manager and the files it owns."""

    go_binary: str = Field(default="go", min_length=1)
    manifest_name: str = Field(default="go.mod", min_length=1)
    module_host: str = Field(default="github.com", min_length=1)
    source_extension: str = Field(default="go", min_length=1)
    manifest_in_root: bool = Field(
        default=True,
        description=(
            "Run `go mod init` inside the project root. When false the tool runs "
            "in the output directory and the manifest is moved into the root."
        ),
    )


class Config(BaseModel):
    """Global gonesis configuration.

    Created once by the CLI entry point and passed explicitly to the
    prompter and the generator.
    """

    output_dir: Path = Field(default=Path("."))
    layout: Literal["classic", "extended"] = Field(default="classic")
    folders: FolderPlan | None = Field(
        default=None,
        description="Explicit folder plan; derived from ``layout`` when omitted",
    )
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    gitkeep: bool = Field(default=True, description="Drop a .gitkeep into every created subfolder")
    empty_answer_is_yes: bool = Field(default=True)
    dir_mode: int = Field(default=0o775, ge=0, le=0o7777)
    file_mode: int = Field(default=0o755, ge=0, le=0o7777)

    @model_validator(mode="after")
    def _fill_folder_plan(self) -> "Config":
        if self.folders is None:
            self.folders = FolderPlan.for_layout(self.layout)
        return self

    @property
    def plan(self) -> FolderPlan:
        if self.folders is None:
            return FolderPlan.for_layout(self.layout)
        return self.folders

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        ``GONESIS_CONFIG`` names a JSON file used as the base; the remaining
        variables override individual fields on top of it:
            GONESIS_OUTPUT_DIR, GONESIS_LAYOUT, GONESIS_GO_BINARY,
            GONESIS_MODULE_HOST, GONESIS_MANIFEST_IN_ROOT, GONESIS_GITKEEP,
            GONESIS_EMPTY_IS_YES.
        """
        base: dict[str, Any] = {}
        if os.environ.get("GONESIS_CONFIG"):
            base = cls.load(Path(os.environ["GONESIS_CONFIG"])).model_dump()
            if os.environ.get("GONESIS_LAYOUT"):
                # The saved plan belongs to the saved layout.
                base["folders"] = None

        toolchain: dict[str, Any] = dict(base.get("toolchain") or {})
        if os.environ.get("GONESIS_GO_BINARY"):
            toolchain["go_binary"] = os.environ["GONESIS_GO_BINARY"]
        if os.environ.get("GONESIS_MODULE_HOST"):
            toolchain["module_host"] = os.environ["GONESIS_MODULE_HOST"]
        if os.environ.get("GONESIS_MANIFEST_IN_ROOT"):
            toolchain["manifest_in_root"] = _env_flag(os.environ["GONESIS_MANIFEST_IN_ROOT"])
        base["toolchain"] = toolchain

        if os.environ.get("GONESIS_OUTPUT_DIR"):
            base["output_dir"] = Path(os.environ["GONESIS_OUTPUT_DIR"])
        if os.environ.get("GONESIS_LAYOUT"):
            base["layout"] = os.environ["GONESIS_LAYOUT"]
        if os.environ.get("GONESIS_GITKEEP"):
            base["gitkeep"] = _env_flag(os.environ["GONESIS_GITKEEP"])
        if os.environ.get("GONESIS_EMPTY_IS_YES"):
            base["empty_answer_is_yes"] = _env_flag(os.environ["GONESIS_EMPTY_IS_YES"])

        return cls.model_validate(base)


def _env_flag(value: str) -> bool:
    """Interpret ``1/true/yes/on`` (any case) as true."""
    return value.strip().lower() in ("1", "true", "yes", "on")
