"""Exceptions raised while scaffolding a project.

Every failure is fatal: the CLI catches ``ScaffoldError``, prints its
message and exits.  Nothing created before the failure is removed.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails irrecoverably."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        self.message = message
        super().__init__(message)


class InvalidProjectNameError(ScaffoldError):
    """The project name contains characters outside ``[A-Za-z0-9_-]``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "project name",
            "the project name can contain only alphanumeric characters, _ and -",
        )


class FilesystemError(ScaffoldError):
    """A directory or file could not be created or written."""

    def __init__(self, path: object, error: OSError) -> None:
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__("filesystem", f"{path}: {reason}")


class ManifestError(ScaffoldError):
    """The dependency manager could not create the manifest."""

    def __init__(self, message: str, detail: str = "") -> None:
        self.detail = detail
        super().__init__("manifest", message)
