"""Domain exceptions for wkspc.

All library errors inherit from WkspcError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Not finding a workspace is not an error: resolution returns None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class WkspcError(Exception):
    """Base class for all wkspc exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class WorkingDirectoryError(WkspcError):
    """Raised when the current working directory cannot be determined.

    Attributes:
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest passing an explicit start directory."""
        return "The current directory may have been removed; cd somewhere valid or pass a start path"


class WorkspaceIOError(WkspcError):
    """Raised when an unexpected filesystem error occurs.

    Attributes:
        path: The path being inspected or created.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions on the path."""
        return f"Check permissions and free space for: {self.path}"


class BootstrapError(WkspcError):
    """Raised when a workspace bootstrap step fails.

    Steps that ran before the failure are left in place; every step is
    idempotent so the bootstrap can simply be re-run.

    Attributes:
        step: Name of the step that failed (e.g. "log_dir").
        path: The path the step was creating.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        step: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.step = step
        self.path = path
        self.cause = cause
        message = f"Workspace bootstrap failed at step '{step}' ({path})"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Explain that re-running is safe."""
        return (
            f"Fix the problem with {self.path} and run set-root again; "
            "completed steps are skipped"
        )


class ConfigurationError(WkspcError):
    """Raised for configuration problems (unknown or read-only settings)."""

    pass
