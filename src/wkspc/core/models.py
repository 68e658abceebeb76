"""Core domain models for wkspc.

These models are pure Python dataclasses with no I/O dependencies.
They describe settings metadata, the resolved workspace layout and the
outcome of a bootstrap run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Visibility(Enum):
    """Who a setting is meant for (controls listing in `wkspc settings`)."""

    INTERNAL_USE = "internal"
    EXPERT_USE = "expert"
    NORMAL_USE = "normal"


class Mutability(Enum):
    """Which layers may change a setting.

    - CONST_GLOBAL: registered default only, never changed afterwards.
    - INTERNAL_GLOBAL: default, then written by this package.
    - BASIC_GLOBAL: default, environment, then explicit writes.
    """

    CONST_GLOBAL = "const"
    INTERNAL_GLOBAL = "internal"
    BASIC_GLOBAL = "basic"


class StepKind(Enum):
    """What a bootstrap step creates on disk."""

    DIRECTORY = "dir"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class Setting:
    """Registration metadata for a configuration key.

    Attributes:
        key: Exact key spelling, part of the persisted configuration surface.
        default: Default string value.
        description: Human-readable description.
        visibility: Intended audience.
        mutability: Which layers may override the default.
    """

    key: str
    default: str = ""
    description: str = ""
    visibility: Visibility = Visibility.INTERNAL_USE
    mutability: Mutability = Mutability.INTERNAL_GLOBAL


@dataclass(frozen=True, slots=True)
class WorkspaceContext:
    """Typed view of a workspace root and the paths derived from it.

    All paths are None when there is no workspace, and all are set once a
    root is known.
    """

    root: Path | None = None
    meta_dir: Path | None = None
    log_dir: Path | None = None
    tmp_dir: Path | None = None
    vcs_dir: Path | None = None
    vcs_data_dir: Path | None = None
    static_file: Path | None = None
    db_dir: Path | None = None
    db_file: Path | None = None

    @property
    def exists(self) -> bool:
        """True when a root is set."""
        return self.root is not None


@dataclass(frozen=True, slots=True)
class BootstrapStep:
    """One idempotent step of the workspace bootstrap.

    Attributes:
        name: Field name in WorkspaceContext and step identifier.
        key: Configuration key the resulting path is recorded under.
        parent: Name of the step (or "root") whose path this one sits under.
        item: Path component under the parent; None means the marker name.
        kind: Whether a directory or an empty file is created.
    """

    name: str
    key: str
    parent: str
    item: str | None
    kind: StepKind = StepKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of a single completed bootstrap step."""

    step: BootstrapStep
    path: Path
    created: bool


@dataclass(slots=True)
class BootstrapResult:
    """Outcome of a bootstrap run.

    Attributes:
        root: The root that was bootstrapped.
        completed: Steps that finished, in order.
        failed_step: Name of the step that raised ("root" for the root
            directory itself), or None on success.
        failed_path: The path the failed step was working on.
        error: The exception raised by the failed step.
    """

    root: Path
    completed: list[StepOutcome] = field(default_factory=list)
    failed_step: str | None = None
    failed_path: Path | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True when every step completed."""
        return self.failed_step is None

    @property
    def created(self) -> list[Path]:
        """Paths that did not exist before this run."""
        return [outcome.path for outcome in self.completed if outcome.created]

    def raise_for_failure(self) -> None:
        """Raise BootstrapError if a step failed, otherwise do nothing."""
        from wkspc.core.exceptions import BootstrapError

        if self.failed_step is None:
            return
        raise BootstrapError(
            self.failed_step,
            self.failed_path if self.failed_path is not None else self.root,
            cause=self.error,
        ) from self.error
