"""Workspace layout: configuration keys and the derived path table.

Key spellings are part of the persisted configuration surface read by other
tooling, so they must not change.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from wkspc.core.models import (
    BootstrapStep,
    Mutability,
    Setting,
    StepKind,
    Visibility,
)


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class Key(StrEnum):
    """Configuration keys owned by the workspace package."""

    META_DIR_NAME = "wkspcMetaDirName"
    ROOT_DIR = "wkspcRootDir"
    META_DIR = "wkspcMetaDir"
    LOG_DIR = "wkspcLogDir"
    TMP_DIR = "wkspcTmpDir"
    VCS_DIR = "wkspcVCSDir"
    VCS_DATA_DIR = "wkspcVCSDataDir"
    STATIC_FILE = "wkspcStaticDvln"
    DB_DIR = "wkspcDBDir"
    DB_FILE = "wkspcDB"


DEFAULT_MARKER = ".dvln"

# Cached root value meaning "not resolved yet"; "" means "resolved, no workspace".
ROOT_UNSET = "none"

STATIC_FILE_NAME = "static.dvln"
DB_FILE_NAME = "wkspc.db"

# Ordered: each step's parent must come earlier in the tuple.
BOOTSTRAP_STEPS: tuple[BootstrapStep, ...] = (
    BootstrapStep("meta_dir", Key.META_DIR, parent="root", item=None),
    BootstrapStep("log_dir", Key.LOG_DIR, parent="meta_dir", item="log"),
    BootstrapStep("tmp_dir", Key.TMP_DIR, parent="meta_dir", item="tmp"),
    BootstrapStep("vcs_dir", Key.VCS_DIR, parent="meta_dir", item="vcs"),
    BootstrapStep("vcs_data_dir", Key.VCS_DATA_DIR, parent="vcs_dir", item="wkspc"),
    BootstrapStep(
        "static_file",
        Key.STATIC_FILE,
        parent="vcs_data_dir",
        item=STATIC_FILE_NAME,
        kind=StepKind.FILE,
    ),
    BootstrapStep("db_dir", Key.DB_DIR, parent="meta_dir", item="db"),
    BootstrapStep(
        "db_file",
        Key.DB_FILE,
        parent="db_dir",
        item=DB_FILE_NAME,
        kind=StepKind.FILE,
    ),
)


def _derived_setting(key: Key, relpath: str, kind: str = "dir") -> Setting:
    return Setting(
        key=key,
        default="",
        description=f"the {relpath} {kind} under the workspace root dir, empty if no root",
        visibility=Visibility.INTERNAL_USE,
        mutability=Mutability.INTERNAL_GLOBAL,
    )


WORKSPACE_SETTINGS: tuple[Setting, ...] = (
    Setting(
        key=Key.META_DIR_NAME,
        default=DEFAULT_MARKER,
        description="name of dir under wkspc root where workspace metadata lives",
        visibility=Visibility.INTERNAL_USE,
        mutability=Mutability.CONST_GLOBAL,
    ),
    Setting(
        key=Key.ROOT_DIR,
        default=ROOT_UNSET,
        description="the workspace root directory, if one exists",
        visibility=Visibility.INTERNAL_USE,
        mutability=Mutability.INTERNAL_GLOBAL,
    ),
    _derived_setting(Key.META_DIR, DEFAULT_MARKER),
    _derived_setting(Key.LOG_DIR, f"{DEFAULT_MARKER}/log"),
    _derived_setting(Key.TMP_DIR, f"{DEFAULT_MARKER}/tmp"),
    _derived_setting(Key.VCS_DIR, f"{DEFAULT_MARKER}/vcs"),
    _derived_setting(Key.VCS_DATA_DIR, f"{DEFAULT_MARKER}/vcs/wkspc"),
    _derived_setting(
        Key.STATIC_FILE, f"{DEFAULT_MARKER}/vcs/wkspc/{STATIC_FILE_NAME}", "file"
    ),
    _derived_setting(Key.DB_DIR, f"{DEFAULT_MARKER}/db"),
    _derived_setting(Key.DB_FILE, f"{DEFAULT_MARKER}/db/{DB_FILE_NAME}", "file"),
)


def derive_paths(
    root: Path,
    marker: str,
    steps: Sequence[BootstrapStep] = BOOTSTRAP_STEPS,
) -> dict[str, Path]:
    """Map each step name (plus "root") to its path under root.

    Args:
        root: Workspace root directory.
        marker: Marker directory name, used for steps with no item.
        steps: Ordered steps; parents must precede children.

    Returns:
        Dict of step name to path, in step order.
    """
    paths: dict[str, Path] = {"root": root}
    for step in steps:
        item = marker if step.item is None else step.item
        paths[step.name] = paths[step.parent] / item
    return paths
