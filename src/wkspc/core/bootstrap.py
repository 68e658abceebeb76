"""Workspace metadata bootstrap.

Creates the fixed layout under the marker directory, one idempotent step at
a time, recording each path in the configuration store before the step
touches the disk.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wkspc.core.exceptions import WkspcError
from wkspc.core.layout import BOOTSTRAP_STEPS, Key, derive_paths
from wkspc.core.models import BootstrapResult, StepKind, StepOutcome


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from wkspc.core.models import BootstrapStep
    from wkspc.core.ports import ConfigStorePort, FilesystemPort

logger = logging.getLogger(__name__)


def _ensure(fs: FilesystemPort, path: Path, kind: StepKind) -> bool:
    if kind is StepKind.FILE:
        return fs.create_file_if_not_exists(path)
    return fs.create_directory_if_not_exists(path)


def _fail(
    result: BootstrapResult, step: str, path: Path, error: Exception
) -> BootstrapResult:
    logger.warning("Bootstrap step %s failed for %s: %s", step, path, error)
    result.failed_step = step
    result.failed_path = path
    result.error = error
    return result


def bootstrap(
    root: Path,
    *,
    marker: str,
    store: ConfigStorePort,
    fs: FilesystemPort,
    steps: Sequence[BootstrapStep] = BOOTSTRAP_STEPS,
) -> BootstrapResult:
    """Create the workspace metadata layout under root.

    The root itself is created first (if missing), then steps run in order.
    The first failure stops the run and is reported in the result; nothing
    already created is removed and keys of later steps keep their previous
    values.

    Args:
        root: Workspace root directory.
        marker: Marker directory name.
        store: Configuration store receiving each derived path.
        fs: Filesystem adapter doing the creation.
        steps: Ordered steps to run.

    Returns:
        BootstrapResult listing completed steps and any failure.
    """
    result = BootstrapResult(root=root)
    paths = derive_paths(root, marker, steps)

    store.set(Key.ROOT_DIR, str(root))
    try:
        _ensure(fs, root, StepKind.DIRECTORY)
    except (WkspcError, OSError) as e:
        return _fail(result, "root", root, e)

    for step in steps:
        path = paths[step.name]
        store.set(step.key, str(path))

        try:
            created = _ensure(fs, path, step.kind)
        except (WkspcError, OSError) as e:
            return _fail(result, step.name, path, e)

        if created:
            logger.info("Created %s", path)
        result.completed.append(StepOutcome(step=step, path=path, created=created))

    logger.debug(
        "Bootstrapped %s (%d of %d entries created)",
        root,
        len(result.created),
        len(result.completed),
    )
    return result


def record(
    root: Path | None,
    *,
    marker: str,
    store: ConfigStorePort,
    steps: Sequence[BootstrapStep] = BOOTSTRAP_STEPS,
) -> None:
    """Write root and every derived path key without touching the disk.

    A None root clears the cached root and all derived keys to "".
    """
    if root is None:
        store.set(Key.ROOT_DIR, "")
        for step in steps:
            store.set(step.key, "")
        return

    paths = derive_paths(root, marker, steps)
    store.set(Key.ROOT_DIR, str(root))
    for step in steps:
        store.set(step.key, str(paths[step.name]))
