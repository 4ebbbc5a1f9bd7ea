"""Directory traversal and symbolic link classification.

Walks a directory tree depth-first in lexical order without following
symbolic links, classifies every link as valid or broken, and applies
the configured deletion policy. Counters are passed explicitly to the
per-entry visitor; nothing is kept in module state.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from checksymlinks.utils.formatting import format_elapsed
from checksymlinks.walker.models import (
    EntryType,
    LinkPolicy,
    LinkStatus,
    RunCounters,
    RunReport,
    VisitRecord,
)
from checksymlinks.walker.operator import LinkOperator

if TYPE_CHECKING:
    from checksymlinks.core.config import RunConfig

logger = logging.getLogger(__name__)

WALK_START = Path(".")


class WalkError(Exception):
    """Base exception for errors that abort the whole run."""


class RootNotFoundError(WalkError):
    """Raised when the root directory does not exist."""


class RootAccessError(WalkError):
    """Raised when the root directory cannot be stat'ed or entered."""


class TreeAccessError(WalkError):
    """Raised when a directory in the tree cannot be listed."""


class EntryStatError(WalkError):
    """Raised when an entry cannot be stat'ed."""


def walk_tree(start: Path = WALK_START) -> Iterator[tuple[Path, EntryType]]:
    """Walk a tree depth-first in lexical order, not following links.

    The start entry is yielded first, then every entry below it. A
    symbolic link to a directory is yielded as a link and not descended
    into.

    Args:
        start: Entry to start from.

    Yields:
        (path, entry type) for every entry, each exactly once.

    Raises:
        EntryStatError: If an entry cannot be stat'ed.
        TreeAccessError: If a directory cannot be listed.
    """
    stack: list[Path] = [start]

    while stack:
        path = stack.pop()
        try:
            mode = path.lstat().st_mode
        except OSError as e:
            raise EntryStatError(f"Could not get stat for {path}: {e}") from e

        entry_type = EntryType.from_mode(mode)
        yield path, entry_type

        if entry_type != EntryType.DIRECTORY:
            continue

        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            raise TreeAccessError(f"Failure accessing a path {str(path)!r}: {e}") from e

        # Reversed so the lexically smallest child is popped first
        stack.extend(path / name for name in reversed(names))


def resolve_link(path: Path) -> str:
    """Follow a link and any chain of links to its final target.

    Args:
        path: Symbolic link to resolve.

    Returns:
        Absolute path of the final target.

    Raises:
        OSError: If the target is missing or inaccessible.
        RuntimeError: If the chain loops (raised by pathlib before 3.13).
    """
    return str(path.resolve(strict=True))


def visit_entry(
    path: Path,
    entry_type: EntryType,
    counters: RunCounters,
    config: RunConfig,
    operator: LinkOperator,
) -> VisitRecord:
    """Classify a single entry and apply the deletion policy to links.

    Args:
        path: Entry path relative to the walk root.
        entry_type: Type of the entry as determined by ``lstat``.
        counters: Run counters, updated in place.
        config: Run configuration providing the policy.
        operator: Operator used to remove links.

    Returns:
        VisitRecord describing what happened to the entry.
    """
    path_str = str(path)

    if entry_type == EntryType.DIRECTORY:
        logger.debug('visited dir: "%s"', path_str)
        return VisitRecord(path=path_str, entry_type=entry_type)

    if entry_type != EntryType.SYMLINK:
        return VisitRecord(path=path_str, entry_type=entry_type)

    counters.inspected += 1
    policy = config.policy

    if policy == LinkPolicy.DELETE_ALL:
        logger.info("Remove link %s", path_str)
        return _remove(path_str, LinkStatus.UNCHECKED, counters, operator)

    try:
        resolved = resolve_link(path)
    except (OSError, RuntimeError) as e:
        counters.broken += 1
        logger.warning("broken link %s: %s", path_str, e)
        if policy != LinkPolicy.DELETE_BROKEN:
            return VisitRecord(
                path=path_str,
                entry_type=entry_type,
                link_status=LinkStatus.BROKEN,
                error=str(e),
            )
        logger.info("Remove broken link %s", path_str)
        return _remove(path_str, LinkStatus.BROKEN, counters, operator)

    logger.debug("symlink %s OK", resolved)
    return VisitRecord(
        path=path_str,
        entry_type=entry_type,
        link_status=LinkStatus.VALID,
        resolved_path=resolved,
    )


def _remove(
    path: str,
    status: LinkStatus,
    counters: RunCounters,
    operator: LinkOperator,
) -> VisitRecord:
    """Remove a link and record the outcome in the counters."""
    result = operator.remove(path)
    if result.failed:
        counters.errors += 1
        logger.error("Could not remove %s: %s", path, result.error)
        return VisitRecord(
            path=path,
            entry_type=EntryType.SYMLINK,
            link_status=status,
            error=result.error,
        )

    counters.removed += 1
    return VisitRecord(
        path=path,
        entry_type=EntryType.SYMLINK,
        link_status=status,
        removed=True,
    )


class LinkChecker:
    """Runs a complete walk over a root directory.

    Args:
        config: Validated run configuration.
        operator: Operator used to remove links. Defaults to LinkOperator().
    """

    def __init__(self, config: RunConfig, operator: LinkOperator | None = None) -> None:
        self._config = config
        self._operator = operator or LinkOperator()

    def check(self, counters: RunCounters) -> Iterator[VisitRecord]:
        """Visit every entry below the current directory.

        Args:
            counters: Run counters, updated in place.

        Yields:
            VisitRecord for each entry, in walk order.

        Raises:
            WalkError: If the tree itself cannot be walked.
        """
        for path, entry_type in walk_tree(WALK_START):
            yield visit_entry(path, entry_type, counters, self._config, self._operator)

    def run(self) -> RunReport:
        """Change into the root directory, walk it, and log the summary.

        Returns:
            RunReport with the final counters and elapsed time.

        Raises:
            RootNotFoundError: If the root directory does not exist.
            RootAccessError: If the root cannot be stat'ed or entered.
            WalkError: If the tree cannot be walked.
        """
        started = time.perf_counter()
        root = self._config.root

        try:
            root.stat()
        except (FileNotFoundError, NotADirectoryError) as e:
            raise RootNotFoundError(f"Path {root} does not exist") from e
        except OSError as e:
            raise RootAccessError(f"Could not access root-dir {root}: {e}") from e

        try:
            os.chdir(root)
        except OSError as e:
            raise RootAccessError(f"Could not change to root-dir {root}: {e}") from e
        logger.debug("root dir: %s", root)

        counters = RunCounters()
        removed = [record.path for record in self.check(counters) if record.removed]

        report = RunReport(
            root=str(root),
            policy=self._config.policy,
            counters=counters,
            removed_paths=tuple(removed),
            elapsed_seconds=time.perf_counter() - started,
        )
        log_summary(report)
        return report


def log_summary(report: RunReport) -> None:
    """Log the four run counters and the execution time."""
    for label, value in report.counters.summary_rows():
        logger.info("%-16s %d", label, value)
    logger.info("Execution time: %s", format_elapsed(report.elapsed_seconds))
