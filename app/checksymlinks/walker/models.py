"""Walker domain models for symbolic link auditing.

This module defines the data structures produced and mutated while
walking a directory tree: entry types, deletion policies, per-entry
visit records, run counters, and the final run report.
"""

import stat
from dataclasses import dataclass, field
from enum import Enum


class EntryType(str, Enum):
    """Type of a visited filesystem entry, determined without following links.

    Attributes:
        DIRECTORY: Directory (never a symlink to one).
        FILE: Regular file.
        SYMLINK: Symbolic link, valid or broken.
        OTHER: Anything else (fifo, socket, device node).
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        """Classify an ``st_mode`` value as returned by ``lstat``."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


class LinkPolicy(str, Enum):
    """What to do with symbolic links found during the walk.

    Attributes:
        REPORT: Only classify and count links.
        DELETE_BROKEN: Remove links whose target cannot be resolved.
        DELETE_ALL: Remove every link without classifying it.
    """

    REPORT = "report"
    DELETE_BROKEN = "delete_broken"
    DELETE_ALL = "delete_all"


class LinkStatus(str, Enum):
    """Classification of a visited symbolic link.

    Attributes:
        VALID: Target chain resolves to an existing entry.
        BROKEN: Target chain cannot be resolved.
        UNCHECKED: Not classified (removed under the delete-all policy).
    """

    VALID = "valid"
    BROKEN = "broken"
    UNCHECKED = "unchecked"


@dataclass(frozen=True, slots=True)
class VisitRecord:
    """Outcome of visiting a single filesystem entry.

    Attributes:
        path: Path relative to the walk root (e.g., "sub/link").
        entry_type: Type of the entry, determined with ``lstat``.
        link_status: Classification for symlinks, None for other entries.
        resolved_path: Final target of a valid link, None otherwise.
        error: Resolution or removal error message, None if there was none.
        removed: Whether the link was removed during this visit.
    """

    path: str
    entry_type: EntryType
    link_status: LinkStatus | None = None
    resolved_path: str | None = None
    error: str | None = None
    removed: bool = False

    def __post_init__(self) -> None:
        """Validate visit record data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.entry_type != EntryType.SYMLINK and self.link_status is not None:
            msg = f"Only symlinks carry a link status, got {self.entry_type.value}"
            raise ValueError(msg)

    @property
    def is_link(self) -> bool:
        """Check if this record describes a symbolic link."""
        return self.entry_type == EntryType.SYMLINK

    @property
    def is_broken(self) -> bool:
        """Check if this record describes a broken symbolic link."""
        return self.link_status == LinkStatus.BROKEN


@dataclass(slots=True)
class RunCounters:
    """Counters accumulated over a single run.

    Created once per run and passed explicitly to every visit. Values
    only ever increase.

    Attributes:
        inspected: Symbolic links visited.
        removed: Links successfully removed.
        broken: Links whose target could not be resolved.
        errors: Recoverable failures (removal errors).
    """

    inspected: int = 0
    removed: int = 0
    broken: int = 0
    errors: int = 0

    def summary_rows(self) -> list[tuple[str, int]]:
        """Return (label, value) pairs in report order."""
        return [
            ("inspected links:", self.inspected),
            ("removed links:", self.removed),
            ("broken links:", self.broken),
            ("errors:", self.errors),
        ]


@dataclass(frozen=True, slots=True)
class RunReport:
    """Final result of a completed run.

    Attributes:
        root: Root directory as given by the user.
        policy: Deletion policy that was applied.
        counters: Counters accumulated during the walk.
        removed_paths: Root-relative paths of the links removed, in walk order.
        elapsed_seconds: Wall-clock duration of the run.
    """

    root: str
    policy: LinkPolicy
    counters: RunCounters = field(default_factory=RunCounters)
    removed_paths: tuple[str, ...] = ()
    elapsed_seconds: float = 0.0
