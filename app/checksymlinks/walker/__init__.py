"""Directory walking and symbolic link classification.

This module provides the tree walker, the per-entry visitor, the link
removal operator, and the models they produce.
"""

from checksymlinks.walker.models import (
    EntryType,
    LinkPolicy,
    LinkStatus,
    RunCounters,
    RunReport,
    VisitRecord,
)
from checksymlinks.walker.operator import LinkActionResult, LinkOperator
from checksymlinks.walker.traverser import (
    EntryStatError,
    LinkChecker,
    RootAccessError,
    RootNotFoundError,
    TreeAccessError,
    WalkError,
    resolve_link,
    visit_entry,
    walk_tree,
)

__all__ = [
    "EntryStatError",
    "EntryType",
    "LinkActionResult",
    "LinkChecker",
    "LinkOperator",
    "LinkPolicy",
    "LinkStatus",
    "RootAccessError",
    "RootNotFoundError",
    "RunCounters",
    "RunReport",
    "TreeAccessError",
    "VisitRecord",
    "WalkError",
    "resolve_link",
    "visit_entry",
    "walk_tree",
]
