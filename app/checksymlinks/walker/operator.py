"""Symbolic link removal operator.

Removes single symbolic links and reports the outcome of every
attempt as a result object instead of raising.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LinkActionResult:
    """Result of a single link removal.

    Attributes:
        path: Path that was operated on.
        success: Whether the link was removed.
        error: Error message if the removal failed, None otherwise.
    """

    path: str
    success: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the removal failed."""
        return not self.success


class LinkOperator:
    """Handles removal of symbolic links.

    Only symbolic links are ever removed. The link itself is unlinked,
    its target is left untouched.
    """

    def remove(self, path: str) -> LinkActionResult:
        """Remove a single symbolic link.

        Args:
            path: Path of the link to remove.

        Returns:
            LinkActionResult indicating success or failure.
        """
        target = Path(path)

        if not target.is_symlink():
            # Vanished or replaced since it was listed
            return LinkActionResult(
                path=path,
                success=False,
                error=f"Not a symbolic link: {path}",
            )

        try:
            target.unlink()
        except OSError as e:
            return LinkActionResult(path=path, success=False, error=str(e))

        logger.debug("Unlinked %s", path)
        return LinkActionResult(path=path, success=True)
