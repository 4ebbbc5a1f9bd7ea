"""Theme management for checksymlinks output.

Provides the color scheme used by the Rich consoles and log handler.
"""

from pydantic import BaseModel, ConfigDict
from rich.theme import Theme


class ThemeColors(BaseModel):
    """Color configuration for checksymlinks output.

    Defaults are hex codes; unknown color names are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    # Base colors
    muted: str = "#b2bec3"

    # Semantic colors
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. If None, uses the defaults.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = ThemeColors()

    styles: dict[str, str] = {
        "muted": colors.muted,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
        # Log level styles used by RichHandler
        "logging.level.debug": colors.muted,
        "logging.level.info": colors.info,
        "logging.level.warning": colors.warning,
        "logging.level.error": f"bold {colors.error}",
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, building and caching it if necessary.

    Returns:
        Cached Rich Theme instance.
    """
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
