# services/settings.py
"""
Configuration constants for the dessert clicker.

Holds the timer cadence, the instance-state file name, desktop window size,
theme and the user-facing share/toast strings. Pure Python and
dependency-free so it can be imported from models, services and UI alike.
"""

from typing import Final, Tuple


class Settings:
    """Namespace container for app configuration. Not meant to be instantiated."""

    LOG_TAG: Final[str] = "DessertClicker"

    # Timer
    TIMER_INTERVAL_S: Final[float] = 1.0      # One tick per second

    # Instance state
    STATE_FILE_NAME: Final[str] = "instance_state.json"
    FALLBACK_DATA_DIR: Final[str] = ".userdata"  # Used when no App is running

    # Window / theme
    DESKTOP_WINDOW_SIZE: Final[Tuple[int, int]] = (420, 780)
    THEME_STYLE: Final[str] = "Light"
    PRIMARY_PALETTE: Final[str] = "Pink"
    ASSET_DIR: Final[str] = "assets/desserts"

    # Share
    SHARE_TEXT: Final[str] = "I've clicked {sold} Desserts for a total of ${revenue} #DessertClicker"
    SHARE_TITLE: Final[str] = "Share"
    SHARING_NOT_AVAILABLE: Final[str] = "Sharing Not Available"

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is not instantiable")


def asset_path(name: str) -> str:
    """
    Image reference for a dessert by name.

    Examples:
        >>> asset_path("cupcake")
        'assets/desserts/cupcake.png'
    """
    return f"{Settings.ASSET_DIR}/{name}.png"
