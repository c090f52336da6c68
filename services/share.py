# services/share.py
"""
Compose the score summary and hand it to the platform share sheet.

Only Android has a share sheet here: the text goes out as an ACTION_SEND
intent wrapped in a chooser, built through pyjnius. Other platforms report
sharing as unavailable.
"""

from __future__ import annotations

from kivy.logger import Logger
from kivy.utils import platform

from services.settings import Settings

ACTIVITY_NOT_FOUND = "android.content.ActivityNotFoundException"


def share_text(desserts_sold: int, revenue: int) -> str:
    """
    Human-readable score summary.

    Examples:
        >>> share_text(3, 15)
        "I've clicked 3 Desserts for a total of $15 #DessertClicker"
    """
    return Settings.SHARE_TEXT.format(sold=desserts_sold, revenue=revenue)


def _send_android_intent(text: str) -> bool:
    """Start a text/plain chooser; False if no activity can take it."""
    from jnius import JavaException, autoclass, cast

    PythonActivity = autoclass("org.kivy.android.PythonActivity")
    Intent = autoclass("android.content.Intent")
    String = autoclass("java.lang.String")

    intent = Intent()
    intent.setAction(Intent.ACTION_SEND)
    intent.setType("text/plain")
    intent.putExtra(Intent.EXTRA_TEXT, cast("java.lang.CharSequence", String(text)))
    chooser = Intent.createChooser(intent, cast("java.lang.CharSequence", String(Settings.SHARE_TITLE)))
    try:
        PythonActivity.mActivity.startActivity(chooser)
    except JavaException as exc:
        if getattr(exc, "classname", None) != ACTIVITY_NOT_FOUND:
            raise
        Logger.warning(f"{Settings.LOG_TAG}: no activity handles the share intent")
        return False
    return True


def share_summary(desserts_sold: int, revenue: int) -> bool:
    """
    Share the summary as plain text.

    Returns:
        bool: False when nothing on this platform can receive the text.
    """
    if platform != "android":
        Logger.warning(f"{Settings.LOG_TAG}: sharing is not supported on {platform}")
        return False
    if not _send_android_intent(share_text(desserts_sold, revenue)):
        return False
    Logger.info(f"{Settings.LOG_TAG}: shared summary")
    return True
