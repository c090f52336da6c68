from __future__ import annotations

from kivy.logger import Logger
from kivy.metrics import dp
from kivy.uix.behaviors import ButtonBehavior
from kivy.uix.image import Image
from kivymd.toast import toast
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.label import MDLabel
from kivymd.uix.screen import MDScreen
from kivymd.uix.toolbar import MDTopAppBar

from services.engine import ProgressionEngine, sell_dessert
from services.settings import Settings
from services.share import share_summary


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------
def show_toast(msg: str) -> None:
    """Toast a short message and mirror it to the log."""
    Logger.info(f"{Settings.LOG_TAG}: toast: {msg}")
    toast(msg)


# ---------------------------------------------------------------------------
# DessertButton (tap to sell)
# ---------------------------------------------------------------------------
class DessertButton(ButtonBehavior, Image):
    """The dessert picture; every press is one sale."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.size_hint = (1, 1)


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------
class DessertScreen(MDScreen):
    """
    Single game screen: top bar with a share action, the dessert button,
    and the revenue / amount sold readouts.
    """

    def __init__(self, engine: ProgressionEngine, **kwargs) -> None:
        super().__init__(**kwargs)
        self.engine = engine

        root = MDBoxLayout(orientation="vertical")
        self.toolbar = MDTopAppBar(
            title="Dessert Clicker",
            right_action_items=[["share-variant", lambda *_: self.on_share(), Settings.SHARE_TITLE]],
        )
        root.add_widget(self.toolbar)

        self.dessert_button = DessertButton(source=engine.current_tier().image)
        self.dessert_button.bind(on_release=lambda *_: self.on_dessert_clicked())
        root.add_widget(self.dessert_button)

        self.dessert_label = MDLabel(halign="center", size_hint_y=None, height=dp(32))
        root.add_widget(self.dessert_label)

        stats = MDBoxLayout(orientation="horizontal", size_hint_y=None, height=dp(64), padding=dp(16))
        self.amount_sold_label = MDLabel(halign="left", font_style="H6")
        self.revenue_label = MDLabel(halign="right", font_style="H5")
        stats.add_widget(self.amount_sold_label)
        stats.add_widget(self.revenue_label)
        root.add_widget(stats)

        self.add_widget(root)
        engine.add_observer(self.refresh)
        self.refresh()
        self.show_current_dessert()

    # ---- UI sync ----
    def refresh(self) -> None:
        """Update the revenue and amount sold text."""
        self.amount_sold_label.text = f"{self.engine.desserts_sold} sold"
        self.revenue_label.text = f"${self.engine.revenue}"

    def show_current_dessert(self) -> None:
        tier = self.engine.current_tier()
        self.dessert_button.source = tier.image
        self.dessert_label.text = f"{tier.name.capitalize()} • ${tier.price}"

    # ---- actions ----
    def on_dessert_clicked(self) -> None:
        sell_dessert(self.engine, lambda _tier: self.show_current_dessert())

    def on_share(self) -> None:
        if not share_summary(self.engine.desserts_sold, self.engine.revenue):
            show_toast(Settings.SHARING_NOT_AVAILABLE)
