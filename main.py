# main.py
from __future__ import annotations

from kivy.core.window import Window
from kivy.logger import Logger
from kivy.utils import platform
from kivymd.app import MDApp
from kivymd.uix.screenmanager import MDScreenManager

from services.catalog import ALL_DESSERTS
from services.engine import ProgressionEngine
from services.instance_state import InstanceStateKeeper
from services.persistence import Persistence
from services.settings import Settings
from services.timer import DessertTimer
from ui.components import DessertScreen


class DessertClickerApp(MDApp):
    title = "Dessert Clicker"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.engine = ProgressionEngine(ALL_DESSERTS)
        self.timer = DessertTimer()
        self.keeper: InstanceStateKeeper | None = None
        self.sm: MDScreenManager | None = None

    # ---------- App lifecycle ----------
    def build(self):
        self.theme_cls.theme_style = Settings.THEME_STYLE
        self.theme_cls.primary_palette = Settings.PRIMARY_PALETTE
        if platform not in ("android", "ios"):
            Window.size = Settings.DESKTOP_WINDOW_SIZE

        # user_data_dir is only meaningful once the app exists
        self.keeper = InstanceStateKeeper(self.engine, self.timer, Persistence())
        self.keeper.restore()

        self.sm = MDScreenManager()
        self.sm.add_widget(DessertScreen(self.engine, name="dessert"))
        self.sm.current = "dessert"
        Logger.info(f"{Settings.LOG_TAG}: build called")
        return self.sm

    def on_start(self):
        Logger.info(f"{Settings.LOG_TAG}: on_start called")
        self.timer.start()

    def on_resume(self):
        Logger.info(f"{Settings.LOG_TAG}: on_resume called")
        self.timer.start()

    def on_pause(self):
        self.timer.stop()
        if self.keeper is not None:
            self.keeper.save()
        Logger.info(f"{Settings.LOG_TAG}: on_pause called")
        return True

    def on_stop(self):
        self.timer.stop()
        if self.keeper is not None:
            self.keeper.clear()
        Logger.info(f"{Settings.LOG_TAG}: on_stop called")


if __name__ == "__main__":
    DessertClickerApp().run()
