# services/engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from kivy.logger import Logger

from models.dessert import Dessert, select_tier_index, validate_catalog
from models.snapshot import Snapshot
from services.settings import Settings


@dataclass(frozen=True)
class SaleResult:
    """Outcome of one sale, handed back to the UI."""
    revenue: int
    desserts_sold: int
    tier_changed: bool
    active_tier: Dessert


class ProgressionEngine:
    """
    Owns the sale counters and picks which dessert is on display.

    The active dessert is always the last catalog entry whose
    start_production_amount is <= desserts_sold. Observers registered with
    add_observer() are called after every sale and every restore.
    """

    def __init__(self, catalog: Sequence[Dessert]) -> None:
        validate_catalog(catalog)
        self._catalog: Tuple[Dessert, ...] = tuple(catalog)
        self.revenue = 0
        self.desserts_sold = 0
        self._active_index = 0
        self._observers: List[Callable[[], None]] = []

    @property
    def catalog(self) -> Tuple[Dessert, ...]:
        return self._catalog

    # --- Observers ---
    def add_observer(self, cb: Callable[[], None]) -> None:
        """Register a no-arg callback invoked after each mutation."""
        if cb not in self._observers:
            self._observers.append(cb)

    def _notify(self) -> None:
        for cb in list(self._observers):
            try:
                cb()
            except Exception:
                Logger.exception(f"{Settings.LOG_TAG}: observer {cb!r} failed")

    # --- Queries ---
    def current_tier(self) -> Dessert:
        return self._catalog[self._active_index]

    def snapshot(self) -> Snapshot:
        return Snapshot(revenue=self.revenue, desserts_sold=self.desserts_sold)

    # --- Mutations ---
    def record_sale(self) -> SaleResult:
        """
        Sell one dessert at the price of the dessert currently on display,
        then re-evaluate which dessert is active.

        Returns:
            SaleResult: new totals, the active dessert, and whether it changed
            so callers can skip redundant image updates.
        """
        self.revenue += self.current_tier().price
        self.desserts_sold += 1

        new_index = select_tier_index(self._catalog, self.desserts_sold)
        changed = new_index != self._active_index
        self._active_index = new_index
        if changed:
            Logger.debug(f"{Settings.LOG_TAG}: now producing {self.current_tier().name}")

        self._notify()
        return SaleResult(
            revenue=self.revenue,
            desserts_sold=self.desserts_sold,
            tier_changed=changed,
            active_tier=self.current_tier(),
        )

    def restore(self, snapshot: Snapshot) -> None:
        """
        Overwrite the counters with a previously captured snapshot.

        The active dessert is recomputed from the catalog; prior progress is
        discarded, not merged.
        """
        self.revenue = snapshot.revenue
        self.desserts_sold = snapshot.desserts_sold
        self._active_index = select_tier_index(self._catalog, self.desserts_sold)
        self._notify()


def sell_dessert(engine: ProgressionEngine, show_dessert: Callable[[Dessert], None]) -> SaleResult:
    """
    Handle one tap: record the sale and call show_dessert only when the
    dessert on display changed. Totals reach the UI through observers.
    """
    result = engine.record_sale()
    if result.tier_changed:
        show_dessert(result.active_tier)
    return result
