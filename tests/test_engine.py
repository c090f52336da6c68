"""
Tests for ProgressionEngine: sale accounting, dessert selection, and
snapshot / restore.
"""

import pytest

from models.dessert import CatalogError, Dessert
from models.snapshot import Snapshot
from services.catalog import ALL_DESSERTS
from services.engine import ProgressionEngine, sell_dessert


def _sell(engine, n):
    return [engine.record_sale() for _ in range(n)]


class TestInitialState:
    def test_starts_at_zero_with_first_dessert(self, engine, three_tier_catalog):
        assert engine.revenue == 0
        assert engine.desserts_sold == 0
        assert engine.current_tier() == three_tier_catalog[0]

    def test_rejects_unsorted_catalog(self, three_tier_catalog):
        cupcake, donut, eclair = three_tier_catalog
        with pytest.raises(CatalogError):
            ProgressionEngine((cupcake, eclair, donut))

    def test_rejects_empty_catalog(self):
        with pytest.raises(CatalogError):
            ProgressionEngine(())


class TestRecordSale:
    def test_first_five_sales_reach_donut(self, engine, three_tier_catalog):
        results = _sell(engine, 5)

        assert engine.desserts_sold == 5
        assert engine.revenue == 25
        assert [r.tier_changed for r in results] == [False, False, False, False, True]
        assert results[-1].active_tier == three_tier_catalog[1]
        assert engine.current_tier() == three_tier_catalog[1]

    def test_each_sale_uses_price_of_dessert_on_display(self, engine, three_tier_catalog):
        _sell(engine, 20)

        # 5 cupcakes, then 15 donuts; the 20th sale flips to eclair afterwards
        assert engine.desserts_sold == 20
        assert engine.revenue == 5 * 5 + 15 * 10
        assert engine.current_tier() == three_tier_catalog[2]

        result = engine.record_sale()
        assert result.revenue == 175 + 15
        assert result.tier_changed is False

    def test_result_mirrors_engine_totals(self, engine):
        result = engine.record_sale()
        assert (result.revenue, result.desserts_sold) == (engine.revenue, engine.desserts_sold)

    @pytest.mark.parametrize("n", [0, 1, 4, 5, 19, 20, 57])
    def test_revenue_is_sum_of_prices_at_time_of_sale(self, engine, n):
        expected = 0
        for _ in range(n):
            expected += engine.current_tier().price
            engine.record_sale()
        assert engine.desserts_sold == n
        assert engine.revenue == expected

    def test_current_tier_is_last_reached_threshold(self):
        engine = ProgressionEngine(ALL_DESSERTS)
        for _ in range(1000):
            engine.record_sale()
            reached = [d for d in ALL_DESSERTS if d.start_production_amount <= engine.desserts_sold]
            assert engine.current_tier() == reached[-1]

    def test_free_dessert_still_counts_sale(self):
        engine = ProgressionEngine((Dessert("water", "water.png", 0, 0),))
        engine.record_sale()
        assert engine.desserts_sold == 1
        assert engine.revenue == 0


class TestSnapshotRestore:
    def test_snapshot_is_idempotent(self, engine):
        _sell(engine, 7)
        assert engine.snapshot() == engine.snapshot()
        assert engine.snapshot() == Snapshot(revenue=45, desserts_sold=7)

    def test_restore_to_zero_resets_dessert(self, engine, three_tier_catalog):
        _sell(engine, 25)
        engine.restore(Snapshot(revenue=0, desserts_sold=0))

        assert engine.revenue == 0
        assert engine.desserts_sold == 0
        assert engine.current_tier() == three_tier_catalog[0]

    def test_restore_depends_only_on_snapshot(self, three_tier_catalog):
        fresh = ProgressionEngine(three_tier_catalog)
        used = ProgressionEngine(three_tier_catalog)
        _sell(used, 30)

        snap = Snapshot(revenue=123, desserts_sold=12)
        fresh.restore(snap)
        used.restore(snap)

        assert fresh.current_tier() == used.current_tier() == three_tier_catalog[1]
        assert fresh.snapshot() == used.snapshot() == snap

    def test_sales_continue_from_restored_counters(self, engine, three_tier_catalog):
        engine.restore(Snapshot(revenue=100, desserts_sold=19))
        result = engine.record_sale()

        assert result.revenue == 110
        assert result.desserts_sold == 20
        assert result.tier_changed is True
        assert result.active_tier == three_tier_catalog[2]


class TestObservers:
    def test_observer_called_on_sale_and_restore(self, engine):
        calls = []
        engine.add_observer(lambda: calls.append(engine.desserts_sold))

        engine.record_sale()
        engine.restore(Snapshot(revenue=0, desserts_sold=0))

        assert calls == [1, 0]

    def test_observer_registered_once(self, engine):
        calls = []

        def cb():
            calls.append(1)

        engine.add_observer(cb)
        engine.add_observer(cb)
        engine.record_sale()
        assert calls == [1]

    def test_failing_observer_does_not_block_others(self, engine):
        calls = []

        def boom():
            raise RuntimeError("boom")

        engine.add_observer(boom)
        engine.add_observer(lambda: calls.append(1))
        result = engine.record_sale()

        assert calls == [1]
        assert result.desserts_sold == 1


class TestSellDessert:
    def test_shows_dessert_only_when_it_changes(self, engine, three_tier_catalog):
        shown = []
        for _ in range(21):
            sell_dessert(engine, shown.append)

        assert shown == [three_tier_catalog[1], three_tier_catalog[2]]
        assert engine.desserts_sold == 21

    def test_returns_sale_result(self, engine):
        result = sell_dessert(engine, lambda _tier: None)
        assert result.desserts_sold == 1
        assert result.tier_changed is False
