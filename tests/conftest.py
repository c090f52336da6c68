"""
Shared pytest configuration for the dessert clicker tests.

Kivy reads sys.argv and configures console logging on import, so the
environment is prepared here before any test module imports it. No window
is ever created.
"""

from __future__ import annotations

import os

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import pytest

from models.dessert import Dessert


@pytest.fixture
def three_tier_catalog():
    """cupcake 5$ from 0, donut 10$ from 5, eclair 15$ from 20."""
    return (
        Dessert(name="cupcake", image="cupcake.png", price=5, start_production_amount=0),
        Dessert(name="donut", image="donut.png", price=10, start_production_amount=5),
        Dessert(name="eclair", image="eclair.png", price=15, start_production_amount=20),
    )


@pytest.fixture
def engine(three_tier_catalog):
    from services.engine import ProgressionEngine

    return ProgressionEngine(three_tier_catalog)
