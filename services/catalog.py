# services/catalog.py
"""
The dessert catalog, in the order desserts start being produced.

Built once at import time and never mutated afterwards.
"""

from typing import Final, Tuple

from models.dessert import Dessert, validate_catalog
from services.settings import asset_path


def _dessert(name: str, price: int, start: int) -> Dessert:
    return Dessert(name=name, image=asset_path(name), price=price, start_production_amount=start)


ALL_DESSERTS: Final[Tuple[Dessert, ...]] = (
    _dessert("cupcake", 5, 0),
    _dessert("donut", 10, 5),
    _dessert("eclair", 15, 20),
    _dessert("froyo", 30, 50),
    _dessert("gingerbread", 50, 100),
    _dessert("honeycomb", 100, 200),
    _dessert("icecreamsandwich", 500, 500),
    _dessert("jellybean", 1000, 1000),
    _dessert("kitkat", 2000, 2000),
    _dessert("lollipop", 3000, 4000),
    _dessert("marshmallow", 4000, 8000),
    _dessert("nougat", 5000, 16000),
    _dessert("oreo", 6000, 20000),
)

validate_catalog(ALL_DESSERTS)
