from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence


class CatalogError(ValueError):
    """Raised when a dessert catalog breaks its ordering rules."""


@dataclass(frozen=True)
class Dessert:
    """
    One sellable dessert tier.

    Fields:
        name: Display name, e.g. "cupcake".
        image: Opaque image reference (asset path) shown on the dessert button.
        price: Revenue earned per sale while this dessert is active (>= 0).
        start_production_amount: Sold count at which this dessert becomes active (>= 0).
    """
    name: str
    image: str
    price: int
    start_production_amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.price, int) or self.price < 0:
            raise ValueError("price must be a non-negative integer.")
        if not isinstance(self.start_production_amount, int) or self.start_production_amount < 0:
            raise ValueError("start_production_amount must be a non-negative integer.")

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "image": self.image,
            "price": self.price,
            "start_production_amount": self.start_production_amount,
        }


def validate_catalog(catalog: Sequence[Dessert]) -> None:
    """
    Check that a catalog is usable for threshold lookup.

    Rules:
      - at least one dessert
      - the first dessert starts at 0 sold
      - thresholds are strictly ascending

    Raises:
        CatalogError: if any rule is broken.
    """
    if not catalog:
        raise CatalogError("catalog must contain at least one dessert")
    if catalog[0].start_production_amount != 0:
        raise CatalogError("first dessert must start production at 0")
    for prev, cur in zip(catalog, catalog[1:]):
        if cur.start_production_amount <= prev.start_production_amount:
            raise CatalogError(
                f"{cur.name!r} starts at {cur.start_production_amount}, "
                f"not after {prev.name!r} ({prev.start_production_amount})"
            )


def select_tier_index(catalog: Sequence[Dessert], desserts_sold: int) -> int:
    """Index of the last dessert whose threshold has been reached."""
    index = 0
    for i, dessert in enumerate(catalog):
        if desserts_sold >= dessert.start_production_amount:
            index = i
        else:
            # sorted ascending; nothing later can qualify
            break
    return index
