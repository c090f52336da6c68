from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

KEY_REVENUE = "key_revenue"
KEY_DESSERTS_SOLD = "key_desserts_sold"
KEY_SECONDS_COUNT = "key_seconds_count"


def _non_negative(value: object, label: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"{label} must be a non-negative integer.")
    return value


@dataclass(frozen=True)
class Snapshot:
    """Counters captured from the progression engine."""
    revenue: int = 0
    desserts_sold: int = 0

    def __post_init__(self) -> None:
        _non_negative(self.revenue, "revenue")
        _non_negative(self.desserts_sold, "desserts_sold")

    def to_dict(self) -> Dict[str, int]:
        return {KEY_REVENUE: self.revenue, KEY_DESSERTS_SOLD: self.desserts_sold}

    @staticmethod
    def from_dict(d: Mapping[str, object]) -> "Snapshot":
        """Missing keys read as 0; anything but a non-negative int is rejected."""
        return Snapshot(
            revenue=d.get(KEY_REVENUE, 0),  # type: ignore[arg-type]
            desserts_sold=d.get(KEY_DESSERTS_SOLD, 0),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class InstanceState:
    """
    Everything the app keeps across recreation: the engine snapshot plus
    the timer's elapsed seconds, which the timer owns.
    """
    snapshot: Snapshot = field(default_factory=Snapshot)
    seconds_count: int = 0

    def __post_init__(self) -> None:
        _non_negative(self.seconds_count, "seconds_count")

    def to_dict(self) -> Dict[str, int]:
        payload = self.snapshot.to_dict()
        payload[KEY_SECONDS_COUNT] = self.seconds_count
        return payload

    @staticmethod
    def from_dict(d: Mapping[str, object]) -> "InstanceState":
        return InstanceState(
            snapshot=Snapshot.from_dict(d),
            seconds_count=d.get(KEY_SECONDS_COUNT, 0),  # type: ignore[arg-type]
        )
