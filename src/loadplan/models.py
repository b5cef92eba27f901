"""Data models for tariff rates, devices and the day schedule."""

from dataclasses import dataclass, field
from typing import Iterator

from .errors import MissingSlotError

HOURS_PER_DAY = 24
MODE_DAY = "day"
MODE_NIGHT = "night"
MODES = (MODE_DAY, MODE_NIGHT)


@dataclass
class Rate:
    """A price applying to a range of hours (may wrap past midnight)."""

    from_hour: int
    to_hour: int
    price: float  # per kWh


@dataclass
class Device:
    """An appliance that must run for a number of consecutive hours."""

    id: str
    power: float  # watts
    duration: int  # hours
    mode: str | None = None  # 'day', 'night' or None for any
    name: str | None = None
    consumed_energy: float = 0.0


@dataclass(eq=False)
class Slot:
    """One hour of the day and everything scheduled in it."""

    hour: int
    price: float
    mode: str
    total_power: float = 0.0
    devices: list[Device] = field(default_factory=list)


class Schedule:
    """The 24 hourly slots of a day.

    Hours never written by a rate stay empty; reading one raises MissingSlotError.
    """

    def __init__(self) -> None:
        self._slots: list[Slot | None] = [None] * HOURS_PER_DAY

    def __getitem__(self, hour: int) -> Slot:
        slot = self._slots[hour]
        if slot is None:
            raise MissingSlotError(hour)
        return slot

    def __setitem__(self, hour: int, slot: Slot) -> None:
        self._slots[hour] = slot

    def __iter__(self) -> Iterator[Slot]:
        for hour in range(HOURS_PER_DAY):
            yield self[hour]

    def __len__(self) -> int:
        return HOURS_PER_DAY

    def missing_hours(self) -> list[int]:
        """Hours not populated by any rate."""
        return [hour for hour, slot in enumerate(self._slots) if slot is None]

    @staticmethod
    def next_hour(hour: int) -> int:
        return (hour + 1) % HOURS_PER_DAY


@dataclass
class Window:
    """A candidate run of slots for one device."""

    total_cost: float
    slots: list[Slot]


@dataclass
class PlanConfig:
    """Everything needed to plan a day."""

    max_power: float  # watts
    rates: list[Rate]
    devices: list[Device]


@dataclass
class PlanReport:
    """Per-hour device ids and energy totals for a planned day."""

    schedule: list[list[str]]
    total: float
    per_device: dict[str, float]

    def to_dict(self) -> dict:
        return {
            "schedule": [list(ids) for ids in self.schedule],
            "consumedEnergy": {
                "value": self.total,
                "devices": dict(self.per_device),
            },
        }
