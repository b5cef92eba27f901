"""Cheapest-window search for a single device."""

import logging

from ..models import Device, Slot, Window

logger = logging.getLogger(__name__)


def candidate_window(
    eligible: list[Slot], start: int, device: Device, max_power: float
) -> Window | None:
    """Build the window starting at `start`, or None if it is not feasible.

    Feasibility is judged on the slot right after the window: its current
    load plus the device's power must stay strictly below max_power.
    """
    end = start + device.duration
    if end >= len(eligible):
        return None

    boundary = eligible[end]
    if boundary.total_power + device.power >= max_power:
        return None

    slots = eligible[start:end]
    return Window(total_cost=sum(slot.price for slot in slots), slots=slots)


def find_window(eligible: list[Slot], device: Device, max_power: float) -> list[Slot]:
    """Find the cheapest feasible run of `device.duration` eligible slots.

    If the device needs exactly as many hours as it has eligible slots, all of
    them are returned without a power check. Ties go to the earliest window.
    Returns an empty list when no window is feasible.
    """
    if device.duration == len(eligible):
        return list(eligible)

    best: Window | None = None
    for start in range(len(eligible) - device.duration):
        window = candidate_window(eligible, start, device, max_power)
        if window is None:
            continue
        if best is None or window.total_cost < best.total_cost:
            best = window

    if best is None:
        return []

    logger.debug(
        "Device %s: cheapest window hours %s (cost %.3f)",
        device.id, [slot.hour for slot in best.slots], best.total_cost,
    )
    return best.slots
