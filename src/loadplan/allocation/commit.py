"""Recording a chosen window on the day schedule."""

from ..models import Device, Slot

WATTS_PER_KILOWATT = 1000


def commit(slots: list[Slot], device: Device) -> None:
    """Place the device in each slot and accumulate its energy cost."""
    for slot in slots:
        slot.total_power += device.power
        slot.devices.append(device)
        device.consumed_energy += device.power / WATTS_PER_KILOWATT * slot.price
