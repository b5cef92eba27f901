"""Selection of the slots a device may run in."""

from ..models import Device, Schedule, Slot


def select_slots(schedule: Schedule, device: Device) -> list[Slot]:
    """Return the slots matching the device's mode, in hour order.

    Slots of the same mode are treated as adjacent even when hours of the
    other mode lie between them. A device without a mode gets every slot.
    """
    if device.mode:
        return [slot for slot in schedule if slot.mode == device.mode]
    return list(schedule)
