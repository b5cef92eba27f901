"""Greedy day planning: place each device in turn on the cheapest window."""

import logging

from .allocation.commit import commit
from .allocation.eligibility import select_slots
from .allocation.window import find_window
from .errors import InvalidDeviceError
from .models import MODES, Device, PlanConfig, PlanReport, Schedule
from .reports.energy import build_report
from .tariffs import build_day

logger = logging.getLogger(__name__)


def validate_devices(schedule: Schedule, devices: list[Device]) -> None:
    """Reject devices that could never be placed cleanly."""
    for device in devices:
        if device.duration < 1:
            raise InvalidDeviceError(device.id, f"duration must be at least 1 hour, got {device.duration}")
        if device.power < 0:
            raise InvalidDeviceError(device.id, f"power must not be negative, got {device.power}")
        if device.mode is not None and device.mode not in MODES:
            raise InvalidDeviceError(device.id, f"unknown mode {device.mode!r}")

        eligible = select_slots(schedule, device)
        if not eligible:
            raise InvalidDeviceError(device.id, f"no {device.mode} hours in the schedule")


def place_device(schedule: Schedule, device: Device, max_power: float) -> list[int]:
    """Allocate one device on the schedule. Returns the hours it was given."""
    device.consumed_energy = 0.0
    eligible = select_slots(schedule, device)
    window = find_window(eligible, device, max_power)
    commit(window, device)

    if not window:
        logger.warning(
            "Device %s (%s W for %d h) could not be placed under the %s W limit",
            device.id, device.power, device.duration, max_power,
        )
    return [slot.hour for slot in window]


def plan_day(config: PlanConfig) -> Schedule:
    """Build the day from the rates and place every device in input order.

    Each device sees the load left by the devices before it.
    """
    schedule = build_day(config.rates)
    validate_devices(schedule, config.devices)

    for device in config.devices:
        hours = place_device(schedule, device, config.max_power)
        if hours:
            logger.info("Device %s scheduled at hours %s", device.id, hours)

    return schedule


def run_plan(config: PlanConfig) -> tuple[Schedule, PlanReport]:
    """Plan the day and build its energy report."""
    schedule = plan_day(config)
    return schedule, build_report(schedule, config.devices)
