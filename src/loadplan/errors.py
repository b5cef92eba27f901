"""Exceptions raised while loading a plan or building a day schedule."""


class LoadPlanError(Exception):
    """Base exception for load planning errors."""
    pass


class ConfigError(LoadPlanError):
    """The plan input file is malformed."""
    pass


class ScheduleCoverageError(LoadPlanError):
    """One or more hours of the day are not covered by any rate."""

    def __init__(self, missing_hours: list[int]):
        self.missing_hours = list(missing_hours)
        hours = ", ".join(str(h) for h in self.missing_hours)
        super().__init__(f"No rate covers hour(s): {hours}")


class MissingSlotError(LoadPlanError):
    """An unpopulated hour of the schedule was accessed."""

    def __init__(self, hour: int):
        self.hour = hour
        super().__init__(f"No slot for hour {hour}: not covered by any rate")


class InvalidDeviceError(LoadPlanError):
    """A device can never be placed on the schedule."""

    def __init__(self, device_id: str, reason: str):
        self.device_id = device_id
        self.reason = reason
        super().__init__(f"Invalid device {device_id}: {reason}")
