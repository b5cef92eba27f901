"""Expansion of tariff rates into the hourly slots of a day."""

import logging

from .errors import ScheduleCoverageError
from .models import HOURS_PER_DAY, MODE_DAY, MODE_NIGHT, Rate, Schedule, Slot

logger = logging.getLogger(__name__)

LAST_HOUR = HOURS_PER_DAY - 1


def rate_mode(rate: Rate) -> str:
    """Day/night label implied by a rate's hour range."""
    if rate.from_hour > rate.to_hour or rate.from_hour >= LAST_HOUR:
        return MODE_NIGHT
    return MODE_DAY


def rate_hours(rate: Rate) -> list[int]:
    """Hours written by a rate, in write order.

    A range wrapping past midnight (e.g. 21 -> 7) covers
    24 - (from - to) hours starting at from; a plain range is inclusive.
    """
    if rate.from_hour > rate.to_hour:
        count = HOURS_PER_DAY - (rate.from_hour - rate.to_hour)
    else:
        count = rate.to_hour - rate.from_hour + 1

    hours = []
    hour = rate.from_hour
    for _ in range(count):
        hours.append(hour)
        hour = Schedule.next_hour(hour)
    return hours


def check_coverage(schedule: Schedule) -> None:
    """Raise ScheduleCoverageError if any hour has no slot."""
    missing = schedule.missing_hours()
    if missing:
        raise ScheduleCoverageError(missing)


def build_day(rates: list[Rate], strict: bool = True) -> Schedule:
    """Build the day schedule from rates.

    Rates are applied in order and a later rate replaces an earlier one at
    the same hour. With strict=True every hour must end up covered.
    """
    schedule = Schedule()
    for rate in rates:
        mode = rate_mode(rate)
        hours = rate_hours(rate)
        for hour in hours:
            schedule[hour] = Slot(hour=hour, price=rate.price, mode=mode)
        logger.debug(
            "Rate %s-%s (%s) at %.3f covers %d hour(s)",
            rate.from_hour, rate.to_hour, mode, rate.price, len(hours),
        )

    if strict:
        check_coverage(schedule)
    return schedule
