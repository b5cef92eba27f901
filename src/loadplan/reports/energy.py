"""Energy report for a planned day."""

from decimal import ROUND_DOWN, Decimal

from ..models import Device, PlanReport, Schedule

# Float noise is rounded away at this precision before truncating
NOISE_DIGITS = 9


def truncate(value: float, digits: int = 3) -> float:
    """Truncate a value towards zero to `digits` decimal places."""
    exponent = Decimal(1).scaleb(-digits)
    cleaned = Decimal(repr(round(value, NOISE_DIGITS)))
    return float(cleaned.quantize(exponent, rounding=ROUND_DOWN))


def build_report(schedule: Schedule, devices: list[Device]) -> PlanReport:
    """Project the final schedule and device totals into a report.

    Hour lists keep the order devices were added. The total is the sum of
    the truncated per-device values.
    """
    hourly = [[device.id for device in slot.devices] for slot in schedule]

    per_device = {}
    total = 0.0
    for device in devices:
        consumed = truncate(device.consumed_energy)
        per_device[device.id] = consumed
        total += consumed

    return PlanReport(schedule=hourly, total=truncate(total), per_device=per_device)


def format_report_text(report: PlanReport) -> str:
    """Format the report as plain text."""
    lines = []
    for hour, ids in enumerate(report.schedule):
        lines.append(f"{hour:02d}:00  {', '.join(ids) if ids else '-'}")
    lines.append("")
    for device_id, consumed in report.per_device.items():
        lines.append(f"{device_id}: {consumed:.3f}")
    lines.append(f"Total: {report.total:.3f}")
    return "\n".join(lines)
