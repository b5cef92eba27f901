"""Tests for the energy report."""

import pytest

from loadplan.allocation.commit import commit
from loadplan.models import Device, Rate
from loadplan.reports.energy import build_report, format_report_text, truncate
from loadplan.tariffs import build_day


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.23456, 1.234),
        (1.2349, 1.234),
        (3.0, 3.0),
        (0.1 + 0.2, 0.3),
        (2.9999999999999996, 3.0),
        (0.0, 0.0),
    ],
)
def test_truncate(value, expected):
    assert truncate(value) == expected


def _planned():
    schedule = build_day([Rate(0, 23, 1.234)])
    a = Device("A", 1000, 2)
    b = Device("B", 500, 1)
    commit([schedule[0], schedule[1]], a)
    commit([schedule[1]], b)
    return schedule, [a, b]


def test_report_lists_devices_per_hour():
    schedule, devices = _planned()
    report = build_report(schedule, devices)

    assert len(report.schedule) == 24
    assert report.schedule[0] == ["A"]
    assert report.schedule[1] == ["A", "B"]
    assert report.schedule[2] == []


def test_report_totals_use_truncated_values():
    schedule, devices = _planned()
    report = build_report(schedule, devices)

    # A: 1 kW * 1.234 * 2 = 2.468, B: 0.5 kW * 1.234 = 0.617
    assert report.per_device == {"A": 2.468, "B": 0.617}
    assert report.total == 3.085


def test_report_is_idempotent():
    schedule, devices = _planned()

    assert build_report(schedule, devices) == build_report(schedule, devices)
    assert schedule[1].total_power == 1500


def test_report_dict_shape():
    schedule, devices = _planned()
    data = build_report(schedule, devices).to_dict()

    assert set(data) == {"schedule", "consumedEnergy"}
    assert data["consumedEnergy"]["devices"] == {"A": 2.468, "B": 0.617}
    assert data["consumedEnergy"]["value"] == 3.085


def test_report_text():
    schedule, devices = _planned()
    text = format_report_text(build_report(schedule, devices))

    assert "01:00  A, B" in text
    assert "02:00  -" in text
    assert "Total: 3.085" in text
