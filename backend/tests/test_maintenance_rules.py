from datetime import date, timedelta

import pytest

from mechcare.core.errors import ValidationFailure
from mechcare.domain import (
    coerce_date,
    coerce_interval,
    coerce_runtime_hours,
    compute_quality,
    derive_status,
    hours_to_days,
    last_service_date,
    next_maintenance_date,
    parse_date,
)

MACHINE = {"interval": 30, "lastMaintenance": "2024-01-01", "runtimeHours": 0}


# ---- status ----

def test_due_day_is_due_soon_with_zero_days():
    due = date(2024, 1, 1) + timedelta(days=30)
    s = derive_status(MACHINE, today=due)
    assert (s.status, s.daysOffset, s.severity) == ("DueSoon", 0, "warning")
    assert s.nextMaintenance == date(2024, 1, 31)

def test_day_after_due_is_overdue():
    s = derive_status(MACHINE, today=date(2024, 2, 1))
    assert (s.status, s.daysOffset, s.severity) == ("Overdue", 1, "danger")

def test_eight_days_before_due_is_healthy():
    s = derive_status(MACHINE, today=date(2024, 1, 23))
    assert (s.status, s.daysOffset, s.severity) == ("Healthy", 8, "success")

def test_seven_days_before_due_is_still_due_soon():
    s = derive_status(MACHINE, today=date(2024, 1, 24))
    assert (s.status, s.daysOffset) == ("DueSoon", 7)

def test_example_machine_on_january_31():
    s = derive_status({"interval": 30, "lastMaintenance": "2024-01-01"}, today=date(2024, 1, 31))
    assert s.status == "DueSoon"
    assert s.daysOffset == 0

@pytest.mark.parametrize("interval", [1, 7, 30, 365])
def test_boundaries_hold_for_any_interval(interval):
    m = {"interval": interval, "lastMaintenance": "2023-06-15"}
    due = next_maintenance_date(m)
    assert derive_status(m, today=due).status == "DueSoon"
    assert derive_status(m, today=due + timedelta(days=1)).daysOffset == 1
    assert derive_status(m, today=due - timedelta(days=8)).status == "Healthy"

def test_status_accepts_timestamp_last_maintenance():
    m = {"interval": 10, "lastMaintenance": "2024-03-01T08:30:00.000Z"}
    assert next_maintenance_date(m) == date(2024, 3, 11)


# ---- quality ----

def test_zero_runtime_is_full_quality():
    q = compute_quality({"interval": 30, "runtimeHours": 0})
    assert q.qualityPercent == 100
    assert q.needsMaintenance is False
    assert q.runtimeDays == 0

def test_missing_runtime_counts_as_zero():
    q = compute_quality({"interval": 30})
    assert q.qualityPercent == 100
    assert q.runtimeHours == 0

def test_runtime_equal_to_interval_needs_maintenance():
    q = compute_quality({"interval": 30, "runtimeHours": 30 * 24})
    assert q.qualityPercent == 0
    assert q.needsMaintenance is True

def test_half_used_interval():
    q = compute_quality({"interval": 10, "runtimeHours": 120})
    assert q.runtimeDays == 5
    assert q.qualityPercent == 50
    assert q.needsMaintenance is False

def test_quality_never_goes_negative():
    q = compute_quality({"interval": 1, "runtimeHours": 500})
    assert q.qualityPercent == 0
    assert q.needsMaintenance is True

def test_quality_rounds_half_up():
    # 3 days of 8 -> 62.5 %
    q = compute_quality({"interval": 8, "runtimeHours": 72})
    assert q.qualityPercent == 63

@pytest.mark.parametrize("interval", [0, -5])
def test_non_positive_interval_is_worn_out(interval):
    q = compute_quality({"interval": interval, "runtimeHours": 10})
    assert q.qualityPercent == 0
    assert q.needsMaintenance is True

def test_hours_to_days_two_decimals():
    assert hours_to_days(10) == 0.42
    assert hours_to_days(48) == 2


# ---- coercion ----

def test_coerce_interval_accepts_numeric_strings():
    assert coerce_interval("30") == 30
    assert coerce_interval(14.0) == 14

@pytest.mark.parametrize("bad", ["abc", "", None, 0, -1, 2.5, True])
def test_coerce_interval_rejects(bad):
    with pytest.raises(ValidationFailure):
        coerce_interval(bad)

def test_coerce_runtime_hours():
    assert coerce_runtime_hours("12.5") == 12.5
    with pytest.raises(ValidationFailure):
        coerce_runtime_hours("lots")
    with pytest.raises(ValidationFailure):
        coerce_runtime_hours(-1)
    with pytest.raises(ValidationFailure):
        coerce_runtime_hours(float("nan"))

def test_coerce_date():
    assert coerce_date("2024-02-29") == date(2024, 2, 29)
    assert coerce_date(date(2024, 1, 1)) == date(2024, 1, 1)
    with pytest.raises(ValidationFailure) as exc:
        coerce_date("31/01/2024", "lastMaintenance")
    assert exc.value.field == "lastMaintenance"

@pytest.mark.parametrize("value,expected", [
    ("2024-02-29", date(2024, 2, 29)),
    ("2024-03-01T08:30:00Z", date(2024, 3, 1)),
    (date(2024, 1, 1), date(2024, 1, 1)),
    ("01/05/2024", None),
    ("", None),
    (None, None),
    (20240101, None),
])
def test_parse_date(value, expected):
    assert parse_date(value) == expected


# ---- legacy service dates ----

def test_last_service_date_prefers_last_maintenance():
    m = {"lastMaintenance": "2024-02-01", "lastServiceDate": "2024-01-01"}
    assert last_service_date(m) == date(2024, 2, 1)

def test_last_service_date_falls_back_in_order():
    assert last_service_date({"lastMaintenance": "01/05/2024", "lastServiceDate": "2024-01-01"}) == date(2024, 1, 1)
    assert last_service_date({"createdDate": "2023-12-24T10:00:00.000Z"}) == date(2023, 12, 24)
    assert last_service_date({"lastMaintenance": "bad"}) is None

def test_status_of_machine_without_service_date_is_rejected():
    with pytest.raises(ValidationFailure):
        derive_status({"interval": 30}, date(2024, 1, 1))
