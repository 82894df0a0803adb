# backend/mechcare/domain/maintenance.py
import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ..core.errors import ValidationFailure
from .constants import (
    DUE_SOON_WINDOW_DAYS,
    FULL_QUALITY,
    HOURS_PER_DAY,
    SEVERITY_DANGER,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    STATUS_DUE_SOON,
    STATUS_HEALTHY,
    STATUS_OVERDUE,
)


class StatusInfo(BaseModel):
    status: str
    daysOffset: int
    severity: str
    nextMaintenance: date


class QualityInfo(BaseModel):
    qualityPercent: int
    runtimeHours: float
    runtimeDays: float
    needsMaintenance: bool


# ---- Dönüştürme (sessiz NaN/0 yerine açık hata) ----

def _to_number(value: Any, field: str) -> float:
    if isinstance(value, bool) or value is None:
        raise ValidationFailure(field, "must be a number")
    if isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            raise ValidationFailure(field, f"not a number: {value!r}")
    else:
        raise ValidationFailure(field, "must be a number")
    if not math.isfinite(num):
        raise ValidationFailure(field, "must be finite")
    return num


def parse_interval(value: Any) -> int:
    num = _to_number(value, "interval")
    if not num.is_integer():
        raise ValidationFailure("interval", "must be a whole number of days")
    return int(num)


def coerce_interval(value: Any) -> int:
    interval = parse_interval(value)
    if interval <= 0:
        raise ValidationFailure("interval", "must be greater than 0")
    return interval


def coerce_runtime_hours(value: Any, field: str = "runtimeHours") -> float:
    hours = _to_number(value, field)
    if hours < 0:
        raise ValidationFailure(field, "must not be negative")
    return hours


def parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        s = value.strip()
        try:
            return date.fromisoformat(s)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    return None


def coerce_date(value: Any, field: str = "date") -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise ValidationFailure(field, f"not an ISO date: {value!r}")
    return parsed


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---- Türetilen değerler ----

def hours_to_days(hours: float) -> float:
    return round(hours / HOURS_PER_DAY, 2)


def last_service_date(machine: Mapping[str, Any]) -> Optional[date]:
    # eski kayıtlar: lastServiceDate, o da yoksa oluşturma tarihi
    for key in ("lastMaintenance", "lastServiceDate", "createdDate"):
        parsed = parse_date(machine.get(key))
        if parsed is not None:
            return parsed
    return None


def next_maintenance_date(machine: Mapping[str, Any]) -> date:
    last = last_service_date(machine)
    if last is None:
        raise ValidationFailure("lastMaintenance", "no usable service date")
    return last + timedelta(days=parse_interval(machine.get("interval")))


def derive_status(machine: Mapping[str, Any], today: Optional[date] = None) -> StatusInfo:
    today = today or date.today()
    next_due = next_maintenance_date(machine)
    # iki taraf da takvim günü: fark zaten tam gün
    diff_days = (next_due - today).days

    if diff_days < 0:
        return StatusInfo(status=STATUS_OVERDUE, daysOffset=abs(diff_days),
                          severity=SEVERITY_DANGER, nextMaintenance=next_due)
    if diff_days <= DUE_SOON_WINDOW_DAYS:
        return StatusInfo(status=STATUS_DUE_SOON, daysOffset=diff_days,
                          severity=SEVERITY_WARNING, nextMaintenance=next_due)
    return StatusInfo(status=STATUS_HEALTHY, daysOffset=diff_days,
                      severity=SEVERITY_SUCCESS, nextMaintenance=next_due)


def compute_quality(machine: Mapping[str, Any]) -> QualityInfo:
    hours = coerce_runtime_hours(machine.get("runtimeHours") or 0)
    interval = parse_interval(machine.get("interval"))
    runtime_days = hours_to_days(hours)

    # interval <= 0 sadece içe aktarılan veriden gelir: yıpranmış say
    if interval <= 0:
        return QualityInfo(qualityPercent=0, runtimeHours=hours,
                           runtimeDays=runtime_days, needsMaintenance=True)

    quality = float(FULL_QUALITY)
    if runtime_days > 0:
        quality = max(0.0, FULL_QUALITY - (runtime_days / interval * FULL_QUALITY))

    return QualityInfo(
        qualityPercent=int(math.floor(quality + 0.5)),  # yarımı yukarı yuvarla
        runtimeHours=hours,
        runtimeDays=runtime_days,
        needsMaintenance=runtime_days >= interval,
    )
