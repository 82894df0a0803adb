from .maintenance import (
    StatusInfo,
    QualityInfo,
    coerce_interval,
    coerce_runtime_hours,
    coerce_date,
    parse_date,
    last_service_date,
    hours_to_days,
    next_maintenance_date,
    derive_status,
    compute_quality,
)
__all__ = ["StatusInfo","QualityInfo","coerce_interval","coerce_runtime_hours","coerce_date","parse_date","last_service_date",
           "hours_to_days","next_maintenance_date","derive_status","compute_quality"]
