# backend/mechcare/domain/constants.py

from typing import Final

STATUS_HEALTHY: Final[str] = "Healthy"
STATUS_DUE_SOON: Final[str] = "DueSoon"
STATUS_OVERDUE: Final[str] = "Overdue"

SEVERITY_SUCCESS: Final[str] = "success"
SEVERITY_WARNING: Final[str] = "warning"
SEVERITY_DANGER: Final[str] = "danger"

# vadeden önce "yakında" sayılan gün sayısı (dahil)
DUE_SOON_WINDOW_DAYS: Final[int] = 7

HOURS_PER_DAY: Final[int] = 24

FULL_QUALITY: Final[int] = 100
