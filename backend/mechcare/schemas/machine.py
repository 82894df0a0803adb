# backend/mechcare/schemas/machine.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# ---- Makineler ----
class MachineCreate(BaseModel):
    name: str
    userName: Optional[str] = ""
    mobileNumber: Optional[str] = ""
    type: Optional[str] = None
    interval: int = Field(..., gt=0, description="Days between services")
    runtimeHours: float = Field(default=0, ge=0)
    lastMaintenance: Optional[date] = None
    # eski istemcilerin form alan adı
    lastServiceDate: Optional[date] = None

class MachineUpdate(BaseModel):
    # yüzeysel birleştirme: bilinmeyen alanlar olduğu gibi yazılır
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    userName: Optional[str] = None
    mobileNumber: Optional[str] = None
    type: Optional[str] = None
    interval: Optional[int] = Field(default=None, gt=0)
    runtimeHours: Optional[float] = Field(default=None, ge=0)
    lastMaintenance: Optional[date] = None

class RuntimeIn(BaseModel):
    hours: float = Field(..., ge=0)

class MachineHealthOut(BaseModel):
    machineId: str
    status: str
    daysOffset: int
    severity: str
    nextMaintenance: date
    qualityPercent: int
    runtimeHours: float
    runtimeDays: float
    needsMaintenance: bool
