# backend/mechcare/schemas/log.py
import datetime as dt
from typing import Optional
from pydantic import BaseModel

class LogCreate(BaseModel):
    machineId: str
    notes: Optional[str] = ""
    date: Optional[dt.date] = None
