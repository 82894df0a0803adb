# backend/mechcare/routers/data.py
from typing import Any
from fastapi import APIRouter, Body, Depends

from mechcare.services.repository import Repository, get_repository

router = APIRouter(prefix="/data", tags=["data"])

@router.get("")
def export_data_ep(repo: Repository = Depends(get_repository)):
    return repo.export_data()

@router.post("")
def import_data_ep(payload: Any = Body(...), repo: Repository = Depends(get_repository)):
    # olduğu gibi üzerine yaz; sadece {machines, logs} şekli kontrol edilir
    data = repo.import_data(payload)
    return {
        "message": "Data saved successfully",
        "machines": len(data["machines"]),
        "logs": len(data["logs"]),
    }
