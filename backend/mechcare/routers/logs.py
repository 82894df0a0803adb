# backend/mechcare/routers/logs.py
from fastapi import APIRouter, Depends, Path

from mechcare.schemas.log import LogCreate
from mechcare.services.repository import Repository, get_repository

router = APIRouter(prefix="/logs", tags=["logs"])

@router.post("", status_code=201)
def create_log_ep(body: LogCreate, repo: Repository = Depends(get_repository)):
    # makinenin lastMaintenance tarihini ileri alabilir
    return repo.create_log(body.model_dump())

@router.delete("/{log_id}")
def delete_log_ep(log_id: str = Path(...), repo: Repository = Depends(get_repository)):
    repo.delete_log(log_id)
    return {"message": "Log deleted successfully", "id": log_id}
