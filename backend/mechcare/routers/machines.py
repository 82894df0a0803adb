# backend/mechcare/routers/machines.py
import datetime as dt
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query

from mechcare.schemas.machine import MachineCreate, MachineUpdate, RuntimeIn, MachineHealthOut
from mechcare.services.repository import Repository, get_repository

router = APIRouter(prefix="/machines", tags=["machines"])

@router.get("", response_model=List[dict])
def list_machines_ep(repo: Repository = Depends(get_repository)):
    return repo.list_machines()

@router.post("", status_code=201)
def create_machine_ep(body: MachineCreate, repo: Repository = Depends(get_repository)):
    return repo.create_machine(body.model_dump())

@router.get("/{machine_id}")
def get_machine_ep(machine_id: str = Path(...), repo: Repository = Depends(get_repository)):
    return repo.get_machine(machine_id)

@router.put("/{machine_id}")
def update_machine_ep(body: MachineUpdate, machine_id: str = Path(...), repo: Repository = Depends(get_repository)):
    # sadece istemcinin gönderdiği alanlar
    return repo.update_machine(machine_id, body.model_dump(exclude_unset=True))

@router.delete("/{machine_id}")
def delete_machine_ep(machine_id: str = Path(...), repo: Repository = Depends(get_repository)):
    removed = repo.delete_machine(machine_id)
    return {"message": "Machine deleted successfully", "id": machine_id, "deletedLogs": removed}

@router.get("/{machine_id}/logs", response_model=List[dict])
def list_machine_logs_ep(machine_id: str = Path(...), repo: Repository = Depends(get_repository)):
    return repo.list_logs_for_machine(machine_id)

@router.post("/{machine_id}/runtime")
def add_runtime_ep(body: RuntimeIn, machine_id: str = Path(...), repo: Repository = Depends(get_repository)):
    return repo.accumulate_runtime(machine_id, body.hours)

@router.get("/{machine_id}/health", response_model=MachineHealthOut)
def machine_health_ep(
    machine_id: str = Path(...),
    today: Optional[dt.date] = Query(None, description="YYYY-MM-DD, defaults to the server date"),
    repo: Repository = Depends(get_repository),
):
    return repo.machine_health(machine_id, today)
