# backend/mechcare/services/repository.py
from __future__ import annotations

import logging
import threading
import uuid
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request

from mechcare.core.errors import NotFoundError, ValidationFailure
from mechcare.core.store import Dataset, JsonFileStore
from mechcare.domain.maintenance import (
    coerce_date,
    coerce_interval,
    coerce_runtime_hours,
    compute_quality,
    derive_status,
    parse_date,
    utc_now_iso,
)

logger = logging.getLogger(__name__)

# create/update gövdesinden asla alınmaz
MACHINE_READONLY_FIELDS = ("id", "createdDate")

# veri dosyası başına tek yazar: aynı yolu kullanan tüm Repository nesneleri aynı kilidi paylaşır
_dataset_locks: Dict[str, threading.RLock] = {}
_dataset_locks_guard = threading.Lock()


def dataset_lock(path: str) -> threading.RLock:
    with _dataset_locks_guard:
        lock = _dataset_locks.get(path)
        if lock is None:
            lock = _dataset_locks[path] = threading.RLock()
        return lock


def _new_id() -> str:
    return uuid.uuid4().hex


def _find(items: List[Dict[str, Any]], item_id: str) -> Optional[int]:
    for i, item in enumerate(items):
        if item.get("id") == item_id:
            return i
    return None


class Repository:
    """Machine/log CRUD; her işlem kilit altında load -> değiştir -> save."""

    def __init__(self, store: JsonFileStore):
        self.store = store
        self._lock = dataset_lock(store.path)

    # -------- Makineler --------
    def list_machines(self) -> List[Dict[str, Any]]:
        with self._lock:
            return self.store.load()["machines"]

    def get_machine(self, machine_id: str) -> Dict[str, Any]:
        with self._lock:
            data = self.store.load()
            return self._machine_or_404(data, machine_id)

    def create_machine(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        last = payload.get("lastMaintenance") or payload.get("lastServiceDate")
        runtime = payload.get("runtimeHours")
        machine = {
            "id": _new_id(),
            "name": payload.get("name"),
            "userName": payload.get("userName") or "",
            "mobileNumber": payload.get("mobileNumber") or "",
            "type": payload.get("type"),
            "interval": coerce_interval(payload.get("interval")),
            "runtimeHours": coerce_runtime_hours(runtime) if runtime is not None else 0.0,
            "lastMaintenance": coerce_date(last, "lastMaintenance").isoformat() if last else date.today().isoformat(),
            "createdDate": utc_now_iso(),
        }
        with self._lock:
            data = self.store.load()
            data["machines"].append(machine)
            self.store.save(data)
        logger.info("Machine created id=%s name=%r", machine["id"], machine["name"])
        return machine

    def update_machine(self, machine_id: str, patch: Mapping[str, Any]) -> Dict[str, Any]:
        changes = {k: v for k, v in patch.items() if k not in MACHINE_READONLY_FIELDS}
        if "interval" in changes:
            changes["interval"] = coerce_interval(changes["interval"])
        if "runtimeHours" in changes:
            changes["runtimeHours"] = coerce_runtime_hours(changes["runtimeHours"])
        if "lastMaintenance" in changes:
            changes["lastMaintenance"] = coerce_date(changes["lastMaintenance"], "lastMaintenance").isoformat()

        with self._lock:
            data = self.store.load()
            machine = self._machine_or_404(data, machine_id)
            machine.update(changes)
            self.store.save(data)
        logger.info("Machine updated id=%s fields=%s", machine_id, sorted(changes))
        return machine

    def delete_machine(self, machine_id: str) -> int:
        """Makineyi ve kayıtlarını siler; silinen kayıt sayısını döner."""
        with self._lock:
            data = self.store.load()
            idx = _find(data["machines"], machine_id)
            if idx is None:
                raise NotFoundError("Machine", machine_id)
            del data["machines"][idx]
            kept = [log for log in data["logs"] if log.get("machineId") != machine_id]
            removed = len(data["logs"]) - len(kept)
            data["logs"] = kept
            self.store.save(data)
        logger.info("Machine deleted id=%s logs_removed=%d", machine_id, removed)
        return removed

    def accumulate_runtime(self, machine_id: str, additional_hours: Any) -> Dict[str, Any]:
        hours = coerce_runtime_hours(additional_hours, "hours")
        with self._lock:
            data = self.store.load()
            machine = self._machine_or_404(data, machine_id)
            current = coerce_runtime_hours(machine.get("runtimeHours") or 0)
            machine["runtimeHours"] = current + hours
            self.store.save(data)
        return machine

    def machine_health(self, machine_id: str, today: Optional[date] = None) -> Dict[str, Any]:
        machine = self.get_machine(machine_id)
        status = derive_status(machine, today)
        quality = compute_quality(machine)
        return {
            "machineId": machine_id,
            **status.model_dump(mode="json"),
            **quality.model_dump(mode="json"),
        }

    # -------- Kayıtlar (log) --------
    def list_logs_for_machine(self, machine_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            logs = [log for log in self.store.load()["logs"] if log.get("machineId") == machine_id]
        # kararlı sıralama: aynı tarih ekleme sırasını korur; okunamayan tarih en sona
        return sorted(logs, key=lambda log: parse_date(log.get("date")) or date.min, reverse=True)

    def create_log(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        machine_id = payload.get("machineId")
        if not machine_id:
            raise ValidationFailure("machineId", "is required")
        log_date = coerce_date(payload["date"]) if payload.get("date") else date.today()
        log = {
            "id": _new_id(),
            "machineId": str(machine_id),
            "notes": payload.get("notes") or "",
            "date": log_date.isoformat(),
            "timestamp": utc_now_iso(),
        }
        with self._lock:
            data = self.store.load()
            data["logs"].append(log)

            # daha yeni bakım kaydı makinenin son bakım tarihini ileri alır;
            # okunamayan eski tarih de ilerletilir
            idx = _find(data["machines"], log["machineId"])
            if idx is not None:
                machine = data["machines"][idx]
                last = parse_date(machine.get("lastMaintenance"))
                if last is None or log_date > last:
                    machine["lastMaintenance"] = log["date"]
                    logger.info("Machine %s lastMaintenance -> %s", machine["id"], log["date"])
            else:
                logger.warning("Log %s references unknown machine %s", log["id"], log["machineId"])

            self.store.save(data)
        return log

    def delete_log(self, log_id: str) -> None:
        with self._lock:
            data = self.store.load()
            idx = _find(data["logs"], log_id)
            if idx is None:
                raise NotFoundError("Log", log_id)
            del data["logs"][idx]
            self.store.save(data)

    # -------- İçe / dışa aktarım --------
    def export_data(self) -> Dataset:
        with self._lock:
            return self.store.load()

    def import_data(self, dataset: Any) -> Dataset:
        if not isinstance(dataset, dict):
            raise ValidationFailure("data", "must be an object with 'machines' and 'logs'")
        data = dict(dataset)
        for key in ("machines", "logs"):
            value = data.setdefault(key, [])
            if not isinstance(value, list):
                raise ValidationFailure(key, "must be a list")
        with self._lock:
            self.store.save(data)
        logger.info("Dataset imported: %d machines, %d logs", len(data["machines"]), len(data["logs"]))
        return data

    # -------- yardımcılar --------
    @staticmethod
    def _machine_or_404(data: Dataset, machine_id: str) -> Dict[str, Any]:
        idx = _find(data["machines"], machine_id)
        if idx is None:
            raise NotFoundError("Machine", machine_id)
        return data["machines"][idx]


def get_repository(request: Request) -> Repository:
    return request.app.state.repository
