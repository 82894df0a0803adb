# backend/mechcare/client.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

import requests

from mechcare.core.config import get_settings


class ApiError(Exception):
    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        self.status = status; self.url = url; super().__init__(message)


def _friendly_http_message(status: int, url: str, detail: str = "") -> str:
    if status == 400: return f"Invalid request (400): {detail}"
    if status == 404: return f"Not found (404): {url}"
    if status >= 500: return f"Server error ({status}): {detail}"
    return f"HTTP error {status}: {detail}"


class MechCareClient:
    def __init__(self, api_base: Optional[str] = None, session: Any = None, timeout: float = 15):
        self.api_base = (api_base or get_settings().api_base).strip().rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ---------- istek yardımcısı ----------
    def _request(self, method: str, path: str, payload: Any = None, params: Optional[dict] = None):
        url = f"{self.api_base}{path}"
        try:
            r = self.session.request(method, url, json=payload, params=params, timeout=self.timeout)
        except requests.Timeout:
            raise ApiError("Request timed out.", url=url)
        except requests.ConnectionError:
            raise ApiError("Could not connect: API is down or the URL is wrong.", url=url)
        except requests.RequestException as e:
            raise ApiError(f"Network error: {e}", url=url)

        if r.status_code >= 400:
            detail = ""
            try:
                body = r.json()
                detail = body.get("error", "") if isinstance(body, dict) else ""
            except ValueError:
                detail = (r.text or "")[:160]
            raise ApiError(_friendly_http_message(r.status_code, url, detail), r.status_code, url)
        return r.json()

    # ---------- makineler ----------
    def get_all_machines(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/machines")

    def get_machine(self, machine_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/machines/{machine_id}")

    def add_machine(self, machine: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/machines", machine)

    def update_machine(self, machine_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/machines/{machine_id}", patch)

    def delete_machine(self, machine_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/machines/{machine_id}")

    def add_runtime(self, machine_id: str, hours: float) -> Dict[str, Any]:
        return self._request("POST", f"/machines/{machine_id}/runtime", {"hours": hours})

    def get_machine_health(self, machine_id: str, today: Optional[dt.date] = None) -> Dict[str, Any]:
        params = {"today": today.isoformat()} if today else None
        return self._request("GET", f"/machines/{machine_id}/health", params=params)

    # ---------- kayıtlar ----------
    def get_logs_for_machine(self, machine_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/machines/{machine_id}/logs")

    def add_log(self, log: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/logs", log)

    def delete_log(self, log_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/logs/{log_id}")

    # ---------- içe / dışa aktarım ----------
    def get_all_data(self) -> Dict[str, Any]:
        return self._request("GET", "/data")

    def save_all_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/data", data)
