# backend/scripts/seed_demo.py
"""Idempotent demo data: machines are matched by name, logs by (machine, date, notes)."""
import argparse
from datetime import date, timedelta

from mechcare.core.config import get_settings
from mechcare.core.store import JsonFileStore
from mechcare.services.repository import Repository

today = date.today()

MACHINES = [
    {"name": "Hydraulic Press", "type": "Press", "userName": "Ali", "mobileNumber": "0555 000 0001",
     "interval": 30, "runtimeHours": 120, "lastMaintenance": today - timedelta(days=40)},
    {"name": "CNC Lathe", "type": "Lathe", "userName": "Zeynep", "mobileNumber": "0555 000 0002",
     "interval": 60, "runtimeHours": 300, "lastMaintenance": today - timedelta(days=55)},
    {"name": "Air Compressor", "type": "Compressor", "interval": 90, "runtimeHours": 0},
]

LOGS = [
    ("Hydraulic Press", today - timedelta(days=40), "Oil change, seals checked"),
    ("CNC Lathe", today - timedelta(days=55), "Spindle bearings greased"),
]

def get_or_create_machine(repo: Repository, data: dict):
    for m in repo.list_machines():
        if m.get("name") == data["name"]:
            return m, False
    return repo.create_machine(data), True

def seed(data_file: str | None = None):
    repo = Repository(JsonFileStore(data_file or get_settings().data_file))
    print(">> Seeding machines into", repo.store.path)

    by_name = {}
    for m in MACHINES:
        machine, created = get_or_create_machine(repo, m)
        by_name[m["name"]] = machine
        print(("   + " if created else "   = ") + m["name"])

    print(">> Seeding logs")
    for name, log_date, notes in LOGS:
        machine = by_name[name]
        existing = repo.list_logs_for_machine(machine["id"])
        if any(l.get("date") == log_date.isoformat() and l.get("notes") == notes for l in existing):
            continue
        repo.create_log({"machineId": machine["id"], "date": log_date, "notes": notes})

    print("Seed done.")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load MechCare demo data")
    parser.add_argument("--data-file", default=None, help="defaults to MECHCARE_DATA_FILE")
    args = parser.parse_args()
    seed(args.data_file)
