# backend/mechcare/core/config.py
import json
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

# backend/ dizini ve .env yolu
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_DOTENV = os.path.join(BASE_DIR, ".env")
DEFAULT_DATA_FILE = os.path.join(BASE_DIR, "data", "mechcare-data.json")

dotenv_path = DEFAULT_DOTENV if os.path.exists(DEFAULT_DOTENV) else find_dotenv(filename=".env", usecwd=True)
if dotenv_path:
    load_dotenv(dotenv_path, override=False, encoding="utf-8-sig")


def parse_origins(env_val: Optional[str]) -> List[str]:
    """``*``, JSON liste ya da virgülle ayrılmış liste."""
    if not env_val or env_val.strip() == "*":
        return ["*"]
    try:
        parsed = json.loads(env_val)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        return [str(x) for x in parsed]
    return [s.strip() for s in env_val.split(",") if s.strip()]


@dataclass
class Settings:
    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "MechCare"))
    data_file: str = field(default_factory=lambda: os.getenv("MECHCARE_DATA_FILE") or DEFAULT_DATA_FILE)
    cors_allow_origins: List[str] = field(default_factory=lambda: parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    api_base: str = field(default_factory=lambda: os.getenv("API_BASE", "http://127.0.0.1:8011"))


def get_settings() -> Settings:
    return Settings()
