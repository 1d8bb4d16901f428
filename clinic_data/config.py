from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


URL_ENV = "SUPABASE_URL"
SERVICE_ROLE_KEY_ENV = "SUPABASE_SERVICE_ROLE_KEY"


@dataclass(frozen=True)
class AppConfig:
    # Required for the remote backend. If either is unset, the store runs disabled.
    supabase_url: str
    supabase_service_role_key: str

    # Table names (defaults match the hosted schema)
    clinics_table: str
    patients_table: str

    log_level: str

    @property
    def missing_credentials(self) -> list[str]:
        missing = []
        if not self.supabase_url:
            missing.append(URL_ENV)
        if not self.supabase_service_role_key:
            missing.append(SERVICE_ROLE_KEY_ENV)
        return missing

    @property
    def has_credentials(self) -> bool:
        return not self.missing_credentials


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Real environment variables win over `.env`
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv(URL_ENV) or "",
        supabase_service_role_key=_getenv(SERVICE_ROLE_KEY_ENV) or "",
        clinics_table=_getenv("SUPABASE_CLINICS_TABLE", "clinics") or "clinics",
        patients_table=_getenv("SUPABASE_PATIENTS_TABLE", "patients") or "patients",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
