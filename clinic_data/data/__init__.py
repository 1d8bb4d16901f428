"""
Data access layer.

Design rules:
- Callers use ONLY ClinicStore (neutral values) or the service functions (DataResult).
- Every remote call is wrapped so failures degrade to an empty result.
- No env var reads here (config-only).
"""

from clinic_data.data.connection import Backend, BackendUnavailable, DisabledBackend, SupabaseBackend, connect
from clinic_data.data.service import DataResult
from clinic_data.data.store import ClinicStore, get_clinic_store

__all__ = [
    "Backend",
    "BackendUnavailable",
    "ClinicStore",
    "DataResult",
    "DisabledBackend",
    "SupabaseBackend",
    "connect",
    "get_clinic_store",
]
