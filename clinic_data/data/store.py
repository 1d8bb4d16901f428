from __future__ import annotations

from typing import Optional

from clinic_data.config import AppConfig, get_config
from clinic_data.data import service
from clinic_data.data.connection import Backend, connect
from clinic_data.data.queries import Record


class ClinicStore:
    """
    Caller-facing facade over the clinics and patients tables.

    Never raises. On any failure, or when the backend is disabled, single-record
    operations return None, patient lists return [] and the clinic map returns {}.
    Use `clinic_data.data.service` directly to tell "not found" from "unavailable".
    """

    def __init__(self, cfg: AppConfig, backend: Backend):
        self.cfg = cfg
        self.backend = backend

    def is_available(self) -> bool:
        return self.backend.is_available()

    # Clinics

    def get_clinic_by_code(self, code: str) -> Optional[Record]:
        return service.get_clinic_by_code(self.cfg, self.backend, code).data

    def get_all_clinics(self) -> dict[str, Record]:
        return service.get_all_clinics(self.cfg, self.backend).data

    def create_clinic(self, record: Record) -> Optional[Record]:
        return service.create_clinic(self.cfg, self.backend, record).data

    def update_clinic(self, code: str, updates: Record) -> Optional[Record]:
        return service.update_clinic(self.cfg, self.backend, code, updates).data

    # Patients

    def get_patient_by_id(self, patient_id: str) -> Optional[Record]:
        return service.get_patient_by_id(self.cfg, self.backend, patient_id).data

    def get_patients_by_clinic_code(self, code: str) -> list[Record]:
        return service.get_patients_by_clinic_code(self.cfg, self.backend, code).data

    def create_patient(self, record: Record) -> Optional[Record]:
        return service.create_patient(self.cfg, self.backend, record).data

    def update_patient(self, patient_id: str, updates: Record) -> Optional[Record]:
        return service.update_patient(self.cfg, self.backend, patient_id, updates).data


def get_clinic_store(cfg: Optional[AppConfig] = None) -> ClinicStore:
    """Factory: read config (unless given) and bootstrap the backend once."""
    cfg = cfg or get_config()
    return ClinicStore(cfg=cfg, backend=connect(cfg))
