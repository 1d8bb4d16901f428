from __future__ import annotations

from typing import Any

from clinic_data.config import AppConfig
from clinic_data.data.connection import Backend

Record = dict[str, Any]

CLINIC_KEY = "clinic_code"
PATIENT_KEY = "patient_id"


def normalize_clinic_code(code: str) -> str:
    return code.upper()


def with_normalized_code(record: Record) -> Record:
    """Copy of `record` with a string clinic_code upper-cased."""
    out = dict(record)
    if isinstance(out.get(CLINIC_KEY), str):
        out[CLINIC_KEY] = normalize_clinic_code(out[CLINIC_KEY])
    return out


# Clinics

def q_clinic_by_code(cfg: AppConfig, backend: Backend, code: str):
    return (
        backend.table(cfg.clinics_table)
        .select("*")
        .eq(CLINIC_KEY, normalize_clinic_code(code))
        .single()
    )


def q_all_clinics(cfg: AppConfig, backend: Backend):
    return backend.table(cfg.clinics_table).select("*")


def q_insert_clinic(cfg: AppConfig, backend: Backend, record: Record):
    return backend.table(cfg.clinics_table).insert(with_normalized_code(record))


def q_update_clinic(cfg: AppConfig, backend: Backend, code: str, updates: Record):
    return (
        backend.table(cfg.clinics_table)
        .update(with_normalized_code(updates))
        .eq(CLINIC_KEY, normalize_clinic_code(code))
    )


# Patients

def q_patient_by_id(cfg: AppConfig, backend: Backend, patient_id: str):
    return (
        backend.table(cfg.patients_table)
        .select("*")
        .eq(PATIENT_KEY, patient_id)
        .single()
    )


def q_patients_by_clinic_code(cfg: AppConfig, backend: Backend, code: str):
    return (
        backend.table(cfg.patients_table)
        .select("*")
        .eq(CLINIC_KEY, normalize_clinic_code(code))
    )


def q_insert_patient(cfg: AppConfig, backend: Backend, record: Record):
    return backend.table(cfg.patients_table).insert(with_normalized_code(record))


def q_update_patient(cfg: AppConfig, backend: Backend, patient_id: str, updates: Record):
    return (
        backend.table(cfg.patients_table)
        .update(with_normalized_code(updates))
        .eq(PATIENT_KEY, patient_id)
    )
