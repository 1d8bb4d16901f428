from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from postgrest.exceptions import APIError

from clinic_data.config import AppConfig
from clinic_data.data.connection import Backend
from clinic_data.data import queries
from clinic_data.data.queries import CLINIC_KEY, Record

logger = logging.getLogger(__name__)

OK = "ok"
NOT_FOUND = "not_found"
UNAVAILABLE = "unavailable"
ERROR = "error"

# PostgREST: "JSON object requested, multiple (or no) rows returned"
NO_SINGLE_ROW = "PGRST116"


class UnexpectedRowCount(LookupError):
    def __init__(self, count: int):
        super().__init__(f"expected exactly one row, got {count}")
        self.count = count


@dataclass(frozen=True)
class DataResult:
    data: Any
    status: str  # "ok" | "not_found" | "unavailable" | "error"
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OK


def _execute(operation: str, backend: Backend, fn_live: Callable[[], Any], empty: Callable[[], Any]) -> DataResult:
    if not backend.is_available():
        return DataResult(data=empty(), status=UNAVAILABLE, error=backend.reason)
    try:
        return DataResult(data=fn_live(), status=OK)
    except APIError as e:
        status = NOT_FOUND if e.code == NO_SINGLE_ROW else ERROR
        detail = f"{e.code}: {e.message}"
    except UnexpectedRowCount as e:
        status = NOT_FOUND if e.count == 0 else ERROR
        detail = str(e)
    except Exception as e:
        status = ERROR
        detail = f"{type(e).__name__}: {e}"

    if status == NOT_FOUND:
        logger.warning("%s: no matching row (%s)", operation, detail)
    else:
        logger.error("%s failed: %s", operation, detail)
    return DataResult(data=empty(), status=status, error=detail)


def _none() -> None:
    return None


def _rows(request) -> list[Record]:
    return list(request.execute().data or [])


def _one(request) -> Record:
    data = request.execute().data
    if isinstance(data, list):
        if len(data) != 1:
            raise UnexpectedRowCount(len(data))
        return data[0]
    if data is None:
        raise UnexpectedRowCount(0)
    return data


def _by_code(rows: list[Record]) -> dict[str, Record]:
    clinics: dict[str, Record] = {}
    for row in rows:
        code = row.get(CLINIC_KEY)
        if code is None:
            logger.debug("Skipping clinic row without %s: %r", CLINIC_KEY, row)
            continue
        # Later rows win on duplicate codes.
        clinics[code] = row
    return clinics


# ================== CLINICS ==================

def get_clinic_by_code(cfg: AppConfig, backend: Backend, code: str) -> DataResult:
    return _execute(
        "get_clinic_by_code",
        backend,
        fn_live=lambda: _one(queries.q_clinic_by_code(cfg, backend, code)),
        empty=_none,
    )


def get_all_clinics(cfg: AppConfig, backend: Backend) -> DataResult:
    return _execute(
        "get_all_clinics",
        backend,
        fn_live=lambda: _by_code(_rows(queries.q_all_clinics(cfg, backend))),
        empty=dict,
    )


def create_clinic(cfg: AppConfig, backend: Backend, record: Record) -> DataResult:
    return _execute(
        "create_clinic",
        backend,
        fn_live=lambda: _one(queries.q_insert_clinic(cfg, backend, record)),
        empty=_none,
    )


def update_clinic(cfg: AppConfig, backend: Backend, code: str, updates: Record) -> DataResult:
    return _execute(
        "update_clinic",
        backend,
        fn_live=lambda: _one(queries.q_update_clinic(cfg, backend, code, updates)),
        empty=_none,
    )


# ================== PATIENTS ==================

def get_patient_by_id(cfg: AppConfig, backend: Backend, patient_id: str) -> DataResult:
    return _execute(
        "get_patient_by_id",
        backend,
        fn_live=lambda: _one(queries.q_patient_by_id(cfg, backend, patient_id)),
        empty=_none,
    )


def get_patients_by_clinic_code(cfg: AppConfig, backend: Backend, code: str) -> DataResult:
    return _execute(
        "get_patients_by_clinic_code",
        backend,
        fn_live=lambda: _rows(queries.q_patients_by_clinic_code(cfg, backend, code)),
        empty=list,
    )


def create_patient(cfg: AppConfig, backend: Backend, record: Record) -> DataResult:
    return _execute(
        "create_patient",
        backend,
        fn_live=lambda: _one(queries.q_insert_patient(cfg, backend, record)),
        empty=_none,
    )


def update_patient(cfg: AppConfig, backend: Backend, patient_id: str, updates: Record) -> DataResult:
    return _execute(
        "update_patient",
        backend,
        fn_live=lambda: _one(queries.q_update_patient(cfg, backend, patient_id, updates)),
        empty=_none,
    )
