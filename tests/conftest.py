from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from clinic_data.config import AppConfig
from clinic_data.data.connection import DisabledBackend, SupabaseBackend
from clinic_data.data.store import ClinicStore


class FakeQuery:
    """Chainable stand-in for a postgrest request builder."""

    def __init__(self, client: "FakeClient", table: str):
        self.client = client
        self.table = table
        self.ops: list[tuple] = []

    def _chain(self, *op: Any) -> "FakeQuery":
        self.ops.append(op)
        return self

    def select(self, *columns: str) -> "FakeQuery":
        return self._chain("select", *columns)

    def eq(self, column: str, value: Any) -> "FakeQuery":
        return self._chain("eq", column, value)

    def single(self) -> "FakeQuery":
        return self._chain("single")

    def insert(self, row: Any) -> "FakeQuery":
        return self._chain("insert", row)

    def update(self, row: Any) -> "FakeQuery":
        return self._chain("update", row)

    def execute(self) -> SimpleNamespace:
        self.client.executed.append((self.table, self.ops))
        queued = self.client.responses.get(self.table) or []
        outcome = queued.pop(0) if queued else None
        if isinstance(outcome, BaseException):
            raise outcome
        return SimpleNamespace(data=outcome)


class FakeClient:
    def __init__(self):
        self.responses: dict[str, list[Any]] = {}
        self.executed: list[tuple[str, list[tuple]]] = []
        self.tables_opened: list[str] = []

    def respond(self, table: str, *outcomes: Any) -> None:
        self.responses.setdefault(table, []).extend(outcomes)

    def table(self, name: str) -> FakeQuery:
        self.tables_opened.append(name)
        return FakeQuery(self, name)


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig(
        supabase_url="https://example.supabase.co",
        supabase_service_role_key="service-role-key",
        clinics_table="clinics",
        patients_table="patients",
        log_level="INFO",
    )


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def backend(fake_client: FakeClient) -> SupabaseBackend:
    return SupabaseBackend(client=fake_client)


@pytest.fixture
def store(cfg: AppConfig, backend: SupabaseBackend) -> ClinicStore:
    return ClinicStore(cfg=cfg, backend=backend)


@pytest.fixture
def offline_store(cfg: AppConfig) -> ClinicStore:
    return ClinicStore(cfg=cfg, backend=DisabledBackend(reason="missing credentials: SUPABASE_URL"))
