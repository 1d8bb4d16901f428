from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from clinic_data.config import AppConfig

logger = logging.getLogger(__name__)


class BackendUnavailable(RuntimeError):
    pass


class Backend(Protocol):
    reason: Optional[str]

    def is_available(self) -> bool: ...

    def table(self, name: str) -> Any: ...


@dataclass(frozen=True)
class SupabaseBackend:
    """Remote backend: a Supabase client authenticated with the service-role key."""

    client: Any
    reason: Optional[str] = None

    def is_available(self) -> bool:
        return True

    def table(self, name: str) -> Any:
        return self.client.table(name)


@dataclass(frozen=True)
class DisabledBackend:
    """
    Backend used when bootstrap failed. The service layer checks
    `is_available()` before building any query, so `table()` is only a guard
    for callers that bypass that gate; it is never on a normal code path.
    """

    reason: str

    def is_available(self) -> bool:
        return False

    def table(self, name: str) -> Any:
        raise BackendUnavailable(self.reason)


class ClientLibraryMissing(ImportError):
    pass


def _load_client_factory() -> tuple[Callable[..., Any], Callable[..., Any]]:
    try:
        import supabase  # noqa: F401
    except ImportError as e:
        raise ClientLibraryMissing("supabase package not installed (pip install supabase)") from e
    try:
        from supabase import ClientOptions, create_client
    except ImportError as e:
        raise ClientLibraryMissing(f"installed supabase package is incompatible: {e}") from e
    return create_client, ClientOptions


def connect(cfg: AppConfig) -> Backend:
    """
    One-shot, fail-soft bootstrap. Returns a SupabaseBackend when the client
    library is installed, both credentials are set and the client builds;
    otherwise a DisabledBackend naming the failed precondition.
    """
    try:
        factory = _load_client_factory()
    except ClientLibraryMissing as e:
        reason = str(e)
        logger.warning("Supabase disabled: %s", reason)
        return DisabledBackend(reason=reason)

    if not cfg.has_credentials:
        reason = f"missing credentials: {', '.join(cfg.missing_credentials)}"
        logger.warning("Supabase disabled: %s", reason)
        return DisabledBackend(reason=reason)

    create_client, ClientOptions = factory
    try:
        # Every call runs as the service role; no end-user session to refresh or persist.
        client = create_client(
            cfg.supabase_url,
            cfg.supabase_service_role_key,
            options=ClientOptions(auto_refresh_token=False, persist_session=False),
        )
    except Exception as e:
        reason = f"client construction failed: {type(e).__name__}: {e}"
        logger.error("Supabase disabled: %s", reason)
        return DisabledBackend(reason=reason)

    logger.info("Supabase client initialized for %s", cfg.supabase_url)
    return SupabaseBackend(client=client)
