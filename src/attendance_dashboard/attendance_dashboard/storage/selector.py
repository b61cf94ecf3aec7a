from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_DATA_FILE
from ..core.enums import BackendKind


@dataclass(frozen=True)
class StorageSettings:
    """Storage configuration resolved once at startup."""

    supabase_url: str = ""
    supabase_key: str = ""
    data_file: str = DEFAULT_DATA_FILE
    serverless: bool = False

    @property
    def database_configured(self) -> bool:
        return bool(self.supabase_url) and bool(self.supabase_key)

    @classmethod
    def from_settings(cls, settings) -> "StorageSettings":
        return cls(
            supabase_url=(getattr(settings, "SUPABASE_URL", "") or "").strip(),
            supabase_key=(getattr(settings, "SUPABASE_KEY", "") or "").strip(),
            data_file=str(getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE) or DEFAULT_DATA_FILE),
            serverless=bool(getattr(settings, "SERVERLESS", False)),
        )


def read_order(settings: StorageSettings) -> list[BackendKind]:
    """Durable backends to try on read, before falling back to memory."""
    order = []
    if settings.database_configured:
        order.append(BackendKind.DATABASE)
    order.append(BackendKind.FILE)
    return order


def write_order(settings: StorageSettings) -> list[BackendKind]:
    """Durable backends to try on write, after memory has been updated."""
    order = []
    if settings.database_configured:
        order.append(BackendKind.DATABASE)
    if not settings.serverless:
        order.append(BackendKind.FILE)
    return order
