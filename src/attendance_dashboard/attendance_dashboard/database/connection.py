from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from supabase import Client, create_client

from ..core.exceptions import BackendNotConfiguredError


@dataclass(frozen=True)
class SupabaseConfig:
    url: str
    key: str

    @property
    def configured(self) -> bool:
        return bool(self.url) and bool(self.key)


class SupabaseConnection:
    """Lazy Supabase client factory.

    Note: The client is created on first use, so a configured-but-unreachable
    project only fails when a query is actually made.
    """

    def __init__(self, config: SupabaseConfig):
        self._config = config
        self._client: Optional[Client] = None

    def client(self) -> Client:
        if not self._config.configured:
            raise BackendNotConfiguredError("Supabase is not configured. Set SUPABASE_URL and SUPABASE_KEY")
        if self._client is None:
            self._client = create_client(self._config.url, self._config.key)
        return self._client
