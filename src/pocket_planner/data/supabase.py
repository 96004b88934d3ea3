from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from supabase import Client, create_client

from ..config.settings import SupabaseSettings


class SupabaseNotInitializedError(RuntimeError):
    """Raised when accessing the Supabase client before initialization."""


class SupabaseSessionMissingError(RuntimeError):
    """Raised when an owner-scoped action runs without a session or configured owner."""


@dataclass
class SupabaseGateway:
    """Thin wrapper around the Supabase Python client with session awareness.

    Without a signed-in session the owner falls back to
    ``POCKET_PLANNER_USER_ID`` so headless tools can read one user's data.
    """

    settings: SupabaseSettings
    _client: Optional[Client] = None
    _session: Optional[Any] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase settings are incomplete; set {missing}.")
        self._client = create_client(self.settings.url, self.settings.anon_key)
        return self._client

    def set_session(self, session: Any) -> None:
        self._session = session

    def clear_session(self) -> None:
        self._session = None

    def current_user_id(self) -> str:
        if self._session is not None:
            user = getattr(self._session, "user", None)
            identifier = getattr(user, "id", None)
            if not identifier:
                raise SupabaseSessionMissingError("Supabase session has no user id.")
            return str(identifier)
        if self.settings.owner_id:
            return self.settings.owner_id
        raise SupabaseSessionMissingError("No Supabase session is attached and POCKET_PLANNER_USER_ID is unset.")

    def table(self, name: str):
        return self.ensure_client().table(name)
