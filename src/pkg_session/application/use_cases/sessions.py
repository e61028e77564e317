from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from ...domain.entities import TokenUser
from ...domain.exceptions import InvalidInputError
from ...domain.ports import EphemeralStore, TokenIssuer
from ...domain.value_objects import Err, Ok, Result
from ..mappers import decode_session_user


@dataclass(slots=True)
class SessionService:
    """
    Application use case tying token issuance to the ephemeral store.

    - login: mint a token and keep the user under `<session prefix><token>`
      for as long as the token is valid
    - get_session / is_active / logout: read, check and revoke that entry
    - request ids: remember outstanding authentication requests so an
      assertion can only be answered once

    The key namespace belongs to this class; the store knows nothing about it.
    """

    issuer: TokenIssuer
    store: EphemeralStore
    private_key: str
    token_issuer: str
    token_ttl_seconds: int
    request_id_ttl_seconds: int = 900
    session_key_prefix: str = "session:"
    request_id_key_prefix: str = "request-id:"

    def __post_init__(self) -> None:
        # Redis rejects SET ... EX 0
        for name in ("token_ttl_seconds", "request_id_ttl_seconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")

    # --- Sessions ---------------------------------------------------------

    async def login(self, user: TokenUser) -> Result[str]:
        """Issue a token for `user` and persist the session. Returns the token."""
        issued = await self.issuer.issue(
            self.private_key, user, self.token_ttl_seconds, self.token_issuer
        )
        if isinstance(issued, Err):
            return issued

        token = issued.value
        stored = await self.store.set_with_expiration(
            self._session_key(token),
            user.model_dump_json(exclude_none=True),
            self.token_ttl_seconds,
            "Error saving user session",
        )
        if isinstance(stored, Err):
            return stored
        return Ok(token)

    async def get_session(self, token: str) -> Result[Optional[TokenUser]]:
        found = await self.store.get(self._session_key(token))
        if isinstance(found, Err) or found.value is None:
            return found
        return decode_session_user(found.value)

    async def is_active(self, token: str) -> Result[bool]:
        return await self.store.exists(self._session_key(token))

    async def logout(self, token: str) -> Result[bool]:
        return await self.store.delete(self._session_key(token))

    # --- Authentication request ids --------------------------------------

    async def register_request_id(self, request_id: str) -> Result[Literal[True]]:
        return await self.store.set_with_expiration(
            self._request_id_key(request_id),
            request_id,
            self.request_id_ttl_seconds,
            "Error saving authentication request id",
        )

    async def is_request_id_pending(self, request_id: str) -> Result[bool]:
        return await self.store.exists(self._request_id_key(request_id))

    async def consume_request_id(self, request_id: str) -> Result[bool]:
        """Ok(True) only for the first consumer of a pending request id."""
        return await self.store.delete(self._request_id_key(request_id))

    # --- helpers ----------------------------------------------------------

    def _session_key(self, token: str) -> str:
        return f"{self.session_key_prefix}{token}"

    def _request_id_key(self, request_id: str) -> str:
        return f"{self.request_id_key_prefix}{request_id}"
