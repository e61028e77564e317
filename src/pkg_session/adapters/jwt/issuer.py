import asyncio
import time
from typing import Any, Callable, Dict, Optional

import jwt
from ulid import ULID

from ...domain.constants import TOKEN_ALGORITHM
from ...domain.entities import TokenUser
from ...domain.exceptions import InvalidInputError, SigningError
from ...domain.ports import TokenIssuer
from ...domain.value_objects import Err, Ok, Result
from ...log import get_logger


class JWTTokenIssuer(TokenIssuer):
    """
    Adapter implementing TokenIssuer port using PyJWT.

    Infrastructure layer:
    - Knows about JWT registered claims and RS256 signing.
    - Signing runs in a worker thread so callers can await it.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        logger: Any = None,
    ) -> None:
        self._clock = clock
        self._logger = logger or get_logger("pkg_session.issuer.jwt")

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    async def issue(
        self,
        private_key: str,
        user: TokenUser,
        ttl_seconds: int,
        issuer: str,
    ) -> Result[str]:
        """
        Generate a new token containing the logged user.

        Args:
            private_key: PEM encoded RSA private key used to sign the token
            user: the logged user, every modelled field becomes a claim
            ttl_seconds: token time to live, in seconds
            issuer: value of the `iss` claim

        Returns:
            Ok(compact JWT) or Err(InvalidInputError / SigningError)
        """
        precondition_error = self._check_inputs(private_key, ttl_seconds, issuer)
        if precondition_error is not None:
            return Err(precondition_error)

        claims = self._build_claims(user, ttl_seconds, issuer)

        try:
            token = await asyncio.to_thread(
                jwt.encode, claims, private_key, algorithm=TOKEN_ALGORITHM
            )
        except Exception as exc:
            self._logger.error("Token signing failed", error=str(exc))
            error = SigningError(f"Unable to sign token: {exc}")
            error.__cause__ = exc
            return Err(error)

        self._logger.debug("Token issued", jti=claims["jti"], exp=claims["exp"])
        return Ok(token)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _build_claims(self, user: TokenUser, ttl_seconds: int, issuer: str) -> Dict[str, Any]:
        now = int(self._clock())
        claims = user.model_dump(mode="json", exclude_none=True)
        claims.update(
            {
                "iss": issuer,
                "iat": now,
                "exp": now + ttl_seconds,
                "jti": str(ULID()),
            }
        )
        return claims

    @staticmethod
    def _check_inputs(private_key: str, ttl_seconds: int, issuer: str) -> Optional[Exception]:
        if not private_key:
            return InvalidInputError("Private key must be a non-empty string")
        if not issuer:
            return InvalidInputError("Issuer must be a non-empty string")
        if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int) or ttl_seconds < 0:
            return InvalidInputError(
                f"Token TTL must be a non-negative integer number of seconds, got {ttl_seconds!r}"
            )
        return None
