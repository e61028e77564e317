"""
pkg_session

Signed session tokens and ephemeral session storage for identity-federation
login services.
"""

__version__ = "0.1.0"

from .domain.entities import (
    CommonTokenUser,
    SpidUser,
    TokenUser,
    TokenUserL2,
    UserCompany,
)
from .domain.exceptions import (
    SessionCoreError,
    UserValidationError,
    InvalidInputError,
    SigningError,
    TransportError,
    NegativeResultError,
)
from .domain.value_objects import Ok, Err, Result
from .domain.ports import EphemeralStore, KeyValueConnection, TokenIssuer

from .application.mappers import (
    errors_to_error,
    map_decoding,
    decode_session_user,
    to_common_token_user,
    to_token_user_l2,
    to_request_id,
)
from .application.use_cases.sessions import SessionService

from .adapters.jwt.issuer import JWTTokenIssuer
from .adapters.redis.store import RedisEphemeralStore
from .adapters.redis.replies import (
    status_reply,
    value_reply,
    integer_reply,
    falsy_to_error,
)

from .log import configure_logging, get_logger

__all__ = [
    "__version__",
    # domain core
    "CommonTokenUser",
    "SpidUser",
    "TokenUser",
    "TokenUserL2",
    "UserCompany",
    "Ok",
    "Err",
    "Result",
    "EphemeralStore",
    "KeyValueConnection",
    "TokenIssuer",
    # exceptions
    "SessionCoreError",
    "UserValidationError",
    "InvalidInputError",
    "SigningError",
    "TransportError",
    "NegativeResultError",
    # mapping
    "errors_to_error",
    "map_decoding",
    "decode_session_user",
    "to_common_token_user",
    "to_token_user_l2",
    "to_request_id",
    # use cases
    "SessionService",
    # adapters
    "JWTTokenIssuer",
    "RedisEphemeralStore",
    "status_reply",
    "value_reply",
    "integer_reply",
    "falsy_to_error",
    # logging
    "configure_logging",
    "get_logger",
]
