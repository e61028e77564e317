class SessionCoreError(Exception):
    """Base class for every failure carried by a Result."""
    pass


class UserValidationError(SessionCoreError):
    """Raised when a user payload fails schema validation."""
    pass


class InvalidInputError(SessionCoreError):
    """Raised when an operation is called with arguments it cannot accept."""
    pass


class SigningError(SessionCoreError):
    """Raised when a token cannot be signed."""
    pass


class TransportError(SessionCoreError):
    """Raised when the key-value backend reports or raises an error."""
    pass


class NegativeResultError(SessionCoreError):
    """Raised when a write was acknowledged but did not apply."""
    pass
