from __future__ import annotations

import json
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..domain.constants import FISCAL_NUMBER_INTERNATIONAL_PREFIX
from ..domain.entities import CommonTokenUser, SpidUser, TokenUser, TokenUserL2, UserCompany
from ..domain.exceptions import InvalidInputError, UserValidationError
from ..domain.value_objects import Err, Ok, Result

M = TypeVar("M", bound=BaseModel)


def _readable_message(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "value"
    return f"{location}: {error.get('msg', 'invalid value')}"


def errors_to_error(errors: ValidationError) -> UserValidationError:
    """One human readable message out of every field-level error."""
    return UserValidationError(
        " / ".join(_readable_message(e) for e in errors.errors())
    )


def map_decoding(model: Type[M], raw: Any) -> Result[M]:
    try:
        return Ok(model.model_validate(raw))
    except ValidationError as exc:
        return Err(errors_to_error(exc))


def decode_session_user(raw: str) -> Result[TokenUser]:
    """
    Decode a user stored as JSON by `SessionService.login`.

    Payloads carrying a `company` are read back as TokenUserL2 so no stored
    field is dropped.
    """
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        return Err(UserValidationError(f"Stored user is not valid JSON: {exc}"))

    if isinstance(payload, dict) and "company" in payload:
        return map_decoding(TokenUserL2, payload)
    return map_decoding(TokenUser, payload)


def to_common_token_user(source: Union[SpidUser, Mapping[str, Any]]) -> Result[CommonTokenUser]:
    """
    Build the common claims from an identity-provider user.

    The international prefix of the fiscal number is stripped before
    validation.
    """
    if not isinstance(source, SpidUser):
        decoded = map_decoding(SpidUser, source)
        if isinstance(decoded, Err):
            return decoded
        source = decoded.value

    return map_decoding(
        CommonTokenUser,
        {
            "email": source.email,
            "family_name": source.family_name,
            "fiscal_number": source.fiscal_number.replace(
                FISCAL_NUMBER_INTERNATIONAL_PREFIX, ""
            ),
            "mobile_phone": source.mobile_phone,
            "name": source.name,
        },
    )


def to_token_user_l2(source: TokenUser, company: UserCompany) -> Result[TokenUserL2]:
    return map_decoding(
        TokenUserL2,
        {
            "company": company.model_dump(),
            "email": source.email,
            "family_name": source.family_name,
            "fiscal_number": source.fiscal_number,
            "from_aa": source.from_aa,
            "mobile_phone": source.mobile_phone,
            "name": source.name,
        },
    )


def to_request_id(assertion_user: Mapping[str, Any]) -> str:
    """
    Extract the id of the authentication request an assertion answers.

    Raises:
        InvalidInputError if `inResponseTo` is missing or empty.
    """
    request_id = assertion_user.get("inResponseTo")
    if not isinstance(request_id, str) or not request_id:
        raise InvalidInputError("Assertion has no inResponseTo request id")
    return request_id
