from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

FISCAL_CODE_PATTERN = (
    r"^[A-Z]{6}[0-9LMNPQRSTUV]{2}[ABCDEHLMPRST][0-9LMNPQRSTUV]{2}"
    r"[A-Z][0-9LMNPQRSTUV]{3}[A-Z]$"
)
ORGANIZATION_FISCAL_CODE_PATTERN = r"^[0-9]{11}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCompany(BaseModel):
    """
    Organization the user is acting on behalf of (L2 tokens only).
    """
    model_config = ConfigDict(frozen=True)

    email: str = Field(pattern=EMAIL_PATTERN)
    organization_fiscal_code: str = Field(pattern=ORGANIZATION_FISCAL_CODE_PATTERN)
    organization_name: str = Field(min_length=1)


class CommonTokenUser(BaseModel):
    """
    Identity fields shared by every token flavour.

    Field names are the claim names embedded in the signed token.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    family_name: str = Field(min_length=1)
    fiscal_number: str = Field(pattern=FISCAL_CODE_PATTERN)
    email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    mobile_phone: Optional[str] = Field(default=None, min_length=1)


class TokenUser(CommonTokenUser):
    # set when the login went through the issuing authority (attribute authority)
    from_aa: Optional[bool] = None


class TokenUserL2(TokenUser):
    company: UserCompany


class SpidUser(BaseModel):
    """
    User record as produced by the identity-provider assertion parser.

    Only the attributes this package maps to claims are modelled; anything
    else in the assertion is ignored.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(alias="name")
    family_name: str = Field(alias="familyName")
    fiscal_number: str = Field(alias="fiscalNumber")
    email: Optional[str] = Field(default=None, alias="email")
    mobile_phone: Optional[str] = Field(default=None, alias="mobilePhone")
