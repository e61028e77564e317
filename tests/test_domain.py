# tests/test_domain.py
import pytest
from pydantic import ValidationError

from pkg_session.domain.entities import SpidUser, TokenUser, TokenUserL2, UserCompany
from pkg_session.domain.exceptions import NegativeResultError, SessionCoreError
from pkg_session.domain.value_objects import Err, Ok


def test_ok_result():
    ok = Ok(False)
    assert ok.is_ok()
    assert not ok.is_err()
    assert ok.unwrap() is False
    assert ok.unwrap_or(True) is False
    assert Ok(2).map(lambda v: v * 2) == Ok(4)


def test_err_result():
    error = NegativeResultError("nope")
    err = Err(error)
    assert err.is_err()
    assert not err.is_ok()
    assert err.unwrap_or("default") == "default"
    assert err.map(lambda v: v * 2) is err

    with pytest.raises(NegativeResultError):
        err.unwrap()


def test_exception_hierarchy():
    assert issubclass(NegativeResultError, SessionCoreError)


def test_token_user_is_frozen(token_user):
    with pytest.raises(ValidationError):
        token_user.name = "Luigi"


def test_token_user_validation():
    with pytest.raises(ValidationError):
        TokenUser(name="Mario", family_name="Rossi", fiscal_number="not-a-fiscal-code")

    with pytest.raises(ValidationError):
        TokenUser(
            name="Mario",
            family_name="Rossi",
            fiscal_number="RSSMRA80A01H501U",
            email="not-an-email",
        )

    user = TokenUser(name="Mario", family_name="Rossi", fiscal_number="RSSMRA80A01H501U")
    assert user.email is None
    assert user.mobile_phone is None
    assert user.from_aa is None


def test_token_user_l2_requires_company(token_user, company):
    with pytest.raises(ValidationError):
        TokenUserL2(**token_user.model_dump())

    user = TokenUserL2(**token_user.model_dump(), company=company)
    assert user.company.organization_fiscal_code == "12345678901"


def test_user_company_validation():
    with pytest.raises(ValidationError):
        UserCompany(
            email="info@example.com",
            organization_fiscal_code="123",
            organization_name="Example",
        )


def test_spid_user_aliases():
    user = SpidUser.model_validate(
        {
            "name": "Mario",
            "familyName": "Rossi",
            "fiscalNumber": "TINIT-RSSMRA80A01H501U",
            "mobilePhone": "3331234567",
            "sessionIndex": "ignored",
        }
    )
    assert user.family_name == "Rossi"
    assert user.fiscal_number == "TINIT-RSSMRA80A01H501U"
    assert user.mobile_phone == "3331234567"
    assert user.email is None
