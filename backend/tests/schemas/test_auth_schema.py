"""Auth Schemas: email normalization and password rules."""

import pytest
from pydantic import ValidationError

from campfinder.schemas.auth import CheckInviteRequest, LoginRequest, RegisterRequest


def test_email_is_trimmed_and_lower_cased():
    assert LoginRequest(email="  Admin@Example.COM ", password="x").email == "admin@example.com"


def test_malformed_email_rejected():
    with pytest.raises(ValidationError):
        LoginRequest(email="not-an-email", password="x")


def test_register_password_minimum_length():
    with pytest.raises(ValidationError):
        RegisterRequest(email="a@example.com", password="1234567")
    assert RegisterRequest(email="a@example.com", password="12345678")


def test_invite_code_accepts_camel_case():
    assert CheckInviteRequest.model_validate({"inviteCode": "X"}).invite_code == "X"
