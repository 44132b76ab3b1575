"""Auth Schemas: login/register payloads and admin access checks.

Invariants:
    - Emails are trimmed and lower-cased before reaching the service layer
    - Registration passwords are at least 8 characters
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class _EmailModel(BaseModel):
    email: str = Field(min_length=3, max_length=255, pattern=_EMAIL_PATTERN)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class LoginRequest(_EmailModel):
    password: str = Field(min_length=1, max_length=200)


class RegisterRequest(_EmailModel):
    password: str = Field(min_length=8, max_length=200)


class UserResponse(BaseModel):
    id: str
    email: str
    role: str


class AuthResponse(BaseModel):
    message: str
    user: UserResponse


class MeResponse(BaseModel):
    user: UserResponse


class CheckEmailRequest(BaseModel):
    email: str = Field(min_length=1, max_length=255)


class CheckInviteRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    invite_code: str = Field(min_length=1, max_length=200)
