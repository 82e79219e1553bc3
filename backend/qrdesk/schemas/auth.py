"""Auth Schemas: signup/login payloads and token responses.

Invariants:
    - All signup fields required, stripped, non-empty
    - Passwords are never echoed back in any response model
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SignupRequest(BaseModel):
    """POST /signup body."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1, max_length=72)

    @field_validator("first_name", "last_name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("cannot be empty or whitespace")
        return v


class LoginRequest(BaseModel):
    """POST /login body."""
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class TokenResponse(BaseModel):
    message: str
    token: str
