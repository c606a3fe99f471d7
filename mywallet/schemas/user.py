"""
mywallet/schemas/user.py

Pydantic schemas for sign-up and sign-in.

The client supplies a raw 'password' which is hashed by the model before it
is stored; the plaintext never reaches the database.
"""

import re
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

# Alphanumeric-only password policy
PASSWORD_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


def _check_email_domain(value: str) -> str:
    """
    Requires at least two domain atoms (e.g. 'x.com', not 'localhost')
    and lower-cases the address so uniqueness is case-insensitive.
    """
    domain = value.rsplit("@", 1)[-1]
    if "." not in domain:
        raise ValueError("E-mail domain must contain at least two parts.")
    return value.lower()


def _check_password(value: str) -> str:
    if not PASSWORD_PATTERN.match(value):
        raise ValueError("Password must only contain letters and numbers.")
    return value


class UserCreate(BaseModel):
    """
    Body of POST /signup.
    """
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)
    password_confirm: str

    @field_validator("name", mode="before")
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("email")
    def validate_email_domain(cls, v: str) -> str:
        return _check_email_domain(v)

    @field_validator("password")
    def validate_password(cls, v: str) -> str:
        return _check_password(v)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.password_confirm:
            raise ValueError("Password confirmation does not match password.")
        return self


class SignInRequest(BaseModel):
    """
    Body of POST /signin.
    """
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email")
    def validate_email_domain(cls, v: str) -> str:
        return _check_email_domain(v)

    @field_validator("password")
    def validate_password(cls, v: str) -> str:
        return _check_password(v)


class SignInResponse(BaseModel):
    """
    Returned by a successful sign-in: the user's display name and the
    bearer token to attach to later requests.
    """
    name: str
    token: str
