"""Pydantic schemas for registration and login.

Learn: Pydantic v2 models validate request/response data. Separate
request schemas (input) from "Read" schemas (output). AccountRead is the
public projection of an account and has no password field at all.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    # Length rules live in PasswordPolicy, not here.
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class AccountRead(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class TokenRead(BaseModel):
    token: str


class Envelope(BaseModel, Generic[T]):
    """Response envelope used for every response, success or failure."""

    status: int
    message: str
    data: Optional[T] = None


class HealthRead(BaseModel):
    status: str
    database: str
