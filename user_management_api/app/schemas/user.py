"""
Pydantic models for user data.

``User`` is the domain value passed between the service and the
repositories.  It is frozen, so two instances compare equal exactly
when their ``id``, ``name`` and ``email`` are equal.  ``UserCreate``
and ``UserUpdate`` are request payloads; ``UserRead`` is what the API
returns.

Payload fields are plain strings on purpose: format rules are enforced
by ``services.validation`` so that the same rules apply whether the
service is called over HTTP or directly.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    # ``None`` until the repository assigns an id on save.
    id: Optional[int] = Field(None, examples=[1])
    name: str = Field(..., examples=["Anna-Maria"])
    email: str = Field(..., examples=["anna@mail.com"])

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., examples=["Jack"])
    email: str = Field(..., examples=["jack@mail.com"])


class UserUpdate(BaseModel):
    """Schema for replacing a user's name and e‑mail.

    Both fields are required; the id comes from the URL.
    """

    name: str = Field(..., examples=["Jack"])
    email: str = Field(..., examples=["jack@mail.com"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str

    model_config = {
        "from_attributes": True,
    }
