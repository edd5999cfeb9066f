"""
Pydantic models for user data.

Users are seeded once from the fixture and never change afterwards.
The e‑mail address is the login key; there are no passwords in this
catalog.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    CUSTOMER = "customer"
    SELLER = "seller"
    ADMIN = "admin"


class UserRead(BaseModel):
    """Schema for reading a user."""

    id: str = Field(..., examples=["user-1"])
    first_name: str
    last_name: str
    email: str = Field(..., examples=["admin@example.com"])
    role: Role = Role.CUSTOMER
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class LoginRequest(BaseModel):
    """Mock login payload: an e‑mail address and nothing else."""

    email: str = Field(..., examples=["seller@example.com"])
