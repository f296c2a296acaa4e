"""
Pydantic schemas for Room entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from debter.models.room import Currency
from debter.schemas.payment import PaymentResponse


class RoomCreate(BaseModel):
    """Schema for room creation."""
    name: str = Field(min_length=1, max_length=200)
    currency: Optional[Currency] = None  # Defaults to DEFAULT_CURRENCY
    rounding: Optional[float] = Field(default=None, ge=0)  # Defaults to DEFAULT_ROUNDING
    members: List[str] = Field(min_length=1)  # Member names

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("members")
    @classmethod
    def strip_names(cls, v):
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("Member names must not be empty")
        return names


class RoundingUpdate(BaseModel):
    """Schema for rounding tolerance update."""
    rounding: float = Field(ge=0)


class MemberResponse(BaseModel):
    """Schema for room member with computed totals."""
    id: str
    name: str
    sum: float  # Total paid, room currency
    debt: float  # Net balance: negative is owed, positive owes


class DebtResponse(BaseModel):
    """Schema for a settlement instruction."""
    from_id: str
    to_id: str
    value: float
    currency: Currency
    arranged: bool


class RoomDetailsResponse(BaseModel):
    """Schema for detailed room response."""
    key: str
    name: str
    currency: Currency
    rounding: float
    members: List[MemberResponse] = []
    payments: List[PaymentResponse] = []
    debts: List[DebtResponse] = []
