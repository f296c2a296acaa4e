"""
Pydantic schemas for Payment entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from debter.models.room import Currency


class AddPaymentRequest(BaseModel):
    """Schema for payment creation."""
    value: float = Field(gt=0)
    currency: Currency
    member_id: str  # Payer
    note: Optional[str] = None
    date: Optional[datetime] = None
    included: List[str] = Field(min_length=1)  # Member IDs sharing this payment

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("included")
    @classmethod
    def unique_included(cls, v):
        """Drop duplicate member ids while keeping their order."""
        return list(dict.fromkeys(v))


class PaymentResponse(BaseModel):
    """Schema for payment response."""
    id: str
    member_id: str
    value: float
    currency: Currency
    converted_value: float  # Value in the room's currency
    date: datetime
    note: Optional[str] = None
    included: List[str]
    active: bool
