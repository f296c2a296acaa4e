"""
Pydantic schemas for currency conversion.
"""
from pydantic import BaseModel
from datetime import date
from debter.models.room import Currency


class ConversionResponse(BaseModel):
    """Schema for a converted amount."""
    source: Currency
    target: Currency
    date: date
    amount: float
    rate: float  # 1 source = rate target
    converted_amount: float
