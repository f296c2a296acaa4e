"""Models package - Import all models for SQLAlchemy registration."""
from debter.models.room import Room, Member, Payment, DebtArrangement, Currency
from debter.models.exchange_rate import ExchangeRate

__all__ = [
    "Room",
    "Member",
    "Payment",
    "DebtArrangement",
    "Currency",
    "ExchangeRate",
]
