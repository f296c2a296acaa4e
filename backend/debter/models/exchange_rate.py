"""
Exchange rate model for currency conversion.
"""
from sqlalchemy import Column, String, Date, Float, UniqueConstraint
from debter.db.base import BaseModel


class ExchangeRate(BaseModel):
    """Cached daily rate from one currency to another (1 currency = rate base_currency)."""
    __tablename__ = "exchange_rates"

    date = Column(Date, nullable=False, index=True)
    currency = Column(String(3), nullable=False)
    base_currency = Column(String(3), nullable=False)
    rate = Column(Float, nullable=False)

    # Unique constraint: one rate per currency pair per date
    __table_args__ = (
        UniqueConstraint('date', 'currency', 'base_currency', name='uq_date_currency_base'),
    )
