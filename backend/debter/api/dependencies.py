"""
Shared route dependencies.
"""
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
from debter.core.exceptions import DebterError
from debter.db.session import get_db
from debter.services.fx_service import CurrencyConverter


def get_currency_converter(db: Session = Depends(get_db)) -> CurrencyConverter:
    """Dependency for the currency converter bound to the request's session."""
    return CurrencyConverter(db)


def to_http_error(error: DebterError) -> HTTPException:
    """Translate a domain error to the HTTP error returned to the client."""
    return HTTPException(status_code=error.status_code, detail=error.message)
