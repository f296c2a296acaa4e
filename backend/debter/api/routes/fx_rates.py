"""
Foreign exchange rates routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional
from debter.api.dependencies import get_currency_converter, to_http_error
from debter.core.exceptions import DebterError
from debter.db.session import get_db
from debter.schemas.exchange_rate import ConversionResponse
from debter.services.fx_service import CurrencyConverter, normalize_currency

router = APIRouter(prefix="/fx-rates", tags=["fx-rates"])


@router.get("/convert", response_model=ConversionResponse)
def convert_amount(
    source: str,
    target: str,
    amount: float = Query(gt=0),
    on: Optional[date] = None,
    db: Session = Depends(get_db),
    converter: CurrencyConverter = Depends(get_currency_converter)
):
    """Convert an amount between two currencies with the rate of the given day (default today)."""
    target_date = on or date.today()
    try:
        rate = converter.get_rate(source, target, target_date)
        db.commit()
        return ConversionResponse(
            source=normalize_currency(source),
            target=normalize_currency(target),
            date=target_date,
            amount=amount,
            rate=rate,
            converted_amount=amount * rate,
        )
    except DebterError as e:
        raise to_http_error(e)
