"""
Foreign exchange service for currency conversion.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional
from debter.core.config import settings
from debter.core.exceptions import UnknownCurrencyError, ExchangeRateError
from debter.models.exchange_rate import ExchangeRate
from debter.models.room import Currency
import httpx
import logging

logger = logging.getLogger(__name__)


def normalize_currency(currency) -> str:
    """Return the upper-case code of a supported currency or raise UnknownCurrencyError."""
    code = currency.value if isinstance(currency, Currency) else str(currency or "").strip().upper()
    try:
        return Currency(code).value
    except ValueError:
        raise UnknownCurrencyError(str(currency))


def fetch_exchange_rate_from_api(target_date: date, currency: str, base_currency: str) -> float:
    """
    Fetch exchange rate from ExchangeRate-API v6.
    Returns rate to base currency (1 unit of currency = rate base_currency).

    Uses /latest/{currency} for today's date, /history/{currency}/{year}/{month}/{day} otherwise.

    API Documentation:
    - Latest: https://www.exchangerate-api.com/docs/latest-rates
    - Historical: https://www.exchangerate-api.com/docs/historical-data-requests
    """
    if not settings.FX_API_KEY:
        logger.error("FX_API_KEY is not configured. Please set it in .env file.")
        raise ExchangeRateError("FX_API_KEY is required for ExchangeRate-API")

    base_url = f"{settings.FX_API_URL.rstrip('/')}/{settings.FX_API_KEY}"
    if target_date == date.today():
        api_url = f"{base_url}/latest/{currency}"
        logger.info(f"Fetching latest exchange rate from ExchangeRate-API for {currency}")
    else:
        api_url = f"{base_url}/history/{currency}/{target_date.year}/{target_date.month}/{target_date.day}"
        logger.info(f"Fetching historical exchange rate from ExchangeRate-API for {currency} on {target_date}")

    try:
        response = httpx.get(api_url, timeout=settings.FX_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP error with ExchangeRate-API: {e.response.status_code} - {e.response.text}")
        raise ExchangeRateError(f"ExchangeRate-API HTTP error: {e.response.status_code}")
    except httpx.HTTPError as e:
        # Network errors, timeouts
        logger.error(f"HTTP error with ExchangeRate-API: {e}")
        raise ExchangeRateError(f"ExchangeRate-API network error: {e}")

    if settings.DEBUG:
        logger.debug(f"ExchangeRate-API response: {data}")

    if data.get("result") != "success":
        error_type = data.get("error-type", "Unknown error")
        logger.error(f"ExchangeRate-API returned error: {error_type}")
        if error_type == "unsupported-code":
            raise UnknownCurrencyError(currency)
        raise ExchangeRateError(f"ExchangeRate-API error: {error_type}")

    # Response format: {"conversion_rates": {"USD": 1, "HUF": 350.2, ...}} with the requested currency as base
    conversion_rates = data.get("conversion_rates", {})
    base_rate = conversion_rates.get(base_currency)
    if base_rate is None:
        logger.error(f"{base_currency} not found in conversion_rates")
        raise UnknownCurrencyError(base_currency)

    rate = float(base_rate)
    if rate <= 0:
        logger.error(f"Invalid rate: {rate}")
        raise ExchangeRateError(f"Invalid exchange rate: {rate}")

    logger.info(f"Fetched rate from ExchangeRate-API: 1 {currency} = {rate} {base_currency}")
    return rate


class CurrencyConverter:
    """Converts amounts between currencies using cached daily rates."""

    def __init__(self, db: Session):
        self.db = db

    def get_rate(self, currency: str, base_currency: str, on: Optional[date] = None) -> float:
        """Rate such that 1 currency = rate base_currency on the given day."""
        currency = normalize_currency(currency)
        base_currency = normalize_currency(base_currency)
        if currency == base_currency:
            return 1.0

        target_date = on or date.today()
        cached = self.db.query(ExchangeRate).filter(
            ExchangeRate.date == target_date,
            ExchangeRate.currency == currency,
            ExchangeRate.base_currency == base_currency
        ).first()
        if cached:
            return cached.rate

        rate = fetch_exchange_rate_from_api(target_date, currency, base_currency)
        self.db.add(ExchangeRate(
            date=target_date,
            currency=currency,
            base_currency=base_currency,
            rate=rate
        ))
        self.db.flush()
        return rate

    def convert(self, source_currency: str, target_currency: str, amount: float,
                on: Optional[date] = None) -> float:
        """Convert amount from source_currency to target_currency."""
        return amount * self.get_rate(source_currency, target_currency, on)
