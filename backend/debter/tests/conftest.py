"""
Shared fixtures: in-memory database, stub currency converter and test client.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from debter.api.dependencies import get_currency_converter
from debter.core.exceptions import UnknownCurrencyError
from debter.db.base import Base
from debter.db.session import get_db
from debter.main import app
from debter.services.fx_service import normalize_currency
from factories import make_room

# 1 unit of currency = rate HUF
RATES_TO_HUF = {
    "HUF": 1.0,
    "EUR": 348.18,
    "USD": 300.0,
}


class StubConverter:
    """Converter with fixed rates, no network or database access."""

    def __init__(self, rates=None):
        self.rates = rates or RATES_TO_HUF
        self.calls = []

    def get_rate(self, currency, base_currency, on=None):
        currency = normalize_currency(currency)
        base_currency = normalize_currency(base_currency)
        if currency not in self.rates:
            raise UnknownCurrencyError(currency)
        if base_currency not in self.rates:
            raise UnknownCurrencyError(base_currency)
        return self.rates[currency] / self.rates[base_currency]

    def convert(self, source_currency, target_currency, amount, on=None):
        self.calls.append((source_currency, target_currency, amount))
        return amount * self.get_rate(source_currency, target_currency, on)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def converter():
    return StubConverter()


@pytest.fixture
def client(session_factory, converter):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_currency_converter] = lambda: converter
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stored_room(db):
    """Persist a room built with make_room and return its key."""
    def _store(**kwargs):
        room = make_room(**kwargs)
        db.add(room)
        db.commit()
        return room.key
    return _store
