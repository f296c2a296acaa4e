"""
Domain errors raised by the services and translated to HTTP responses by the routes.
"""
from fastapi import status


class DebterError(Exception):
    """Base class for all domain errors."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RoomNotFoundError(DebterError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, room_key: str):
        super().__init__(f"Room not found: {room_key}")
        self.room_key = room_key


class PaymentNotFoundError(DebterError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, payment_id: str):
        super().__init__(f"Payment not found: {payment_id}")
        self.payment_id = payment_id


class InvalidMemberError(DebterError):
    """Raised when a payer or included member id is not part of the room."""

    def __init__(self, member_id: str):
        super().__init__(f"Invalid member id: {member_id}")
        self.member_id = member_id


class InvalidPaymentError(DebterError):
    """Raised when a payment cannot take part in a balance calculation."""


class EmptyRoomError(DebterError):
    """Raised when balances are requested for a room without members."""

    def __init__(self):
        super().__init__("Room has no members")


class UnknownCurrencyError(DebterError):

    def __init__(self, currency: str):
        super().__init__(f"Unknown currency: {currency}")
        self.currency = currency


class ExchangeRateError(DebterError):
    """Raised when an exchange rate cannot be obtained."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ConcurrentModificationError(DebterError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, room_key: str):
        super().__init__(f"Room {room_key} was modified concurrently, retry the request")
        self.room_key = room_key
