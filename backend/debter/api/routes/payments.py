"""
Payment management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from debter.api.dependencies import get_currency_converter, to_http_error
from debter.core.exceptions import DebterError
from debter.db.session import get_db
from debter.schemas.payment import AddPaymentRequest
from debter.schemas.room import RoomDetailsResponse
from debter.services.fx_service import CurrencyConverter
from debter.services.payment_service import add_payment, delete_payment, revive_payment
from debter.services.room_service import get_room_details

router = APIRouter(prefix="/rooms/{room_key}/payments", tags=["payments"])


@router.post("", response_model=RoomDetailsResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    room_key: str,
    payment_data: AddPaymentRequest,
    db: Session = Depends(get_db),
    converter: CurrencyConverter = Depends(get_currency_converter)
):
    """Add a payment and rearrange the room's debts."""
    try:
        room = add_payment(db, room_key, payment_data, converter)
        return get_room_details(room)
    except DebterError as e:
        raise to_http_error(e)


@router.delete("/{payment_id}", response_model=RoomDetailsResponse)
def retire_payment(
    room_key: str,
    payment_id: str,
    db: Session = Depends(get_db)
):
    """Retire a payment. It is kept in the history as inactive."""
    try:
        room = delete_payment(db, room_key, payment_id)
        return get_room_details(room)
    except DebterError as e:
        raise to_http_error(e)


@router.patch("/{payment_id}", response_model=RoomDetailsResponse)
def reinstate_payment(
    room_key: str,
    payment_id: str,
    db: Session = Depends(get_db)
):
    """Reinstate a retired payment."""
    try:
        room = revive_payment(db, room_key, payment_id)
        return get_room_details(room)
    except DebterError as e:
        raise to_http_error(e)
