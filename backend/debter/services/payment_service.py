"""
Payment service: add, retire and reinstate payments, rearranging debts each time.
"""
import logging
from sqlalchemy.orm import Session
from debter.core.exceptions import InvalidMemberError, PaymentNotFoundError
from debter.core.utils import generate_uuid
from debter.db.base import as_utc, utcnow
from debter.models.room import Room, Payment
from debter.repositories.room_repository import RoomRepository
from debter.schemas.payment import AddPaymentRequest
from debter.services.debt_service import arrange_debts
from debter.services.fx_service import CurrencyConverter

logger = logging.getLogger(__name__)


def add_payment(
    db: Session,
    room_key: str,
    request: AddPaymentRequest,
    converter: CurrencyConverter
) -> Room:
    """Validate and append a payment to its payer, then rearrange the room's debts."""
    repository = RoomRepository(db)
    with repository.use_room(room_key) as room:
        payer = room.find_member(request.member_id)
        if payer is None:
            raise InvalidMemberError(request.member_id)
        member_ids = set(room.member_ids)
        for member_id in request.included:
            if member_id not in member_ids:
                raise InvalidMemberError(member_id)

        payment_date = as_utc(request.date) if request.date else utcnow()
        converted_value = converter.convert(
            request.currency, room.currency, request.value, on=payment_date.date()
        )

        payment = Payment(
            id=generate_uuid(),
            value=request.value,
            currency=request.currency,
            converted_value=converted_value,
            included_member_ids=list(request.included),
            active=True,
            note=request.note,
            date=payment_date,
        )
        payer.payments.append(payment)

        arrange_debts(room)
        logger.info(
            f"Added payment {payment.id} to room {room_key}: "
            f"{request.value} {request.currency.value} ({converted_value} {room.currency.value})"
        )

    return room


def set_payment_active(db: Session, room_key: str, payment_id: str, active: bool) -> Room:
    """Toggle a payment's active flag and rearrange the room's debts."""
    repository = RoomRepository(db)
    with repository.use_room(room_key) as room:
        payment = room.find_payment(payment_id)
        if payment is None:
            raise PaymentNotFoundError(payment_id)

        payment.active = active
        arrange_debts(room)
        logger.info(f"Payment {payment_id} in room {room_key} set active={active}")

    return room


def delete_payment(db: Session, room_key: str, payment_id: str) -> Room:
    """Retire a payment; it stays in the history but no longer counts."""
    return set_payment_active(db, room_key, payment_id, False)


def revive_payment(db: Session, room_key: str, payment_id: str) -> Room:
    """Reinstate a retired payment."""
    return set_payment_active(db, room_key, payment_id, True)
