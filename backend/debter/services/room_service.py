"""
Room service for creating rooms and building their detailed view.
"""
import logging
from sqlalchemy.orm import Session
from debter.core.config import settings
from debter.core.utils import generate_room_key, generate_uuid
from debter.db.base import as_utc
from debter.models.room import Room, Member, Currency
from debter.repositories.room_repository import RoomRepository
from debter.schemas.payment import PaymentResponse
from debter.schemas.room import (
    RoomCreate, RoomDetailsResponse, MemberResponse, DebtResponse
)
from debter.services.balance_service import calculate_balances, member_sums
from debter.services.debt_service import arrange_debts

logger = logging.getLogger(__name__)

MAX_KEY_ATTEMPTS = 10


def _unused_room_key(repository: RoomRepository) -> str:
    for _ in range(MAX_KEY_ATTEMPTS):
        key = generate_room_key(settings.ROOM_KEY_LENGTH)
        if not repository.exists(key):
            return key
    raise RuntimeError("Could not generate an unused room key")


def create_room(db: Session, request: RoomCreate) -> Room:
    """Create a room with its members."""
    repository = RoomRepository(db)
    room = Room(
        key=_unused_room_key(repository),
        name=request.name,
        currency=request.currency or Currency(settings.DEFAULT_CURRENCY.upper()),
        rounding=request.rounding if request.rounding is not None else settings.DEFAULT_ROUNDING,
        members=[Member(id=generate_uuid(), name=name) for name in request.members],
    )
    repository.save(room)
    logger.info(f"Created room {room.key} with {len(room.members)} members")
    return room


def update_rounding(db: Session, room_key: str, rounding: float) -> Room:
    """Change the rounding tolerance and rearrange debts with it."""
    repository = RoomRepository(db)
    with repository.use_room(room_key) as room:
        room.rounding = rounding
        arrange_debts(room)
    logger.info(f"Room {room_key} rounding set to {rounding}")
    return room


def get_room_details(room: Room) -> RoomDetailsResponse:
    """Build the response view of a room with balances, payments and debts."""
    balances = calculate_balances(room.members)
    sums = member_sums(room.members)

    payments = [
        PaymentResponse(
            id=payment.id,
            member_id=member.id,
            value=payment.value,
            currency=payment.currency,
            converted_value=payment.converted_value,
            date=as_utc(payment.date),
            note=payment.note,
            included=list(payment.included_member_ids),
            active=payment.active,
        )
        for member in room.members
        for payment in member.payments
    ]
    payments.sort(key=lambda p: p.date, reverse=True)

    return RoomDetailsResponse(
        key=room.key,
        name=room.name,
        currency=room.currency,
        rounding=room.rounding,
        members=[
            MemberResponse(
                id=member.id,
                name=member.name,
                sum=sums[member.id],
                debt=balances[member.id],
            )
            for member in room.members
        ],
        payments=payments,
        debts=[
            DebtResponse(
                from_id=member.id,
                to_id=debt.payee_id,
                value=debt.value,
                currency=debt.currency,
                arranged=debt.arranged,
            )
            for member in room.members
            for debt in member.debts
        ],
    )
