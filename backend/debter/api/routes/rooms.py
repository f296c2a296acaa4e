"""
Room management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from debter.api.dependencies import to_http_error
from debter.core.exceptions import DebterError
from debter.db.session import get_db
from debter.repositories.room_repository import RoomRepository
from debter.schemas.room import RoomCreate, RoomDetailsResponse, RoundingUpdate
from debter.services.room_service import create_room, get_room_details, update_rounding

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.post("", response_model=RoomDetailsResponse, status_code=status.HTTP_201_CREATED)
def create_new_room(
    room_data: RoomCreate,
    db: Session = Depends(get_db)
):
    """Create a new room with its members."""
    try:
        room = create_room(db, room_data)
        return get_room_details(room)
    except DebterError as e:
        raise to_http_error(e)


@router.get("/{room_key}", response_model=RoomDetailsResponse)
def get_room(
    room_key: str,
    db: Session = Depends(get_db)
):
    """Get a room with balances, payments and debts."""
    try:
        room = RoomRepository(db).find_by_key(room_key)
        return get_room_details(room)
    except DebterError as e:
        raise to_http_error(e)


@router.patch("/{room_key}/rounding", response_model=RoomDetailsResponse)
def set_rounding(
    room_key: str,
    rounding_data: RoundingUpdate,
    db: Session = Depends(get_db)
):
    """Change the room's rounding tolerance."""
    try:
        room = update_rounding(db, room_key, rounding_data.rounding)
        return get_room_details(room)
    except DebterError as e:
        raise to_http_error(e)
