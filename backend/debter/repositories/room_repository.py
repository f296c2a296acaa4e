"""
Room persistence with per-room serialization of read-modify-write cycles.
"""
import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError
from debter.core.exceptions import RoomNotFoundError, ConcurrentModificationError
from debter.db.base import utcnow
from debter.models.room import Room, Member

logger = logging.getLogger(__name__)

# Entries vanish once no request holds the lock
_locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_locks_guard = threading.Lock()


def room_lock(room_key: str) -> threading.Lock:
    """Process-wide lock for one room key."""
    with _locks_guard:
        lock = _locks.get(room_key)
        if lock is None:
            lock = _locks[room_key] = threading.Lock()
        return lock


class RoomRepository:
    """Loads and saves whole rooms."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_key(self, room_key: str) -> Room:
        room = self.db.query(Room).options(
            selectinload(Room.members).selectinload(Member.payments),
            selectinload(Room.members).selectinload(Member.debts),
        ).filter(Room.key == room_key).first()
        if not room:
            raise RoomNotFoundError(room_key)
        return room

    def exists(self, room_key: str) -> bool:
        return self.db.query(Room.id).filter(Room.key == room_key).first() is not None

    def save(self, room: Room) -> Room:
        """Write the whole room; fails if another writer saved it first."""
        # Touch the room row so the version check runs even when only children changed
        room.updated_at = utcnow()
        self.db.add(room)
        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            logger.warning(f"Concurrent modification of room {room.key}")
            raise ConcurrentModificationError(room.key)
        self.db.refresh(room)
        return room

    @contextmanager
    def use_room(self, room_key: str) -> Iterator[Room]:
        """
        Load a room, hand it to the caller for modification and save it.

        The room key's lock is held for the whole cycle. Any error raised by
        the caller rolls back the session so the stored room stays untouched.
        """
        with room_lock(room_key):
            room = self.find_by_key(room_key)
            try:
                yield room
            except Exception:
                self.db.rollback()
                raise
            self.save(room)
