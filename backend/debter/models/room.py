"""
Room model and the members, payments and debt arrangements that belong to it.
"""
from sqlalchemy import (
    Column, String, Float, Boolean, DateTime, Integer, Text, JSON, ForeignKey, Enum as SQLEnum
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from debter.db.base import Base, BaseModel, TimestampMixin, utcnow
import enum


class Currency(str, enum.Enum):
    """Currencies a room can settle in and payments can be entered in."""
    HUF = "HUF"
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    CHF = "CHF"
    CZK = "CZK"
    PLN = "PLN"
    RON = "RON"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    JPY = "JPY"
    KRW = "KRW"
    CAD = "CAD"
    AUD = "AUD"


class Room(BaseModel):
    """Settlement group: members sharing expenses in one currency."""
    __tablename__ = "rooms"

    key = Column(String(16), unique=True, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    currency = Column(SQLEnum(Currency), nullable=False, default=Currency.HUF)
    rounding = Column(Float, nullable=False, default=0.0)  # Residuals within this amount count as settled
    version = Column(Integer, nullable=False)

    # Relationships
    members = relationship(
        "Member",
        back_populates="room",
        order_by="Member.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

    def find_member(self, member_id: str):
        return next((m for m in self.members if m.id == member_id), None)

    def find_payment(self, payment_id: str):
        for member in self.members:
            for payment in member.payments:
                if payment.id == payment_id:
                    return payment
        return None

    @property
    def member_ids(self):
        return [m.id for m in self.members]


class Member(TimestampMixin, Base):
    """Room participant owning a payment history and derived debts."""
    __tablename__ = "members"

    id = Column(String(36), primary_key=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    room = relationship("Room", back_populates="members")
    payments = relationship(
        "Payment",
        back_populates="member",
        order_by="Payment.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    debts = relationship(
        "DebtArrangement",
        back_populates="member",
        foreign_keys="DebtArrangement.member_id",
        order_by="DebtArrangement.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )


class Payment(TimestampMixin, Base):
    """Single expense paid by one member for a subset of the room."""
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True)
    member_id = Column(String(36), ForeignKey("members.id"), nullable=False, index=True)
    value = Column(Float, nullable=False)
    currency = Column(SQLEnum(Currency), nullable=False)
    converted_value = Column(Float, nullable=False)  # Value in the room's currency
    included_member_ids = Column(JSON, nullable=False, default=list)
    active = Column(Boolean, nullable=False, default=True)
    note = Column(Text, nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    member = relationship("Member", back_populates="payments")


class DebtArrangement(BaseModel):
    """Settlement instruction: the owning member pays `value` to the payee."""
    __tablename__ = "debt_arrangements"

    member_id = Column(String(36), ForeignKey("members.id"), nullable=False, index=True)
    payee_id = Column(String(36), ForeignKey("members.id"), nullable=False)
    value = Column(Float, nullable=False)
    currency = Column(SQLEnum(Currency), nullable=False)
    arranged = Column(Boolean, nullable=False, default=False)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    member = relationship("Member", back_populates="debts", foreign_keys=[member_id])
