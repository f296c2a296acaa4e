"""
Debt arrangement for a room: recompute every member's settlement instructions.
"""
import logging
from typing import List
from debter.models.room import Room, DebtArrangement
from debter.services.balance_service import calculate_balances
from debter.services.settlement_service import (
    Arrangement, plan_settlement, merge_arrangements
)

logger = logging.getLogger(__name__)


def current_arrangements(room: Room) -> List[Arrangement]:
    """Instructions currently stored on the room's members."""
    return [
        Arrangement(member.id, debt.payee_id, debt.value, bool(debt.arranged))
        for member in room.members
        for debt in member.debts
    ]


def arrange_debts(room: Room) -> List[Arrangement]:
    """
    Recompute balances from the active payments and replace every member's debts.

    Runs from scratch on each call; the previous instructions are only used to
    mark settled pairs as arranged.
    """
    balances = calculate_balances(room.members)
    plan = plan_settlement(balances, room.rounding)
    arrangements = merge_arrangements(current_arrangements(room), plan)

    by_member = {member.id: [] for member in room.members}
    for arrangement in arrangements:
        by_member[arrangement.from_id].append(arrangement)

    for member in room.members:
        member.debts = [
            DebtArrangement(
                payee_id=a.to_id,
                value=a.amount,
                currency=room.currency,
                arranged=a.arranged,
            )
            for a in by_member[member.id]
        ]

    logger.info(
        f"Arranged debts for room {room.key}: {len(plan.transfers)} transfers, "
        f"{sum(1 for a in arrangements if a.arranged)} arranged"
    )
    return arrangements
