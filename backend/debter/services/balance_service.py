"""
Balance calculation for a room.

Every member is assumed to share every payment equally. A payment that only
benefits some members credits each excluded member with the share they would
have paid, which cancels the default assumption for them. The net balance of
a member is the average contribution minus their own contribution: negative
means the member is owed money, positive means the member owes money.
"""
from typing import Dict, List
from debter.core.exceptions import EmptyRoomError, InvalidPaymentError, InvalidMemberError


def _active_payments(members):
    for member in members:
        for payment in member.payments:
            if payment.active:
                yield member.id, payment


def member_contributions(members: List) -> Dict[str, float]:
    """Contribution tally of each member, including shares credited for exclusion."""
    member_ids = [m.id for m in members]
    if not member_ids:
        raise EmptyRoomError()
    known = set(member_ids)

    contributions = {member_id: 0.0 for member_id in member_ids}
    for payer_id, payment in _active_payments(members):
        included = list(payment.included_member_ids or [])
        if not included:
            raise InvalidPaymentError(f"Payment {payment.id} has no included members")
        for member_id in included:
            if member_id not in known:
                raise InvalidMemberError(member_id)

        value = payment.converted_value
        contributions[payer_id] += value

        share = value / len(included)
        for member_id in member_ids:
            if member_id not in included:
                contributions[member_id] += share

    return contributions


def calculate_balances(members: List) -> Dict[str, float]:
    """
    Net balance of every member of a room.

    Args:
        members: Room members with their payments (inactive payments are ignored)

    Returns:
        member id -> net balance, summing to zero across the room
    """
    contributions = member_contributions(members)
    pool_average = sum(contributions.values()) / len(contributions)
    return {
        member_id: pool_average - contribution
        for member_id, contribution in contributions.items()
    }


def member_sums(members: List) -> Dict[str, float]:
    """Total converted value each member actually paid, active payments only."""
    sums = {member.id: 0.0 for member in members}
    for payer_id, payment in _active_payments(members):
        sums[payer_id] += payment.converted_value
    return sums
