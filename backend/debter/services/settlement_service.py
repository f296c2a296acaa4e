"""
Settlement planning: turn net balances into directed transfers between members.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# Floor for the rounding tolerance, absorbs float noise when a room allows no rounding
FLOAT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Transfer:
    """Represents a single transfer between members."""
    from_id: str
    to_id: str
    amount: float


@dataclass
class SettlementPlan:
    """Transfers settling a room plus what each member has left unsettled."""
    transfers: List[Transfer] = field(default_factory=list)
    leftovers: Dict[str, float] = field(default_factory=dict)  # positive = debt, negative = claim


@dataclass(frozen=True)
class Arrangement:
    """Settlement instruction as stored on the paying member."""
    from_id: str
    to_id: str
    amount: float
    arranged: bool = False


def tolerance_for(rounding: float) -> float:
    return max(rounding or 0.0, FLOAT_TOLERANCE)


def _largest(remaining: Dict[str, float]) -> Tuple[str, float]:
    # Largest amount first, smallest member id on ties
    return min(remaining.items(), key=lambda item: (-item[1], item[0]))


def plan_settlement(balances: Dict[str, float], rounding: float = 0.0) -> SettlementPlan:
    """
    Match debtors with creditors, largest first.

    The greedy matching is not guaranteed to be the minimal number of
    transfers, but it never emits more than (members with a balance) - 1.

    Args:
        balances: member id -> net balance (positive owes, negative is owed)
        rounding: remaining amounts within this tolerance count as settled

    Returns:
        SettlementPlan with the transfers and the unsettled leftovers
    """
    tolerance = tolerance_for(rounding)

    debts = {mid: bal for mid, bal in balances.items() if bal > tolerance}
    claims = {mid: -bal for mid, bal in balances.items() if bal < -tolerance}
    leftovers = {
        mid: bal for mid, bal in balances.items()
        if mid not in debts and mid not in claims
    }

    transfers = []
    while debts and claims:
        debtor_id, debt = _largest(debts)
        creditor_id, claim = _largest(claims)

        amount = min(debt, claim)
        transfers.append(Transfer(debtor_id, creditor_id, amount))

        debts[debtor_id] = debt - amount
        claims[creditor_id] = claim - amount

        if debts[debtor_id] <= tolerance:
            leftovers[debtor_id] = debts.pop(debtor_id)
        if claims[creditor_id] <= tolerance:
            leftovers[creditor_id] = -claims.pop(creditor_id)

    # Float drift can leave one side with nobody to settle against
    leftovers.update(debts)
    leftovers.update({mid: -claim for mid, claim in claims.items()})

    return SettlementPlan(transfers=transfers, leftovers=leftovers)


def merge_arrangements(previous: List[Arrangement], plan: SettlementPlan) -> List[Arrangement]:
    """
    Combine a fresh plan with the instructions it supersedes.

    Every fresh transfer is emitted as outstanding. A previous instruction is
    only kept when neither direction of its pair has a fresh transfer:

    - an outstanding one becomes arranged, with the leftover still open
      between the two members (within the rounding tolerance);
    - an already arranged one is carried over while some leftover remains,
      and dropped once nothing is left between the pair.
    """
    fresh_pairs = {(t.from_id, t.to_id) for t in plan.transfers}
    seen = set()
    merged = []

    for old in previous:
        pair = (old.from_id, old.to_id)
        if pair in seen:
            continue
        seen.add(pair)
        if pair in fresh_pairs or (old.to_id, old.from_id) in fresh_pairs:
            continue

        residual = max(0.0, min(
            plan.leftovers.get(old.from_id, 0.0),
            -plan.leftovers.get(old.to_id, 0.0),
        ))
        if old.arranged and residual <= FLOAT_TOLERANCE:
            continue
        merged.append(Arrangement(old.from_id, old.to_id, residual, arranged=True))

    merged.extend(Arrangement(t.from_id, t.to_id, t.amount) for t in plan.transfers)
    return merged
