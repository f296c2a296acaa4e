"""
Builders for transient rooms, members, payments and debts.
"""
from debter.models.room import Room, Member, Payment, DebtArrangement, Currency


def make_payment(payment_id, value, included, active=True, converted_value=None, currency=Currency.HUF):
    return Payment(
        id=payment_id,
        value=value,
        currency=currency,
        converted_value=value if converted_value is None else converted_value,
        included_member_ids=list(included),
        active=active,
        note=None,
    )


def make_debt(payee_id, value, arranged=False, currency=Currency.HUF):
    return DebtArrangement(payee_id=payee_id, value=value, currency=currency, arranged=arranged)


def make_member(member_id, payments=(), debts=()):
    return Member(id=member_id, name=member_id, payments=list(payments), debts=list(debts))


def make_room(key="ROOMID", members=None, rounding=0.0, currency=Currency.HUF):
    if members is None:
        members = [
            make_member("member1", payments=[make_payment("member1payment1", 20.0, ["member1", "member2"])]),
            make_member("member2"),
        ]
    return Room(key=key, name="Test room", currency=currency, rounding=rounding, members=members)
