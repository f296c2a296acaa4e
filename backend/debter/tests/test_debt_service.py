"""
Tests for rearranging a room's debts.
"""
import pytest
from debter.models.room import Currency
from debter.services.balance_service import calculate_balances
from debter.services.debt_service import arrange_debts
from factories import make_debt, make_member, make_payment, make_room


def _debts(room):
    return [
        (member.id, debt.payee_id, debt.value, debt.arranged)
        for member in room.members
        for debt in member.debts
    ]


def test_debts_are_written_on_the_debtor():
    room = make_room(members=[
        make_member("member1", payments=[make_payment("p1", 10.0, ["member1", "member2"])]),
        make_member("member2"),
    ])

    arrange_debts(room)

    assert _debts(room) == [("member2", "member1", pytest.approx(5.0), False)]
    assert room.members[1].debts[0].currency == Currency.HUF


def test_debts_are_replaced_not_appended():
    room = make_room(members=[
        make_member("member1", payments=[make_payment("p1", 10.0, ["member1", "member2"])]),
        make_member("member2", debts=[make_debt("member1", 1.0)]),
    ])

    arrange_debts(room)
    arrange_debts(room)

    assert _debts(room) == [("member2", "member1", pytest.approx(5.0), False)]


def test_payment_cancelling_debt_within_rounding_arranges_it():
    room = make_room(rounding=10.0, members=[
        make_member("member1"),
        make_member("member2", payments=[make_payment("p1", 200.0, ["member1", "member2"])]),
    ])
    arrange_debts(room)
    assert _debts(room) == [("member1", "member2", pytest.approx(100.0), False)]

    room.members[0].payments.append(make_payment("p2", 97.0, ["member2"]))
    arrange_debts(room)

    debts = _debts(room)
    assert len(debts) == 1
    member_id, payee_id, value, arranged = debts[0]
    assert (member_id, payee_id) == ("member1", "member2")
    assert arranged
    assert value == pytest.approx(3.0)


def test_debt_changing_direction_keeps_every_balance_settled():
    room = make_room(rounding=10.0, members=[
        make_member("member1"),
        make_member("member2", payments=[make_payment("p1", 200.0, ["member1", "member2"])]),
    ])
    arrange_debts(room)

    room.members[0].payments.append(make_payment("p2", 390.0, ["member1", "member2"]))
    arrangements = arrange_debts(room)

    outstanding = sum(a.amount for a in arrangements if not a.arranged)
    owed = sum(b for b in calculate_balances(room.members).values() if b > 0)
    assert outstanding == pytest.approx(owed)
    assert _debts(room) == [("member2", "member1", pytest.approx(95.0), False)]


def test_arranged_debt_is_dropped_once_nothing_is_left():
    payment = make_payment("p1", 20.0, ["member1", "member2"])
    room = make_room(members=[
        make_member("member1", payments=[payment]),
        make_member("member2"),
    ])
    arrange_debts(room)

    payment.active = False
    arrange_debts(room)
    assert _debts(room) == [("member2", "member1", 0.0, True)]

    arrange_debts(room)
    assert _debts(room) == []


def test_retire_and_reinstate_restores_debts():
    payment = make_payment("p2", 60.0, ["member1", "member3"])
    room = make_room(members=[
        make_member("member1", payments=[make_payment("p1", 90.0, ["member1", "member2", "member3"])]),
        make_member("member2", payments=[payment]),
        make_member("member3"),
    ])
    arrange_debts(room)
    before = [d for d in _debts(room) if not d[3]]

    payment.active = False
    arrange_debts(room)
    payment.active = True
    arrange_debts(room)

    assert [d for d in _debts(room) if not d[3]] == before


def test_settlement_totals_match_balances():
    room = make_room(members=[
        make_member("a", payments=[make_payment("p1", 120.0, ["a", "b", "c", "d"])]),
        make_member("b", payments=[make_payment("p2", 30.0, ["b", "c"])]),
        make_member("c"),
        make_member("d", payments=[make_payment("p3", 9.99, ["a", "d"])]),
    ])

    arrangements = arrange_debts(room)

    outstanding = sum(a.amount for a in arrangements if not a.arranged)
    owed = sum(b for b in calculate_balances(room.members).values() if b > 0)
    assert outstanding == pytest.approx(owed)
