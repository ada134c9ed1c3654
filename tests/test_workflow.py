from __future__ import annotations

import pytest

from conftest import make_order
from healthhub.exceptions import InvalidTransitionError
from healthhub.models import BookingStatus, DiagnosticBookingStatus, PharmacyOrderStatus
from healthhub.schemas import Booking, DiagnosticBooking
from healthhub.seed_data import INITIAL_BOOKINGS, INITIAL_DIAGNOSTIC_BOOKINGS
from healthhub.workflow import (
    allowed_transitions,
    booking_stats,
    bookings_for_patient,
    diagnostic_stats,
    is_terminal,
    orders_for_pharmacy,
    pharmacy_stats,
    recent,
    transition,
)

P = PharmacyOrderStatus


# =========================
# Ordini farmacia
# =========================
def test_happy_path_to_delivered():
    order = make_order(1)
    for status in ("Accepted", "Preparing", "Ready for Pickup", "Delivered"):
        order = transition(order, status)
    assert order.status is P.DELIVERED
    assert is_terminal(order.status)


def test_delivered_cannot_go_back_to_pending():
    with pytest.raises(InvalidTransitionError) as exc:
        transition(make_order(1, status="Delivered"), "Pending")
    assert exc.value.current == "Delivered"
    assert exc.value.requested == "Pending"


def test_cancelled_is_terminal():
    with pytest.raises(InvalidTransitionError):
        transition(make_order(1, status="Cancelled"), P.ACCEPTED)


@pytest.mark.parametrize("status", ["Pending", "Accepted", "Preparing", "Ready for Pickup"])
def test_cancel_from_any_open_state(status):
    assert transition(make_order(1, status=status), P.CANCELLED).status is P.CANCELLED


def test_skipping_a_step_is_rejected():
    with pytest.raises(InvalidTransitionError):
        transition(make_order(1), "Delivered")


def test_same_status_is_rejected():
    with pytest.raises(InvalidTransitionError):
        transition(make_order(1, status="Preparing"), "Preparing")


@pytest.mark.parametrize("token", ["Shipped", "pending", "", "Sample Collected"])
def test_unknown_token_is_rejected(token):
    with pytest.raises(InvalidTransitionError) as exc:
        transition(make_order(1), token)
    assert "sconosciuto" in str(exc.value)


def test_foreign_enum_member_is_mapped_by_value():
    # "Accepted" esiste in entrambi i vocabolari
    assert transition(make_order(1), BookingStatus.ACCEPTED).status is P.ACCEPTED


def test_transition_returns_copy():
    order = make_order(1)
    updated = transition(order, "Accepted")

    assert order.status is P.PENDING
    assert updated.status is P.ACCEPTED
    assert updated.id == order.id
    assert updated.items == order.items


def test_allowed_transitions():
    assert allowed_transitions(P.PENDING) == [P.ACCEPTED, P.CANCELLED]
    assert allowed_transitions(P.READY_FOR_PICKUP) == [P.DELIVERED, P.CANCELLED]
    assert allowed_transitions(P.DELIVERED) == []


# =========================
# Prenotazioni
# =========================
def _booking(status: str) -> Booking:
    return Booking.model_validate(dict(INITIAL_BOOKINGS[0], status=status))


def _diagnostic(status: str) -> DiagnosticBooking:
    return DiagnosticBooking.model_validate(dict(INITIAL_DIAGNOSTIC_BOOKINGS[0], status=status))


def test_booking_lifecycle():
    booking = transition(_booking("Pending"), "Accepted")
    booking = transition(booking, "Completed")
    assert booking.status is BookingStatus.COMPLETED

    with pytest.raises(InvalidTransitionError):
        transition(booking, "Rejected")


def test_booking_cannot_complete_while_pending():
    with pytest.raises(InvalidTransitionError):
        transition(_booking("Pending"), "Completed")


def test_booking_rejects_pharmacy_vocabulary():
    with pytest.raises(InvalidTransitionError):
        transition(_booking("Pending"), "Cancelled")


def test_diagnostic_lifecycle():
    booking = _diagnostic("Pending")
    for status in ("Accepted", "Sample Collected", "Results Ready", "Completed"):
        booking = transition(booking, status)
    assert booking.status is DiagnosticBookingStatus.COMPLETED
    assert is_terminal(booking.status)


def test_diagnostic_cannot_reject_after_sample():
    with pytest.raises(InvalidTransitionError):
        transition(_diagnostic("Sample Collected"), "Rejected")


# =========================
# Aggregati
# =========================
def test_pharmacy_stats_for_one_pharmacy():
    orders = [
        make_order(1, status="Pending"),
        make_order(2, status="Accepted"),
        make_order(3, status="Preparing"),
        make_order(4, status="Delivered"),
        make_order(5, status="Cancelled"),
        make_order(6, pharmacy_id=2, status="Accepted"),
    ]

    stats = pharmacy_stats(orders, pharmacy_id=1)

    assert stats.total == 5
    assert stats.pending == 1
    assert stats.active == 2
    assert stats.ready == 0
    assert stats.completed == 1
    assert stats.cancelled == 1
    assert len(orders_for_pharmacy(orders, 2)) == 1


def test_booking_and_diagnostic_stats_on_seed():
    bookings = [Booking.model_validate(b) for b in INITIAL_BOOKINGS]
    stats = booking_stats(bookings)
    assert (stats.total, stats.pending, stats.accepted, stats.completed, stats.rejected) == (4, 2, 1, 1, 0)

    diag = [DiagnosticBooking.model_validate(b) for b in INITIAL_DIAGNOSTIC_BOOKINGS]
    dstats = diagnostic_stats(diag)
    assert dstats.total == 8
    assert dstats.pending == 3
    assert dstats.in_progress == 3
    assert dstats.completed == 2


def test_recent_orders_newest_first_and_truncated():
    orders = [
        make_order(1, ordered_at="2025-11-01T10:00:00Z"),
        make_order(2, ordered_at="2025-11-01T12:00:00Z"),
        make_order(3, ordered_at="2025-11-01T11:00:00Z"),
    ]

    assert [o.id for o in recent(orders)] == [2, 3, 1]
    assert [o.id for o in recent(orders, 2)] == [2, 3]
    assert recent(orders, 0) == []
    assert recent([], 3) == []


def test_recent_compares_instants_not_strings():
    orders = [
        make_order(1, ordered_at="2025-11-01T10:00:00.500Z"),
        make_order(2, ordered_at="2025-11-01T10:00:00Z"),
        make_order(3, ordered_at="2025-11-01T11:30:00+01:00"),
    ]
    # 11:30+01:00 == 10:30Z
    assert [o.id for o in recent(orders)] == [3, 1, 2]


def test_recent_is_stable_for_equal_instants():
    orders = [make_order(i) for i in (1, 2, 3)]
    assert [o.id for o in recent(orders)] == [1, 2, 3]


def test_bookings_for_patient_ignores_case_and_spaces():
    orders = [make_order(1, patient_name="Samuel Rick"), make_order(2, patient_name="Someone Else")]
    assert [o.id for o in bookings_for_patient(orders, "  samuel rick ")] == [1]
