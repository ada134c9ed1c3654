"""
Ciclo di vita degli stati (prenotazioni visite, esami, ordini farmacia).

Ogni cambio di stato passa da ``transition()``: gli stati terminali non si
lasciano più e i token sconosciuti vengono rifiutati.
Le funzioni di aggregazione servono alle dashboard dei provider.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

from .exceptions import InvalidTransitionError
from .models import BookingStatus, DiagnosticBookingStatus, PharmacyOrderStatus
from .schemas import Booking, DiagnosticBooking, PharmacyOrder, parse_instant

R = TypeVar("R", Booking, DiagnosticBooking, PharmacyOrder)
T = TypeVar("T")

B = BookingStatus
D = DiagnosticBookingStatus
P = PharmacyOrderStatus


# =========================
# Tabelle delle transizioni
# =========================
BOOKING_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    B.PENDING: frozenset({B.ACCEPTED, B.REJECTED}),
    B.ACCEPTED: frozenset({B.COMPLETED, B.REJECTED}),
    B.REJECTED: frozenset(),
    B.COMPLETED: frozenset(),
}

DIAGNOSTIC_TRANSITIONS: dict[DiagnosticBookingStatus, frozenset[DiagnosticBookingStatus]] = {
    D.PENDING: frozenset({D.ACCEPTED, D.REJECTED}),
    D.ACCEPTED: frozenset({D.SAMPLE_COLLECTED, D.REJECTED}),
    D.SAMPLE_COLLECTED: frozenset({D.RESULTS_READY}),
    D.RESULTS_READY: frozenset({D.COMPLETED}),
    D.REJECTED: frozenset(),
    D.COMPLETED: frozenset(),
}

# Cancelled raggiungibile da ogni stato non terminale
PHARMACY_TRANSITIONS: dict[PharmacyOrderStatus, frozenset[PharmacyOrderStatus]] = {
    P.PENDING: frozenset({P.ACCEPTED, P.CANCELLED}),
    P.ACCEPTED: frozenset({P.PREPARING, P.CANCELLED}),
    P.PREPARING: frozenset({P.READY_FOR_PICKUP, P.CANCELLED}),
    P.READY_FOR_PICKUP: frozenset({P.DELIVERED, P.CANCELLED}),
    P.DELIVERED: frozenset(),
    P.CANCELLED: frozenset(),
}

_TABLES: dict[type, dict] = {
    BookingStatus: BOOKING_TRANSITIONS,
    DiagnosticBookingStatus: DIAGNOSTIC_TRANSITIONS,
    PharmacyOrderStatus: PHARMACY_TRANSITIONS,
}


def _table_for(status: enum.Enum) -> dict:
    return _TABLES[type(status)]


def is_terminal(status: enum.Enum) -> bool:
    return not _table_for(status)[status]


def allowed_transitions(status: enum.Enum) -> list[enum.Enum]:
    """Stati raggiungibili, nell'ordine di dichiarazione dell'enum."""
    targets = _table_for(status)[status]
    return [s for s in type(status) if s in targets]


def _coerce(status_type: type[enum.Enum], current: enum.Enum, value: enum.Enum | str) -> enum.Enum:
    if isinstance(value, status_type):
        return value
    if isinstance(value, enum.Enum):
        value = value.value
    try:
        return status_type(value)
    except ValueError:
        raise InvalidTransitionError(current.value, str(value), "stato sconosciuto") from None


def transition(record: R, new_status: enum.Enum | str) -> R:
    """
    Ritorna una copia del record con il nuovo stato (l'originale non cambia).
    Solleva InvalidTransitionError se:
    - il token non appartiene al vocabolario dell'entità
    - lo stato attuale è terminale
    - la coppia (attuale, nuovo) non è in tabella
    """
    current = record.status
    target = _coerce(type(current), current, new_status)

    if is_terminal(current):
        raise InvalidTransitionError(current.value, target.value, "stato terminale")
    if target not in _table_for(current)[current]:
        raise InvalidTransitionError(current.value, target.value)
    return record.model_copy(update={"status": target})


# =========================
# Filtri per provider
# =========================
def orders_for_pharmacy(orders: Iterable[PharmacyOrder], pharmacy_id: int) -> list[PharmacyOrder]:
    return [o for o in orders if o.pharmacy_id == pharmacy_id]


def bookings_for_hospital(bookings: Iterable[Booking], hospital_id: int) -> list[Booking]:
    return [b for b in bookings if b.hospital_id == hospital_id]


def bookings_for_doctor(bookings: Iterable[Booking], doctor_id: int) -> list[Booking]:
    return [b for b in bookings if b.doctor_id == doctor_id]


def bookings_for_diagnostic_centre(bookings: Iterable[DiagnosticBooking], diagnostic_id: int) -> list[DiagnosticBooking]:
    return [b for b in bookings if b.diagnostic_id == diagnostic_id]


def bookings_for_patient(bookings: Iterable[R], patient_name: str) -> list[R]:
    name = patient_name.strip().lower()
    return [b for b in bookings if b.patient_name.strip().lower() == name]


# =========================
# Aggregati dashboard
# =========================
@dataclass(frozen=True)
class PharmacyStats:
    total: int
    pending: int
    active: int
    ready: int
    completed: int
    cancelled: int


@dataclass(frozen=True)
class BookingStats:
    total: int
    pending: int
    accepted: int
    completed: int
    rejected: int


@dataclass(frozen=True)
class DiagnosticStats:
    total: int
    pending: int
    in_progress: int
    completed: int
    rejected: int


def _count(records: list, *statuses: enum.Enum) -> int:
    return sum(1 for r in records if r.status in statuses)


def pharmacy_stats(orders: Iterable[PharmacyOrder], pharmacy_id: int | None = None) -> PharmacyStats:
    """active = Accepted + Preparing, completed = Delivered."""
    mine = list(orders) if pharmacy_id is None else orders_for_pharmacy(orders, pharmacy_id)
    return PharmacyStats(
        total=len(mine),
        pending=_count(mine, P.PENDING),
        active=_count(mine, P.ACCEPTED, P.PREPARING),
        ready=_count(mine, P.READY_FOR_PICKUP),
        completed=_count(mine, P.DELIVERED),
        cancelled=_count(mine, P.CANCELLED),
    )


def booking_stats(bookings: Iterable[Booking]) -> BookingStats:
    items = list(bookings)
    return BookingStats(
        total=len(items),
        pending=_count(items, B.PENDING),
        accepted=_count(items, B.ACCEPTED),
        completed=_count(items, B.COMPLETED),
        rejected=_count(items, B.REJECTED),
    )


def diagnostic_stats(bookings: Iterable[DiagnosticBooking]) -> DiagnosticStats:
    items = list(bookings)
    return DiagnosticStats(
        total=len(items),
        pending=_count(items, D.PENDING),
        in_progress=_count(items, D.ACCEPTED, D.SAMPLE_COLLECTED),
        completed=_count(items, D.COMPLETED, D.RESULTS_READY),
        rejected=_count(items, D.REJECTED),
    )


def _instant_of(record) -> str:
    return record.ordered_at if isinstance(record, PharmacyOrder) else record.booked_at


def recent(items: Iterable[T], limit: int | None = None, key: Callable[[T], str] | None = None) -> list[T]:
    """
    Più recenti prima (ordinamento stabile sull'istante ISO), poi i primi ``limit``.
    Di default usa ``orderedAt`` per gli ordini e ``bookedAt`` per le prenotazioni.
    """
    key = key or _instant_of
    ordered = sorted(items, key=lambda r: parse_instant(key(r)), reverse=True)
    return ordered if limit is None else ordered[: max(limit, 0)]
