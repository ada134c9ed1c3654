from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Iterable, Mapping

from pydantic import TypeAdapter, ValidationError

from .exceptions import RecordNotFound, SessionError, ValidationFailed
from .models import Collection, DeliveryType, UserRole
from .schemas import (
    Booking,
    DiagnosticBooking,
    DiagnosticCentre,
    DiagnosticTest,
    Doctor,
    Hospital,
    Medicine,
    Pharmacy,
    PharmacyOrder,
    Schema,
    format_amount,
    format_instant,
    parse_amount,
)
from .seed_data import DIAGNOSTIC_CENTRES, HOSPITALS, PHARMACIES
from .session import SessionContext
from .storage import Storage
from .workflow import (
    BookingStats,
    DiagnosticStats,
    PharmacyStats,
    booking_stats,
    bookings_for_diagnostic_centre,
    bookings_for_doctor,
    bookings_for_hospital,
    bookings_for_patient,
    diagnostic_stats,
    orders_for_pharmacy,
    pharmacy_stats,
    recent,
    transition,
)

logger = logging.getLogger(__name__)


# =========================
# Cataloghi statici
# =========================
PHARMACY_CATALOG: list[Pharmacy] = TypeAdapter(list[Pharmacy]).validate_python(PHARMACIES)
HOSPITAL_CATALOG: list[Hospital] = TypeAdapter(list[Hospital]).validate_python(HOSPITALS)
DIAGNOSTIC_CATALOG: list[DiagnosticCentre] = TypeAdapter(list[DiagnosticCentre]).validate_python(DIAGNOSTIC_CENTRES)


def get_pharmacy(pharmacy_id: int) -> Pharmacy:
    for p in PHARMACY_CATALOG:
        if p.id == pharmacy_id:
            return p
    raise RecordNotFound("pharmacies", pharmacy_id)


def get_hospital(hospital_id: int) -> Hospital | None:
    return next((h for h in HOSPITAL_CATALOG if h.id == hospital_id), None)


def get_diagnostic_centre(diagnostic_id: int) -> DiagnosticCentre:
    for c in DIAGNOSTIC_CATALOG:
        if c.id == diagnostic_id:
            return c
    raise RecordNotFound("diagnostics", diagnostic_id)


# =========================
# Helper
# =========================
def next_id(items: Iterable[Schema]) -> int:
    """Id monotono: massimo esistente + 1 (1 per collezione vuota)."""
    return max((i.id for i in items), default=0) + 1


def format_clock(t: time) -> str:
    """``time(14, 30)`` -> ``'2:30 PM'``."""
    hour = t.hour % 12 or 12
    return f"{hour}:{t.minute:02d} {'AM' if t.hour < 12 else 'PM'}"


def _now(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


def _build(model: type[Schema], collection: Collection, data: dict) -> Schema:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ValidationFailed(collection.value, errors) from e


def _find(items: list, collection: Collection, record_id: int):
    for i, item in enumerate(items):
        if item.id == record_id:
            return i, item
    raise RecordNotFound(collection.value, record_id)


def _gender_label(value: str | None) -> str | None:
    return value.strip().capitalize() if value else None


# =========================
# Prenotazione visita (use case)
# =========================
async def book_appointment(
    storage: Storage,
    session: SessionContext,
    doctor_id: int,
    day: date,
    at: time,
    symptoms: str,
    patient_name: str | None = None,
    patient_age: int | None = None,
    patient_gender: str | None = None,
    now: datetime | None = None,
) -> Booking:
    """
    Use case: Prenotare una visita.
    - i dati paziente arrivano dal profilo di sessione (sovrascrivibili)
    - medico e ospedale sono copiati sulla prenotazione (snapshot)
    - stato iniziale Pending
    """
    user = session.require_role(UserRole.PATIENT)
    doctors = await storage.get_doctors()
    _, doctor = _find(doctors, Collection.DOCTORS, doctor_id)

    hospital = get_hospital(doctor.hospital_id)
    bookings = await storage.get_bookings()

    booking = _build(Booking, Collection.BOOKINGS, {
        "id": next_id(bookings),
        "patientName": patient_name or user.name,
        "patientAge": patient_age if patient_age is not None else user.age,
        "patientGender": patient_gender or _gender_label(user.gender),
        "doctorId": doctor.id,
        "doctorName": doctor.name,
        "hospitalId": doctor.hospital_id,
        "hospitalName": hospital.name if hospital else f"Hospital #{doctor.hospital_id}",
        "date": day.isoformat(),
        "time": format_clock(at),
        "symptoms": symptoms.strip(),
        "status": "Pending",
        "bookedAt": format_instant(_now(now)),
    })

    await storage.save_bookings([*bookings, booking])
    logger.info("Prenotazione %s con %s il %s alle %s", booking.id, doctor.name, booking.date, booking.time)
    return booking


# =========================
# Prenotazione esame (use case)
# =========================
async def book_diagnostic_test(
    storage: Storage,
    session: SessionContext,
    test_id: int,
    diagnostic_id: int,
    day: date,
    at: time,
    patient_phone: str | None = None,
    notes: str | None = None,
    now: datetime | None = None,
) -> DiagnosticBooking:
    user = session.require_role(UserRole.PATIENT)
    tests = await storage.get_diagnostic_tests()
    _, test = _find(tests, Collection.DIAGNOSTIC_TESTS, test_id)
    centre = get_diagnostic_centre(diagnostic_id)

    bookings = await storage.get_diagnostic_bookings()
    booking = _build(DiagnosticBooking, Collection.DIAGNOSTIC_BOOKINGS, {
        "id": next_id(bookings),
        "patientName": user.name,
        "patientAge": user.age,
        "patientGender": _gender_label(user.gender) or "Other",
        "patientPhone": patient_phone or user.phone or "",
        "testName": test.name,
        "testId": test.id,
        "diagnosticId": centre.id,
        "diagnosticName": centre.name,
        "date": day.isoformat(),
        "time": format_clock(at),
        "status": "Pending",
        "price": test.price,
        "bookedAt": format_instant(_now(now)),
        "notes": notes,
    })

    await storage.save_diagnostic_bookings([*bookings, booking])
    logger.info("Esame '%s' prenotato presso %s (id %s)", test.name, centre.name, booking.id)
    return booking


# =========================
# Ordine farmacia (use case)
# =========================
async def place_pharmacy_order(
    storage: Storage,
    session: SessionContext,
    pharmacy_id: int,
    lines: Mapping[int, int],
    delivery_type: DeliveryType | str = DeliveryType.PICKUP,
    patient_address: str | None = None,
    prescription_url: str | None = None,
    notes: str | None = None,
    now: datetime | None = None,
) -> PharmacyOrder:
    """
    Use case: Ordinare farmaci.
    - ``lines``: {medicine_id: quantità}
    - nome, categoria e prezzo unitario vengono copiati dal catalogo (snapshot)
    - quantità oltre la scorta disponibile -> ValidationFailed
    La scorta non viene scalata: l'inventario lo gestisce la farmacia.
    """
    user = session.require_role(UserRole.PATIENT)
    pharmacy = get_pharmacy(pharmacy_id)
    if not lines:
        raise ValidationFailed(Collection.PHARMACY_ORDERS.value, ["items: l'ordine non contiene farmaci"])

    catalog = {m.id: m for m in await storage.get_medicines()}
    items: list[dict] = []
    problems: list[str] = []
    total = Decimal(0)
    for medicine_id, quantity in lines.items():
        medicine: Medicine | None = catalog.get(medicine_id)
        if medicine is None:
            raise RecordNotFound(Collection.MEDICINES.value, medicine_id)
        if quantity > medicine.stock:
            problems.append(f"{medicine.name}: richiesti {quantity}, disponibili {medicine.stock}")
            continue
        subtotal = parse_amount(medicine.price) * quantity
        total += subtotal
        items.append({
            "medicineId": medicine.id,
            "medicineName": medicine.name,
            "quantity": quantity,
            "price": medicine.price,
            "subtotal": format_amount(subtotal),
            "category": medicine.category,
        })
    if problems:
        raise ValidationFailed(Collection.PHARMACY_ORDERS.value, problems)

    if isinstance(delivery_type, enum.Enum):
        delivery_type = delivery_type.value

    at = _now(now)
    orders = await storage.get_pharmacy_orders()
    order = _build(PharmacyOrder, Collection.PHARMACY_ORDERS, {
        "id": next_id(orders),
        "patientName": user.name,
        "patientAge": user.age,
        "patientGender": _gender_label(user.gender) or "Other",
        "patientPhone": user.phone or "",
        "patientAddress": patient_address or user.address or "",
        "items": items,
        "totalAmount": format_amount(total),
        "pharmacyId": pharmacy.id,
        "pharmacyName": pharmacy.name,
        "status": "Pending",
        "orderDate": at.date().isoformat(),
        "orderTime": format_clock(at.time()),
        "deliveryType": delivery_type,
        "prescriptionUrl": prescription_url,
        "notes": notes,
        "orderedAt": format_instant(at),
    })

    await storage.save_pharmacy_orders([*orders, order])
    logger.info("Ordine %s presso %s: %s", order.id, pharmacy.name, order.total_amount)
    return order


# =========================
# Cambi di stato
# =========================
def _check_owner(session: SessionContext | None, owners: dict[UserRole, int | None]) -> None:
    """I provider possono toccare solo i propri record; i pazienti nessuno."""
    if session is None:
        return
    user = session.require_user()
    if user.role not in owners:
        raise SessionError(f"Ruolo '{user.role.value}' non può cambiare lo stato.")
    if session.provider_id(user.role) != owners[user.role]:
        raise SessionError("Record di un altro provider.")


async def update_booking_status(
    storage: Storage, booking_id: int, new_status: enum.Enum | str, session: SessionContext | None = None
) -> Booking:
    """Legge tutta la collezione, applica la transizione, riscrive subito."""
    bookings = await storage.get_bookings()
    idx, booking = _find(bookings, Collection.BOOKINGS, booking_id)
    _check_owner(session, {UserRole.HOSPITAL: booking.hospital_id, UserRole.DOCTOR: booking.doctor_id})

    updated = transition(booking, new_status)
    bookings[idx] = updated
    await storage.save_bookings(bookings)
    logger.info("Prenotazione %s: %s -> %s", booking_id, booking.status.value, updated.status.value)
    return updated


async def update_diagnostic_booking_status(
    storage: Storage, booking_id: int, new_status: enum.Enum | str, session: SessionContext | None = None
) -> DiagnosticBooking:
    bookings = await storage.get_diagnostic_bookings()
    idx, booking = _find(bookings, Collection.DIAGNOSTIC_BOOKINGS, booking_id)
    _check_owner(session, {UserRole.DIAGNOSTIC: booking.diagnostic_id})

    updated = transition(booking, new_status)
    bookings[idx] = updated
    await storage.save_diagnostic_bookings(bookings)
    logger.info("Esame %s: %s -> %s", booking_id, booking.status.value, updated.status.value)
    return updated


async def update_pharmacy_order_status(
    storage: Storage, order_id: int, new_status: enum.Enum | str, session: SessionContext | None = None
) -> PharmacyOrder:
    orders = await storage.get_pharmacy_orders()
    idx, order = _find(orders, Collection.PHARMACY_ORDERS, order_id)
    _check_owner(session, {UserRole.PHARMACY: order.pharmacy_id})

    updated = transition(order, new_status)
    orders[idx] = updated
    await storage.save_pharmacy_orders(orders)
    logger.info("Ordine %s: %s -> %s", order_id, order.status.value, updated.status.value)
    return updated


# =========================
# Gestione cataloghi (provider)
# =========================
def _clean(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


async def add_doctor(
    storage: Storage,
    session: SessionContext,
    name: str,
    specialization: str,
    experience: str,
    timing: str,
    qualification: str | None = None,
    consultation_fee: int | None = None,
    image: str | None = None,
) -> Doctor:
    """
    Use case: l'ospedale aggiunge un medico.
    - ``hospitalId`` preso dal profilo di sessione
    - campi obbligatori vuoti -> ValidationFailed
    """
    hospital_id = session.provider_id(UserRole.HOSPITAL)
    doctors = await storage.get_doctors()
    doctor = _build(Doctor, Collection.DOCTORS, {
        "id": next_id(doctors),
        "name": _clean(name),
        "specialization": _clean(specialization),
        "hospitalId": hospital_id,
        "experience": _clean(experience),
        "timing": _clean(timing),
        "qualification": _clean(qualification),
        "consultationFee": consultation_fee,
        "image": _clean(image),
    })

    await storage.save_doctors([*doctors, doctor])
    logger.info("Medico %s (%s) aggiunto all'ospedale %s", doctor.id, doctor.name, hospital_id)
    return doctor


async def remove_doctor(storage: Storage, session: SessionContext, doctor_id: int) -> Doctor:
    """Rimuove un medico del proprio ospedale. Le prenotazioni esistenti restano (snapshot)."""
    hospital_id = session.provider_id(UserRole.HOSPITAL)
    doctors = await storage.get_doctors()
    idx, doctor = _find(doctors, Collection.DOCTORS, doctor_id)
    if doctor.hospital_id != hospital_id:
        raise SessionError("Medico di un altro ospedale.")

    del doctors[idx]
    await storage.save_doctors(doctors)
    logger.info("Medico %s rimosso dall'ospedale %s", doctor_id, hospital_id)
    return doctor


async def save_diagnostic_test(
    storage: Storage,
    session: SessionContext,
    name: str,
    category: str,
    price: str,
    duration: str,
    description: str | None = None,
    requirements: str | None = None,
    test_id: int | None = None,
) -> DiagnosticTest:
    """
    Use case: il centro diagnostico crea (``test_id=None``) o modifica un esame.
    In modifica l'id e l'immagine restano quelli del record esistente.
    """
    session.require_role(UserRole.DIAGNOSTIC)
    tests = await storage.get_diagnostic_tests()

    idx, current = (None, None) if test_id is None else _find(tests, Collection.DIAGNOSTIC_TESTS, test_id)
    test = _build(DiagnosticTest, Collection.DIAGNOSTIC_TESTS, {
        "id": current.id if current else next_id(tests),
        "name": _clean(name),
        "category": _clean(category),
        "price": _clean(price),
        "duration": _clean(duration),
        "description": _clean(description),
        "requirements": _clean(requirements),
        "image": current.image if current else None,
    })

    if idx is None:
        tests.append(test)
    else:
        tests[idx] = test
    await storage.save_diagnostic_tests(tests)
    logger.info("Esame %s %s", test.id, "aggiornato" if current else "creato")
    return test


async def delete_diagnostic_test(storage: Storage, session: SessionContext, test_id: int) -> DiagnosticTest:
    session.require_role(UserRole.DIAGNOSTIC)
    tests = await storage.get_diagnostic_tests()
    idx, test = _find(tests, Collection.DIAGNOSTIC_TESTS, test_id)

    del tests[idx]
    await storage.save_diagnostic_tests(tests)
    logger.info("Esame %s eliminato", test_id)
    return test


# =========================
# Dashboard
# =========================
@dataclass(frozen=True)
class PharmacyDashboard:
    pharmacy: Pharmacy
    stats: PharmacyStats
    total_medicines: int
    recent_orders: list[PharmacyOrder]


@dataclass(frozen=True)
class BookingsDashboard:
    stats: BookingStats
    bookings: list[Booking]
    recent_bookings: list[Booking]


@dataclass(frozen=True)
class DiagnosticDashboard:
    centre: DiagnosticCentre
    stats: DiagnosticStats
    bookings: list[DiagnosticBooking]
    recent_bookings: list[DiagnosticBooking]


@dataclass(frozen=True)
class MyBookings:
    bookings: list[Booking]
    diagnostic_bookings: list[DiagnosticBooking]
    pharmacy_orders: list[PharmacyOrder]
    stats: BookingStats


async def pharmacy_dashboard(storage: Storage, session: SessionContext, recent_limit: int = 3) -> PharmacyDashboard:
    pharmacy_id = session.provider_id(UserRole.PHARMACY)
    orders = orders_for_pharmacy(await storage.get_pharmacy_orders(), pharmacy_id)
    medicines = await storage.get_medicines()
    return PharmacyDashboard(
        pharmacy=get_pharmacy(pharmacy_id),
        stats=pharmacy_stats(orders),
        total_medicines=len(medicines),
        recent_orders=recent(orders, recent_limit),
    )


async def hospital_dashboard(storage: Storage, session: SessionContext, recent_limit: int = 3) -> BookingsDashboard:
    hospital_id = session.provider_id(UserRole.HOSPITAL)
    bookings = recent(bookings_for_hospital(await storage.get_bookings(), hospital_id))
    return BookingsDashboard(booking_stats(bookings), bookings, bookings[:recent_limit])


async def doctor_dashboard(storage: Storage, session: SessionContext, recent_limit: int = 3) -> BookingsDashboard:
    doctor_id = session.provider_id(UserRole.DOCTOR)
    bookings = recent(bookings_for_doctor(await storage.get_bookings(), doctor_id))
    return BookingsDashboard(booking_stats(bookings), bookings, bookings[:recent_limit])


async def diagnostic_dashboard(storage: Storage, session: SessionContext, recent_limit: int = 3) -> DiagnosticDashboard:
    diagnostic_id = session.provider_id(UserRole.DIAGNOSTIC)
    bookings = bookings_for_diagnostic_centre(await storage.get_diagnostic_bookings(), diagnostic_id)
    return DiagnosticDashboard(
        centre=get_diagnostic_centre(diagnostic_id),
        stats=diagnostic_stats(bookings),
        bookings=bookings,
        recent_bookings=recent(bookings, recent_limit),
    )


async def my_bookings(storage: Storage, session: SessionContext) -> MyBookings:
    """Storico del paziente (match sul nome, senza distinzione maiuscole), più recenti prima."""
    user = session.require_role(UserRole.PATIENT)
    bookings = recent(bookings_for_patient(await storage.get_bookings(), user.name))
    return MyBookings(
        bookings=bookings,
        diagnostic_bookings=recent(bookings_for_patient(await storage.get_diagnostic_bookings(), user.name)),
        pharmacy_orders=recent(bookings_for_patient(await storage.get_pharmacy_orders(), user.name)),
        stats=booking_stats(bookings),
    )


# =========================
# Catalogo farmaci
# =========================
def stock_label(stock: int) -> str:
    if stock > 100:
        return "In Stock"
    if stock > 50:
        return "Limited"
    if stock > 0:
        return "Low Stock"
    return "Out of Stock"


async def search_medicines(storage: Storage, query: str = "", category: str | None = None) -> list[Medicine]:
    """Filtro per categoria (esatto, case-insensitive) e testo su nome/categoria/produttore."""
    medicines = await storage.get_medicines()
    if category and category.lower() != "all":
        wanted = category.strip().lower()
        medicines = [m for m in medicines if m.category.lower() == wanted]

    q = query.strip().lower()
    if q:
        medicines = [
            m for m in medicines
            if q in m.name.lower() or q in m.category.lower() or q in (m.manufacturer or "").lower()
        ]
    return medicines


async def medicine_categories(storage: Storage) -> list[str]:
    """Filtri per la ricerca: ``'all'`` più le categorie presenti (minuscole, in ordine di comparsa)."""
    seen = dict.fromkeys(m.category.lower() for m in await storage.get_medicines())
    return ["all", *seen]
