from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal

import pytest

from healthhub import services
from healthhub.exceptions import InvalidTransitionError, RecordNotFound, SessionError, ValidationFailed
from healthhub.models import BookingStatus, DeliveryType, DiagnosticBookingStatus, PharmacyOrderStatus, UserRole
from healthhub.schemas import UserData, format_amount, parse_amount
from healthhub.seed import initialize_app_data
from healthhub.session import SessionContext, open_session

NOW = datetime(2025, 11, 2, 14, 5, tzinfo=timezone.utc)


@pytest.fixture
async def seeded(storage):
    report = await initialize_app_data(storage)
    assert report.ok
    return storage


@pytest.fixture
async def patient(seeded):
    return await open_session(seeded)


def provider(role: UserRole, name: str = "Provider", **ids) -> SessionContext:
    return SessionContext(user=UserData(name=name, role=role, **ids), authenticated=True)


# =========================
# Prenotazioni
# =========================
async def test_book_appointment_copies_profile_and_doctor(seeded, patient):
    booking = await services.book_appointment(
        seeded, patient, doctor_id=1, day=date(2025, 11, 10), at=time(14, 30), symptoms=" Fever ", now=NOW,
    )

    assert booking.id == 5
    assert booking.patient_name == "Samuel Rick"
    assert booking.patient_age == 21
    assert booking.patient_gender == "Male"
    assert booking.doctor_name == "Dr. Arjun Rao"
    assert booking.hospital_name == "Manipal Hospital Vijayawada"
    assert booking.date == "2025-11-10"
    assert booking.time == "2:30 PM"
    assert booking.symptoms == "Fever"
    assert booking.status is BookingStatus.PENDING
    assert booking.booked_at == "2025-11-02T14:05:00.000Z"

    stored = await seeded.get_bookings()
    assert stored[-1] == booking


async def test_book_appointment_unknown_doctor(seeded, patient):
    with pytest.raises(RecordNotFound):
        await services.book_appointment(seeded, patient, 99, date(2025, 11, 10), time(10, 0), "Cough")


async def test_only_patients_can_book(seeded):
    with pytest.raises(SessionError):
        await services.book_appointment(
            seeded, provider(UserRole.PHARMACY, pharmacy_id=1), 1, date(2025, 11, 10), time(10, 0), "Cough",
        )


async def test_anonymous_cannot_book(seeded):
    with pytest.raises(SessionError):
        await services.book_appointment(
            seeded, SessionContext(user=None, authenticated=False), 1, date(2025, 11, 10), time(10, 0), "Cough",
        )


async def test_book_diagnostic_test(seeded, patient):
    booking = await services.book_diagnostic_test(
        seeded, patient, test_id=2, diagnostic_id=3, day=date(2025, 11, 12), at=time(9, 0), now=NOW,
    )

    assert booking.id == 9
    assert booking.test_name == "Chest X-Ray"
    assert booking.price == "₹800"
    assert booking.diagnostic_name == "Hope Diagnostic Center"
    assert booking.patient_phone == "70134 02809"
    assert booking.time == "9:00 AM"
    assert booking.status is DiagnosticBookingStatus.PENDING
    assert len(await seeded.get_diagnostic_bookings()) == 9


async def test_book_diagnostic_test_unknown_centre(seeded, patient):
    with pytest.raises(RecordNotFound):
        await services.book_diagnostic_test(seeded, patient, 2, 42, date(2025, 11, 12), time(9, 0))


# =========================
# Ordini farmacia
# =========================
async def test_place_order_builds_items_and_total(seeded, patient):
    order = await services.place_pharmacy_order(
        seeded, patient, pharmacy_id=1, lines={1: 2, 5: 1},
        delivery_type=DeliveryType.HOME_DELIVERY, notes="Ring twice", now=NOW,
    )

    assert order.id == 9
    assert order.pharmacy_name == "Rapha Medicals"
    assert [(i.medicine_name, i.quantity, i.price, i.subtotal) for i in order.items] == [
        ("Paracetamol 500mg", 2, "₹25", "₹50"),
        ("Vitamin D3 1000 IU", 1, "₹60", "₹60"),
    ]
    assert order.total_amount == "₹110"
    assert order.status is PharmacyOrderStatus.PENDING
    assert order.delivery_type is DeliveryType.HOME_DELIVERY
    assert order.patient_address == "vijawada"
    assert order.order_date == "2025-11-02"
    assert order.order_time == "2:05 PM"
    assert order.ordered_at == "2025-11-02T14:05:00.000Z"

    # la scorta non viene scalata
    medicines = {m.id: m for m in await seeded.get_medicines()}
    assert medicines[1].stock == 120


async def test_order_lines_are_snapshots(seeded, patient):
    order = await services.place_pharmacy_order(seeded, patient, 1, {1: 1}, now=NOW)

    medicines = await seeded.get_medicines()
    medicines[0] = medicines[0].model_copy(update={"price": "₹99", "name": "Paracetamol 650mg"})
    await seeded.save_medicines(medicines)

    stored = {o.id: o for o in await seeded.get_pharmacy_orders()}[order.id]
    assert stored.items[0].medicine_name == "Paracetamol 500mg"
    assert stored.items[0].price == "₹25"


async def test_order_above_stock_is_rejected(seeded, patient):
    with pytest.raises(ValidationFailed) as exc:
        await services.place_pharmacy_order(seeded, patient, 1, {18: 26})

    assert "Insulin Glargine" in str(exc.value)
    assert len(await seeded.get_pharmacy_orders()) == 8


async def test_order_errors(seeded, patient):
    with pytest.raises(RecordNotFound):
        await services.place_pharmacy_order(seeded, patient, 1, {999: 1})
    with pytest.raises(RecordNotFound):
        await services.place_pharmacy_order(seeded, patient, 77, {1: 1})
    with pytest.raises(ValidationFailed):
        await services.place_pharmacy_order(seeded, patient, 1, {})
    with pytest.raises(ValidationFailed):
        await services.place_pharmacy_order(seeded, patient, 1, {1: 0})


# =========================
# Cambi di stato
# =========================
async def test_pharmacy_advances_its_own_order(seeded):
    session = provider(UserRole.PHARMACY, "Rapha Medicals", pharmacy_id=1)

    updated = await services.update_pharmacy_order_status(seeded, 1, "Accepted", session)

    assert updated.status is PharmacyOrderStatus.ACCEPTED
    stored = {o.id: o for o in await seeded.get_pharmacy_orders()}
    assert stored[1].status is PharmacyOrderStatus.ACCEPTED
    assert stored[2].status is PharmacyOrderStatus.ACCEPTED


async def test_pharmacy_cannot_touch_other_orders(seeded):
    session = provider(UserRole.PHARMACY, "Rapha Medicals", pharmacy_id=1)
    with pytest.raises(SessionError):
        await services.update_pharmacy_order_status(seeded, 3, "Ready for Pickup", session)


async def test_patient_cannot_change_status(seeded, patient):
    with pytest.raises(SessionError):
        await services.update_pharmacy_order_status(seeded, 1, "Cancelled", patient)


async def test_invalid_transition_leaves_store_unchanged(seeded):
    before = [o.to_record() for o in await seeded.get_pharmacy_orders()]

    with pytest.raises(InvalidTransitionError):
        await services.update_pharmacy_order_status(seeded, 5, "Pending")

    assert [o.to_record() for o in await seeded.get_pharmacy_orders()] == before


async def test_update_unknown_record(seeded):
    with pytest.raises(RecordNotFound):
        await services.update_booking_status(seeded, 404, "Accepted")


async def test_hospital_accepts_booking(seeded):
    session = provider(UserRole.HOSPITAL, hospital_id=1)

    updated = await services.update_booking_status(seeded, 1, BookingStatus.ACCEPTED, session)

    assert updated.status is BookingStatus.ACCEPTED
    assert (await seeded.get_bookings())[0].status is BookingStatus.ACCEPTED


async def test_doctor_completes_booking(seeded):
    session = provider(UserRole.DOCTOR, doctor_id=2)
    updated = await services.update_booking_status(seeded, 2, "Completed", session)
    assert updated.status is BookingStatus.COMPLETED


async def test_diagnostic_results_flow(seeded):
    session = provider(UserRole.DIAGNOSTIC, diagnostic_id=1)

    await services.update_diagnostic_booking_status(seeded, 2, "Sample Collected", session)
    updated = await services.update_diagnostic_booking_status(seeded, 2, "Results Ready", session)

    assert updated.status is DiagnosticBookingStatus.RESULTS_READY


# =========================
# Dashboard
# =========================
async def test_pharmacy_dashboard(seeded):
    dash = await services.pharmacy_dashboard(seeded, provider(UserRole.PHARMACY, pharmacy_id=1))

    assert dash.pharmacy.name == "Rapha Medicals"
    assert dash.stats.total == 2
    assert dash.stats.pending == 1
    assert dash.stats.completed == 1
    assert dash.total_medicines == 20
    assert [o.id for o in dash.recent_orders] == [1, 5]


async def test_pharmacy_dashboard_needs_pharmacy_id(seeded):
    with pytest.raises(SessionError):
        await services.pharmacy_dashboard(seeded, provider(UserRole.PHARMACY))


async def test_hospital_and_doctor_dashboards(seeded):
    hospital = await services.hospital_dashboard(seeded, provider(UserRole.HOSPITAL, hospital_id=1))
    assert [b.id for b in hospital.bookings] == [1, 2]
    assert (hospital.stats.pending, hospital.stats.accepted) == (1, 1)

    doctor = await services.doctor_dashboard(seeded, provider(UserRole.DOCTOR, doctor_id=3))
    assert [b.id for b in doctor.bookings] == [3]
    assert doctor.stats.completed == 1


async def test_diagnostic_dashboard(seeded):
    dash = await services.diagnostic_dashboard(seeded, provider(UserRole.DIAGNOSTIC, diagnostic_id=1))

    assert dash.centre.name == "Rapha Diagnostics"
    assert [b.id for b in dash.recent_bookings] == [1, 2, 4]
    assert (dash.stats.pending, dash.stats.in_progress, dash.stats.completed) == (1, 1, 1)


async def test_my_bookings_lists_only_own_records(seeded, patient):
    empty = await services.my_bookings(seeded, patient)
    assert empty.bookings == [] and empty.pharmacy_orders == []

    await services.book_appointment(seeded, patient, 1, date(2025, 11, 10), time(10, 0), "Cough", now=NOW)
    await services.place_pharmacy_order(seeded, patient, 2, {3: 1}, now=NOW)

    mine = await services.my_bookings(seeded, patient)
    assert [b.doctor_id for b in mine.bookings] == [1]
    assert [o.pharmacy_id for o in mine.pharmacy_orders] == [2]
    assert mine.stats.pending == 1


# =========================
# Catalogo e formati
# =========================
async def test_search_medicines(seeded):
    assert [m.id for m in await services.search_medicines(seeded, "para")] == [1]
    assert [m.id for m in await services.search_medicines(seeded, category="Vitamins")] == [5, 13, 16]
    assert len(await services.search_medicines(seeded, category="All")) == 20
    assert [m.id for m in await services.search_medicines(seeded, "cipla")] == [2]
    assert [m.id for m in await services.search_medicines(seeded, "gel", "pain relief")] == [17]


@pytest.mark.parametrize("stock,label", [
    (120, "In Stock"), (101, "In Stock"), (100, "Limited"), (51, "Limited"),
    (50, "Low Stock"), (1, "Low Stock"), (0, "Out of Stock"),
])
def test_stock_label(stock, label):
    assert services.stock_label(stock) == label


@pytest.mark.parametrize("t,expected", [
    (time(0, 5), "12:05 AM"), (time(9, 0), "9:00 AM"), (time(12, 0), "12:00 PM"), (time(23, 59), "11:59 PM"),
])
def test_format_clock(t, expected):
    assert services.format_clock(t) == expected


def test_amounts():
    assert format_amount(Decimal("50")) == "₹50"
    assert format_amount(Decimal("12.5")) == "₹12.50"
    assert parse_amount("₹12.50") == Decimal("12.50")
    with pytest.raises(ValueError):
        parse_amount("12")


def test_next_id():
    assert services.next_id([]) == 1
    assert services.next_id(services.PHARMACY_CATALOG) == 5


def test_catalog_lookups():
    assert services.get_hospital(5).name == "Apollo Hospitals Vijayawada"
    assert services.get_hospital(9) is None
    with pytest.raises(RecordNotFound):
        services.get_pharmacy(0)


# =========================
# Gestione cataloghi
# =========================
async def test_hospital_adds_doctor_to_its_own_hospital(seeded):
    session = provider(UserRole.HOSPITAL, "Ramesh Hospitals", hospital_id=2)

    doctor = await services.add_doctor(
        seeded, session, " Dr. Meera Das ", "Dermatologist", "5 years", "9:00 AM - 1:00 PM",
        qualification="MBBS, MD Dermatology", consultation_fee=650,
    )

    assert doctor.id == 9
    assert doctor.name == "Dr. Meera Das"
    assert doctor.hospital_id == 2
    assert doctor.qualification == "MBBS, MD Dermatology"
    assert (await seeded.get_doctors())[-1] == doctor


async def test_add_doctor_requires_mandatory_fields(seeded):
    session = provider(UserRole.HOSPITAL, hospital_id=2)
    with pytest.raises(ValidationFailed):
        await services.add_doctor(seeded, session, "Dr. Meera Das", "  ", "5 years", "9:00 AM - 1:00 PM")
    assert len(await seeded.get_doctors()) == 8


async def test_only_hospitals_manage_doctors(seeded, patient):
    with pytest.raises(SessionError):
        await services.add_doctor(seeded, patient, "Dr. X", "Cardiologist", "1 year", "10:00 AM - 2:00 PM")
    with pytest.raises(SessionError):
        await services.add_doctor(
            seeded, provider(UserRole.HOSPITAL), "Dr. X", "Cardiologist", "1 year", "10:00 AM - 2:00 PM",
        )


async def test_hospital_removes_its_doctor(seeded):
    session = provider(UserRole.HOSPITAL, hospital_id=2)

    removed = await services.remove_doctor(seeded, session, 3)

    assert removed.name == "Dr. Rajesh Kumar"
    assert 3 not in [d.id for d in await seeded.get_doctors()]
    # le prenotazioni conservano lo snapshot del medico
    assert (await seeded.get_bookings())[2].doctor_name == "Dr. Rajesh Kumar"


async def test_hospital_cannot_remove_other_hospitals_doctor(seeded):
    session = provider(UserRole.HOSPITAL, hospital_id=2)
    with pytest.raises(SessionError):
        await services.remove_doctor(seeded, session, 1)
    with pytest.raises(RecordNotFound):
        await services.remove_doctor(seeded, session, 99)
    assert len(await seeded.get_doctors()) == 8


async def test_diagnostic_centre_creates_test(seeded):
    session = provider(UserRole.DIAGNOSTIC, diagnostic_id=1)

    test = await services.save_diagnostic_test(
        seeded, session, "Vitamin D Test", "Pathology", "₹950", "20 mins", description="25-OH vitamin D level",
    )

    assert test.id == 21
    assert test.price == "₹950"
    assert test.requirements is None
    assert (await seeded.get_diagnostic_tests())[-1] == test


async def test_diagnostic_centre_edits_test_in_place(seeded):
    session = provider(UserRole.DIAGNOSTIC, diagnostic_id=1)
    original = (await seeded.get_diagnostic_tests())[1]

    edited = await services.save_diagnostic_test(
        seeded, session, "Chest X-Ray (PA view)", "Radiology", "₹850", "15 mins", test_id=2,
    )

    tests = await seeded.get_diagnostic_tests()
    assert len(tests) == 20
    assert tests[1] == edited
    assert edited.id == 2
    assert edited.name == "Chest X-Ray (PA view)"
    assert edited.image == original.image
    assert edited.description is None


async def test_save_diagnostic_test_errors(seeded, patient):
    session = provider(UserRole.DIAGNOSTIC, diagnostic_id=1)
    with pytest.raises(ValidationFailed):
        await services.save_diagnostic_test(seeded, session, "CBC", "Pathology", "400", "30 mins")
    with pytest.raises(RecordNotFound):
        await services.save_diagnostic_test(seeded, session, "CBC", "Pathology", "₹400", "30 mins", test_id=404)
    with pytest.raises(SessionError):
        await services.save_diagnostic_test(seeded, patient, "CBC", "Pathology", "₹400", "30 mins")


async def test_delete_diagnostic_test(seeded):
    session = provider(UserRole.DIAGNOSTIC, diagnostic_id=1)

    removed = await services.delete_diagnostic_test(seeded, session, 7)

    assert removed.name == "MRI Scan"
    assert [t.id for t in await seeded.get_diagnostic_tests()] == [i for i in range(1, 21) if i != 7]
    with pytest.raises(RecordNotFound):
        await services.delete_diagnostic_test(seeded, session, 7)


async def test_medicine_categories_come_from_stored_medicines(seeded):
    categories = await services.medicine_categories(seeded)

    assert categories == [
        "all", "pain relief", "antibiotic", "antihistamine", "gastric", "vitamins",
        "diabetes", "hypertension", "cholesterol", "respiratory", "digestive",
    ]
    for category in categories[1:]:
        assert await services.search_medicines(seeded, category=category)


async def test_medicine_categories_on_empty_catalog(storage):
    assert await services.medicine_categories(storage) == ["all"]
