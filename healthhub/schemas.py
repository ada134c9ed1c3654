"""
Schemi delle entità (contratto dati tra tutti i componenti).

La rappresentazione durevole usa i nomi camelCase (es. ``pharmacyName``);
in Python si usano i nomi snake_case. I campi opzionali hanno sempre un
default, così i record salvati da versioni precedenti restano leggibili.

I campi "snapshot" (nome/prezzo del farmaco su una riga d'ordine, nome della
farmacia sull'ordine, nome del medico sulla prenotazione) sono copie fatte
alla creazione: non vanno mai ricalcolati dal catalogo.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from .models import (
    BookingStatus,
    DeliveryType,
    DiagnosticBookingStatus,
    EHRStatus,
    FollowUpPriority,
    Gender,
    PharmacyOrderStatus,
    ReportStatus,
    SurgeryStatus,
    UserRole,
)

CURRENCY_SYMBOL = "₹"
_AMOUNT_RE = re.compile(r"^₹(\d+(?:\.\d{1,2})?)$")

Amount = Annotated[str, StringConstraints(pattern=r"^₹\d+(\.\d{1,2})?$")]
Rating = Annotated[float, Field(ge=0, le=5)]
RecordId = Annotated[int, Field(ge=1)]


# =========================
# Importi e timestamp
# =========================
def parse_amount(value: str) -> Decimal:
    m = _AMOUNT_RE.match(value.strip())
    if not m:
        raise ValueError(f"Importo non valido: {value!r}")
    try:
        return Decimal(m.group(1))
    except InvalidOperation as e:
        raise ValueError(f"Importo non valido: {value!r}") from e


def format_amount(amount: Decimal | int) -> str:
    """``Decimal('50')`` -> ``'₹50'``, ``Decimal('12.5')`` -> ``'₹12.50'``."""
    amount = Decimal(amount)
    if amount == amount.to_integral_value():
        return f"{CURRENCY_SYMBOL}{int(amount)}"
    return f"{CURRENCY_SYMBOL}{amount.quantize(Decimal('0.01'))}"


def parse_instant(value: str) -> datetime:
    """ISO 8601 (anche con suffisso 'Z') -> datetime timezone-aware UTC."""
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_instant(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_record(self) -> dict:
        """Dict serializzabile JSON, con le chiavi camelCase."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _check_instant(value: str) -> str:
    try:
        parse_instant(value)
    except ValueError as e:
        raise ValueError(f"timestamp ISO non valido: {value!r}") from e
    return value


Instant = Annotated[str, AfterValidator(_check_instant)]


# =========================
# Cataloghi
# =========================
class Doctor(Schema):
    id: RecordId
    name: str = Field(..., min_length=1)
    specialization: str
    hospital_id: int
    experience: str
    timing: str
    qualification: str | None = None
    consultation_fee: int | None = Field(None, ge=0)
    image: str | None = None


class Hospital(Schema):
    id: RecordId
    name: str = Field(..., min_length=1)
    specialization: str
    address: str
    rating: Rating
    image: str | None = None
    description: str | None = None
    visitors_count: int | None = Field(None, ge=0)


class DiagnosticCentre(Schema):
    id: RecordId
    name: str = Field(..., min_length=1)
    specialization: str
    address: str
    rating: Rating
    contact: str | None = None
    description: str | None = None
    image: str | None = None


class DiagnosticTest(Schema):
    id: RecordId
    name: str = Field(..., min_length=1)
    category: str
    price: Amount
    duration: str
    description: str | None = None
    requirements: str | None = None
    image: str | None = None


class Pharmacy(Schema):
    id: RecordId
    name: str = Field(..., min_length=1)
    address: str
    contact: str
    rating: Rating
    description: str | None = None
    license: str | None = None
    operating_hours: str | None = None
    image: str | None = None


class Medicine(Schema):
    id: RecordId
    name: str = Field(..., min_length=1)
    category: str
    price: Amount
    stock: int = Field(..., ge=0)
    description: str | None = None
    manufacturer: str | None = None
    expiry_date: str | None = None
    prescription: bool | None = None
    dosage: str | None = None
    image: str | None = None


# =========================
# Prenotazioni e ordini
# =========================
class Booking(Schema):
    id: RecordId
    patient_name: str = Field(..., min_length=1)
    patient_age: int = Field(..., ge=0)
    patient_gender: str
    doctor_id: int
    doctor_name: str
    hospital_id: int
    hospital_name: str
    date: str
    time: str
    symptoms: str
    status: BookingStatus = BookingStatus.PENDING
    booked_at: Instant


class DiagnosticBooking(Schema):
    id: RecordId
    patient_name: str = Field(..., min_length=1)
    patient_age: int = Field(..., ge=0)
    patient_gender: Gender
    patient_phone: str
    test_name: str
    test_id: int
    diagnostic_id: int
    diagnostic_name: str
    date: str
    time: str
    status: DiagnosticBookingStatus = DiagnosticBookingStatus.PENDING
    price: Amount
    booked_at: Instant
    notes: str | None = None
    results: str | None = None
    report_url: str | None = None


class OrderItem(Schema):
    medicine_id: int
    medicine_name: str
    quantity: int = Field(..., ge=1)
    price: Amount
    subtotal: Amount
    category: str

    @model_validator(mode="after")
    def _subtotal_matches(self) -> "OrderItem":
        expected = parse_amount(self.price) * self.quantity
        if parse_amount(self.subtotal) != expected:
            raise ValueError(
                f"subtotal {self.subtotal} diverso da {self.price} x {self.quantity} ({format_amount(expected)})"
            )
        return self


class PharmacyOrder(Schema):
    id: RecordId
    patient_name: str = Field(..., min_length=1)
    patient_age: int = Field(..., ge=0)
    patient_gender: Gender
    patient_phone: str
    patient_address: str
    items: list[OrderItem] = Field(..., min_length=1)
    total_amount: Amount
    pharmacy_id: int
    pharmacy_name: str
    status: PharmacyOrderStatus = PharmacyOrderStatus.PENDING
    order_date: str
    order_time: str
    delivery_type: DeliveryType
    prescription_url: str | None = None
    notes: str | None = None
    estimated_delivery: str | None = None
    ordered_at: Instant

    @model_validator(mode="after")
    def _total_matches(self) -> "PharmacyOrder":
        expected = sum((parse_amount(i.subtotal) for i in self.items), Decimal(0))
        if parse_amount(self.total_amount) != expected:
            raise ValueError(f"totalAmount {self.total_amount} diverso dalla somma dei subtotali ({format_amount(expected)})")
        return self


# =========================
# Sessione
# =========================
class UserData(Schema):
    name: str = Field(..., min_length=1)
    role: UserRole
    email: str | None = None
    age: int | None = Field(None, ge=0)
    gender: str | None = None
    phone: str | None = None
    address: str | None = None
    contact: str | None = None
    specialization: str | None = None

    # solo per i ruoli "provider"
    pharmacy_id: int | None = None
    doctor_id: int | None = None
    hospital_id: int | None = None
    diagnostic_id: int | None = None


# =========================
# Cartella clinica (EHR)
# =========================
class BloodPressure(Schema):
    systolic: int = Field(..., gt=0)
    diastolic: int = Field(..., gt=0)


class PatientVitals(Schema):
    sugar_reading: float = Field(..., ge=0)  # mg/dL
    blood_pressure: BloodPressure
    weight: float = Field(..., gt=0)  # kg
    height: float | None = Field(None, gt=0)  # cm
    temperature: float | None = None  # °F
    heart_rate: int | None = Field(None, gt=0)


class MedicinePrescription(Schema):
    id: str
    medicine_name: str = Field(..., min_length=1)
    dosage: str
    frequency: str
    duration: str
    instructions: str


class DiagnosticReport(Schema):
    id: str
    test_name: str = Field(..., min_length=1)
    report_date: str
    results: str
    normal_range: str | None = None
    status: ReportStatus
    attachment_url: str | None = None


class SurgeryDetails(Schema):
    id: str
    surgery_type: str
    description: str
    reason_for_surgery: str
    scheduled_date: Instant | None = None
    completed_date: Instant | None = None
    status: SurgeryStatus
    post_op_status: str | None = None
    complications: str | None = None


class FollowUpDetails(Schema):
    id: str
    next_appointment_date: Instant
    purpose: str
    instructions: str
    priority: FollowUpPriority


class EHRRecord(Schema):
    """
    Cartella clinica di una visita.
    ``id`` è l'identificativo digitale, ``rapha_id`` quello leggibile (es. RAPHA_2024_001_MC).
    """
    id: str = Field(..., min_length=1)
    rapha_id: str
    appointment_date_time: Instant
    patient_full_name: str = Field(..., min_length=1)
    patient_basic_vitals: PatientVitals
    health_issue: str
    doctor_resolution: str
    medicines_prescription: list[MedicinePrescription] = Field(default_factory=list)
    diagnostic_reports: list[DiagnosticReport] = Field(default_factory=list)
    doctor_remark_on_diagnostics: str = ""
    surgery_description: SurgeryDetails | None = None
    follow_up_details: list[FollowUpDetails] = Field(default_factory=list)
    final_remarks: str = ""
    doctor_id: str
    doctor_name: str
    created_at: Instant
    updated_at: Instant
    status: EHRStatus
