"""
Cartelle cliniche (EHR): catalogo in sola lettura e ricerche per la schermata EHR.

Le cartelle non hanno una chiave nello storage: sono costanti validate
all'import, come i cataloghi di ospedali e farmacie.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import TypeAdapter

from .models import EHRStatus, FollowUpPriority, ReportStatus
from .schemas import EHRRecord, parse_instant
from .seed_data import EHR_RECORDS
from .workflow import recent

EHR_CATALOG: list[EHRRecord] = TypeAdapter(list[EHRRecord]).validate_python(EHR_RECORDS)


@dataclass(frozen=True)
class UpcomingFollowUp:
    ehr_id: str
    patient_name: str
    follow_up_date: str
    purpose: str
    priority: FollowUpPriority


@dataclass(frozen=True)
class PatientSummary:
    patient_name: str
    rapha_id: str
    last_visit: str
    current_issue: str
    status: EHRStatus
    blood_pressure: str
    sugar_level: float
    weight: float
    medications_count: int
    follow_ups_count: int
    doctor_name: str


@dataclass(frozen=True)
class EHRStats:
    total: int
    active: int
    follow_up_required: int
    with_normal_reports: int


# =========================
# Ricerche
# =========================
def get_ehr_by_id(ehr_id: str) -> EHRRecord | None:
    return next((r for r in EHR_CATALOG if r.id == ehr_id), None)


def get_ehr_by_rapha_id(rapha_id: str) -> EHRRecord | None:
    return next((r for r in EHR_CATALOG if r.rapha_id == rapha_id), None)


def get_ehr_by_patient_name(patient_name: str) -> list[EHRRecord]:
    """Match parziale sul nome completo, senza distinzione maiuscole."""
    q = patient_name.strip().lower()
    return [r for r in EHR_CATALOG if q in r.patient_full_name.lower()]


def get_ehr_by_status(status: EHRStatus | str) -> list[EHRRecord]:
    status = EHRStatus(status)
    return [r for r in EHR_CATALOG if r.status is status]


def recent_ehr_records(limit: int = 10) -> list[EHRRecord]:
    return recent(EHR_CATALOG, limit, key=lambda r: r.created_at)


def upcoming_follow_ups(now: datetime | None = None) -> list[UpcomingFollowUp]:
    """Controlli successivi a ``now`` (default: adesso), il più vicino prima."""
    now = now or datetime.now(timezone.utc)
    out = [
        UpcomingFollowUp(r.id, r.patient_full_name, f.next_appointment_date, f.purpose, f.priority)
        for r in EHR_CATALOG
        for f in r.follow_up_details
        if parse_instant(f.next_appointment_date) > now
    ]
    return sorted(out, key=lambda u: parse_instant(u.follow_up_date))


def patient_summary(ehr_id: str) -> PatientSummary | None:
    record = get_ehr_by_id(ehr_id)
    if record is None:
        return None
    vitals = record.patient_basic_vitals
    return PatientSummary(
        patient_name=record.patient_full_name,
        rapha_id=record.rapha_id,
        last_visit=record.appointment_date_time,
        current_issue=record.health_issue,
        status=record.status,
        blood_pressure=f"{vitals.blood_pressure.systolic}/{vitals.blood_pressure.diastolic}",
        sugar_level=vitals.sugar_reading,
        weight=vitals.weight,
        medications_count=len(record.medicines_prescription),
        follow_ups_count=len(record.follow_up_details),
        doctor_name=record.doctor_name,
    )


def ehr_stats() -> EHRStats:
    # contatori della testata EHR
    return EHRStats(
        total=len(EHR_CATALOG),
        active=sum(1 for r in EHR_CATALOG if r.status is EHRStatus.ACTIVE),
        follow_up_required=sum(1 for r in EHR_CATALOG if r.status is EHRStatus.FOLLOW_UP_REQUIRED),
        with_normal_reports=sum(
            1 for r in EHR_CATALOG if any(d.status is ReportStatus.NORMAL for d in r.diagnostic_reports)
        ),
    )
