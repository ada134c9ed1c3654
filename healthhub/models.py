from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingStatus(enum.Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    COMPLETED = "Completed"


class DiagnosticBookingStatus(enum.Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    SAMPLE_COLLECTED = "Sample Collected"
    RESULTS_READY = "Results Ready"
    COMPLETED = "Completed"


class PharmacyOrderStatus(enum.Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    PREPARING = "Preparing"
    READY_FOR_PICKUP = "Ready for Pickup"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class DeliveryType(enum.Enum):
    PICKUP = "Pickup"
    HOME_DELIVERY = "Home Delivery"


class Gender(enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class UserRole(enum.Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    HOSPITAL = "hospital"
    DIAGNOSTIC = "diagnostic"
    PHARMACY = "pharmacy"


class EHRStatus(enum.Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    FOLLOW_UP_REQUIRED = "Follow-up Required"


class ReportStatus(enum.Enum):
    NORMAL = "Normal"
    ABNORMAL = "Abnormal"
    CRITICAL = "Critical"
    PENDING = "Pending"


class SurgeryStatus(enum.Enum):
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class FollowUpPriority(enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class Collection(enum.Enum):
    """Collezioni persistite, ognuna sotto una chiave indipendente."""
    BOOKINGS = "bookings"
    DOCTORS = "doctors"
    DIAGNOSTIC_BOOKINGS = "diagnosticBookings"
    DIAGNOSTIC_TESTS = "diagnosticTests"
    PHARMACY_ORDERS = "pharmacyOrders"
    MEDICINES = "medicines"


USER_DATA_KEY = "userData"
AUTH_STATUS_KEY = "isAuthenticated"


class KeyValue(Base):
    """
    Archivio chiave-valore durevole.
    Il valore è testo JSON opaco: nessuna migrazione di schema lato DB.
    """
    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"KeyValue({self.key}, {len(self.value)} chars)"
