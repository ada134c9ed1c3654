from __future__ import annotations

import pytest

from healthhub.config import Settings
from healthhub.schemas import PharmacyOrder
from healthhub.storage import Storage


def settings_for(tmp_path, **overrides) -> Settings:
    overrides.setdefault("database_url", f"sqlite+aiosqlite:///{tmp_path / 'healthhub_test.sqlite'}")
    return Settings(**overrides)


@pytest.fixture
async def storage(tmp_path):
    store = Storage(settings_for(tmp_path))
    await store.create_schema()
    yield store
    await store.dispose()


def make_order(
    order_id: int,
    pharmacy_id: int = 1,
    status: str = "Pending",
    ordered_at: str = "2025-11-01T10:00:00Z",
    patient_name: str = "Mithin Kumar",
) -> PharmacyOrder:
    return PharmacyOrder.model_validate({
        "id": order_id,
        "patientName": patient_name,
        "patientAge": 28,
        "patientGender": "Male",
        "patientPhone": "9876543210",
        "patientAddress": "123 MG Road, Hyderabad",
        "items": [{
            "medicineId": 1,
            "medicineName": "Paracetamol 500mg",
            "quantity": 2,
            "price": "₹25",
            "subtotal": "₹50",
            "category": "Pain Relief",
        }],
        "totalAmount": "₹50",
        "pharmacyId": pharmacy_id,
        "pharmacyName": f"Pharmacy {pharmacy_id}",
        "status": status,
        "orderDate": "2025-11-01",
        "orderTime": "10:00 AM",
        "deliveryType": "Pickup",
        "orderedAt": ordered_at,
    })
