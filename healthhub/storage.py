"""
Persistence Store: una coppia get/save per collezione su archivio chiave-valore.

- ogni collezione vive sotto una chiave propria (nessuna contesa tra collezioni)
- ``save_*`` sovrascrive l'intera collezione in una sola transazione
- last-write-wins: nessun lock, nessun merge
- valore illeggibile/incompatibile -> collezione vuota (o utente None), mai eccezioni
"""
from __future__ import annotations

import json
import logging
from collections import Counter
from typing import Any, Iterable

from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from .config import Settings, get_settings
from .db import create_all, db_session, make_engine, make_session_factory
from .exceptions import StorageError, ValidationFailed
from .models import AUTH_STATUS_KEY, USER_DATA_KEY, Collection, KeyValue, utcnow
from .schemas import (
    Booking,
    DiagnosticBooking,
    DiagnosticTest,
    Doctor,
    Medicine,
    PharmacyOrder,
    Schema,
    UserData,
)

logger = logging.getLogger(__name__)

COLLECTION_SCHEMAS: dict[Collection, type[Schema]] = {
    Collection.BOOKINGS: Booking,
    Collection.DOCTORS: Doctor,
    Collection.DIAGNOSTIC_BOOKINGS: DiagnosticBooking,
    Collection.DIAGNOSTIC_TESTS: DiagnosticTest,
    Collection.PHARMACY_ORDERS: PharmacyOrder,
    Collection.MEDICINES: Medicine,
}

_ADAPTERS: dict[Collection, TypeAdapter] = {c: TypeAdapter(list[m]) for c, m in COLLECTION_SCHEMAS.items()}


def _as_payload(item: Any) -> Any:
    # le istanze vengono rivalidate: model_copy(update=...) non valida nulla
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json", by_alias=True, exclude_none=True)
    return item


def _format_errors(exc: ValidationError) -> list[str]:
    out = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        out.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return out


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


class Storage:
    """
    Contratto async usato dal livello di presentazione.

    Esempio:
        storage = Storage()
        await storage.create_schema()
        medicines = await storage.get_medicines()
    """

    def __init__(self, settings: Settings | None = None, engine: AsyncEngine | None = None) -> None:
        self.settings = settings or get_settings()
        self.engine = engine or make_engine(self.settings)
        self._sessions = make_session_factory(self.engine)

    async def create_schema(self) -> None:
        await create_all(self.engine)

    async def dispose(self) -> None:
        await self.engine.dispose()

    # =========================
    # Chiave-valore grezzo
    # =========================
    async def read_raw(self, key: str) -> str | None:
        try:
            async with db_session(self._sessions) as s:
                return (await s.execute(select(KeyValue.value).where(KeyValue.key == key))).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"Lettura di '{key}' fallita: {e}") from e

    async def write_raw(self, key: str, value: str) -> None:
        """Upsert atomico: o il nuovo valore intero o quello vecchio, mai metà."""
        stmt = sqlite_insert(KeyValue).values(key=key, value=value, updated_at=utcnow())
        stmt = stmt.on_conflict_do_update(
            index_elements=[KeyValue.key],
            set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
        )
        try:
            async with db_session(self._sessions) as s:
                await s.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Scrittura di '{key}' fallita: {e}") from e

    async def delete_raw(self, key: str) -> None:
        try:
            async with db_session(self._sessions) as s:
                await s.execute(delete(KeyValue).where(KeyValue.key == key))
        except SQLAlchemyError as e:
            raise StorageError(f"Cancellazione di '{key}' fallita: {e}") from e

    # =========================
    # Collezioni (generico)
    # =========================
    async def get_collection(self, collection: Collection) -> list[Any]:
        raw = await self.read_raw(collection.value)
        if raw is None:
            return []
        try:
            return _ADAPTERS[collection].validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("Valore corrotto per '%s', uso collezione vuota: %s", collection.value, e)
            return []

    async def save_collection(self, collection: Collection, items: Iterable[Any]) -> None:
        """
        Sovrascrive l'intera collezione.
        Valida tutto prima di scrivere: se un elemento non è valido solleva
        ValidationFailed e il valore salvato resta quello precedente.
        """
        payload = [_as_payload(i) for i in items]
        try:
            records = _ADAPTERS[collection].validate_python(payload)
        except ValidationError as e:
            raise ValidationFailed(collection.value, _format_errors(e)) from e

        counts = Counter(r.id for r in records)
        dupes = sorted(i for i, n in counts.items() if n > 1)
        if dupes:
            raise ValidationFailed(collection.value, [f"id duplicati: {dupes}"])

        await self.write_raw(collection.value, _dumps([r.to_record() for r in records]))
        logger.debug("Salvati %d elementi in '%s'", len(records), collection.value)

    # =========================
    # Collezioni (tipizzate)
    # =========================
    async def get_bookings(self) -> list[Booking]:
        return await self.get_collection(Collection.BOOKINGS)

    async def save_bookings(self, items: Iterable[Booking | dict]) -> None:
        await self.save_collection(Collection.BOOKINGS, items)

    async def get_doctors(self) -> list[Doctor]:
        return await self.get_collection(Collection.DOCTORS)

    async def save_doctors(self, items: Iterable[Doctor | dict]) -> None:
        await self.save_collection(Collection.DOCTORS, items)

    async def get_diagnostic_bookings(self) -> list[DiagnosticBooking]:
        return await self.get_collection(Collection.DIAGNOSTIC_BOOKINGS)

    async def save_diagnostic_bookings(self, items: Iterable[DiagnosticBooking | dict]) -> None:
        await self.save_collection(Collection.DIAGNOSTIC_BOOKINGS, items)

    async def get_diagnostic_tests(self) -> list[DiagnosticTest]:
        return await self.get_collection(Collection.DIAGNOSTIC_TESTS)

    async def save_diagnostic_tests(self, items: Iterable[DiagnosticTest | dict]) -> None:
        await self.save_collection(Collection.DIAGNOSTIC_TESTS, items)

    async def get_pharmacy_orders(self) -> list[PharmacyOrder]:
        return await self.get_collection(Collection.PHARMACY_ORDERS)

    async def save_pharmacy_orders(self, items: Iterable[PharmacyOrder | dict]) -> None:
        await self.save_collection(Collection.PHARMACY_ORDERS, items)

    async def get_medicines(self) -> list[Medicine]:
        return await self.get_collection(Collection.MEDICINES)

    async def save_medicines(self, items: Iterable[Medicine | dict]) -> None:
        await self.save_collection(Collection.MEDICINES, items)

    # =========================
    # Sessione
    # =========================
    async def get_user_data(self) -> UserData | None:
        raw = await self.read_raw(USER_DATA_KEY)
        if raw is None:
            return None
        try:
            return UserData.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("Profilo utente illeggibile, lo ignoro: %s", e)
            return None

    async def set_user_data(self, user: UserData | dict) -> None:
        try:
            u = UserData.model_validate(_as_payload(user))
        except ValidationError as e:
            raise ValidationFailed(USER_DATA_KEY, _format_errors(e)) from e
        await self.write_raw(USER_DATA_KEY, _dumps(u.to_record()))

    async def clear_user_data(self) -> None:
        await self.delete_raw(USER_DATA_KEY)

    async def get_auth_status(self) -> bool:
        raw = await self.read_raw(AUTH_STATUS_KEY)
        if raw is None:
            return False
        try:
            value = json.loads(raw)
        except ValueError:
            value = None
        if not isinstance(value, bool):
            logger.warning("Flag di autenticazione illeggibile (%r), assumo False", raw)
            return False
        return value

    async def set_auth_status(self, value: bool) -> None:
        await self.write_raw(AUTH_STATUS_KEY, _dumps(bool(value)))
