from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import Settings
from .models import Collection
from .seed_data import (
    DEMO_PROFILE,
    DIAGNOSTIC_TESTS,
    DOCTORS,
    INITIAL_BOOKINGS,
    INITIAL_DIAGNOSTIC_BOOKINGS,
    INITIAL_PHARMACY_ORDERS,
    MEDICINES,
)
from .storage import Storage

logger = logging.getLogger(__name__)

SEED_DATASETS: list[tuple[Collection, list[dict]]] = [
    (Collection.BOOKINGS, INITIAL_BOOKINGS),
    (Collection.DOCTORS, DOCTORS),
    (Collection.DIAGNOSTIC_BOOKINGS, INITIAL_DIAGNOSTIC_BOOKINGS),
    (Collection.DIAGNOSTIC_TESTS, DIAGNOSTIC_TESTS),
    (Collection.PHARMACY_ORDERS, INITIAL_PHARMACY_ORDERS),
    (Collection.MEDICINES, MEDICINES),
]


@dataclass(frozen=True)
class InitReport:
    ok: bool
    demo_session: bool = False
    seeded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    error: str | None = None


async def initialize_app_data(storage: Storage, settings: Settings | None = None) -> InitReport:
    """
    Da eseguire a ogni avvio (idempotente):
    - crea la tabella chiave-valore se manca
    - sessione demo (solo se HEALTHHUB_SEED_DEMO_SESSION è attivo)
    - per ogni collezione: scrive il seed solo se è vuota, mai sovrascrive dati esistenti

    Non solleva eccezioni: in caso di errore lo registra nel log e ritorna
    un report con ok=False, così l'app resta utilizzabile.
    """
    settings = settings or storage.settings
    seeded: list[str] = []
    skipped: list[str] = []
    demo = False

    try:
        await storage.create_schema()

        if settings.seed_demo_session:
            await storage.set_user_data(DEMO_PROFILE)
            await storage.set_auth_status(True)
            demo = True

        for collection, dataset in SEED_DATASETS:
            if await storage.get_collection(collection):
                skipped.append(collection.value)
                continue
            await storage.save_collection(collection, dataset)
            seeded.append(collection.value)
    except Exception as e:
        logger.exception("Errore durante l'inizializzazione dei dati")
        return InitReport(False, demo, seeded, skipped, error=str(e))

    if seeded:
        logger.info("Seed completato: %s", ", ".join(seeded))
    return InitReport(True, demo, seeded, skipped)
