from __future__ import annotations


class HealthHubError(Exception):
    """Base di tutti gli errori applicativi."""


class StorageError(HealthHubError):
    """Persistenza non disponibile o scrittura fallita."""


class ValidationFailed(StorageError):
    """Entità non valide al confine di scrittura: nulla viene salvato."""

    def __init__(self, collection: str, errors: list[str]) -> None:
        self.collection = collection
        self.errors = errors
        super().__init__(f"Dati non validi per '{collection}': " + "; ".join(errors))


class InvalidTransitionError(HealthHubError):
    def __init__(self, current: str, requested: str, reason: str | None = None) -> None:
        self.current = current
        self.requested = requested
        msg = f"Transizione non ammessa: {current!r} -> {requested!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class RecordNotFound(HealthHubError):
    def __init__(self, collection: str, record_id: int) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection}: id {record_id} non trovato")


class SessionError(HealthHubError):
    """Sessione assente o ruolo non adatto all'operazione."""
