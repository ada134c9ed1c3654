from __future__ import annotations

import logging
from dataclasses import dataclass

from .exceptions import SessionError
from .models import UserRole
from .schemas import UserData
from .storage import Storage

logger = logging.getLogger(__name__)

_PROVIDER_ID_FIELD = {
    UserRole.PHARMACY: "pharmacy_id",
    UserRole.DOCTOR: "doctor_id",
    UserRole.HOSPITAL: "hospital_id",
    UserRole.DIAGNOSTIC: "diagnostic_id",
}


@dataclass(frozen=True)
class SessionContext:
    """
    Identità corrente, passata esplicitamente a chi ne ha bisogno
    (al posto di uno stato globale implicito).
    """
    user: UserData | None
    authenticated: bool

    @property
    def is_active(self) -> bool:
        return self.authenticated and self.user is not None

    def require_user(self) -> UserData:
        if not self.is_active:
            raise SessionError("Nessun utente autenticato.")
        return self.user

    def require_role(self, *roles: UserRole) -> UserData:
        user = self.require_user()
        if user.role not in roles:
            expected = ", ".join(r.value for r in roles)
            raise SessionError(f"Ruolo '{user.role.value}' non abilitato (richiesto: {expected}).")
        return user

    def provider_id(self, role: UserRole) -> int:
        """Id del provider (farmacia, medico, ospedale, centro diagnostico) della sessione."""
        user = self.require_role(role)
        value = getattr(user, _PROVIDER_ID_FIELD[role])
        if value is None:
            raise SessionError(f"Profilo '{user.name}' senza {_PROVIDER_ID_FIELD[role]}.")
        return value


ANONYMOUS = SessionContext(user=None, authenticated=False)


async def open_session(storage: Storage) -> SessionContext:
    """Ricostruisce la sessione dallo storage (profilo + flag di autenticazione)."""
    user = await storage.get_user_data()
    authenticated = await storage.get_auth_status()
    if authenticated and user is None:
        logger.warning("Flag di autenticazione attivo ma nessun profilo salvato")
    return SessionContext(user=user, authenticated=authenticated)


async def login(storage: Storage, user: UserData | dict) -> SessionContext:
    await storage.set_user_data(user)
    await storage.set_auth_status(True)
    return await open_session(storage)


async def logout(storage: Storage) -> SessionContext:
    await storage.set_auth_status(False)
    await storage.clear_user_data()
    return ANONYMOUS
