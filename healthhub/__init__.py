"""
Core applicativo HealthHub (prenotazioni, esami, ordini farmacia).

Struttura:
- config.py    : impostazioni da ambiente/.env e logging
- db.py        : engine e sessioni SQLAlchemy (asyncio + aiosqlite)
- models.py    : enum di stato e tabella chiave-valore
- schemas.py   : entità (pydantic) e formati di importi/timestamp
- storage.py   : persistence store async, una coppia get/save per collezione
- seed_data.py : dataset iniziali
- seed.py      : routine di inizializzazione (idempotente)
- workflow.py  : transizioni di stato e aggregati per le dashboard
- ehr.py       : cartelle cliniche (catalogo in sola lettura)
- session.py   : contesto di sessione esplicito
- services.py  : use case (prenotare, ordinare, cambiare stato, cataloghi, dashboard)
"""
