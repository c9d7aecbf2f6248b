from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Ruolo utente usato per i permessi."""

    ADMIN = "admin"
    STAFF = "staff"


class VacationStatus(str, Enum):
    """Stato del flusso di approvazione delle richieste ferie."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
