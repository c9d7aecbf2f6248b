from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import Role, VacationStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import VacationRequest
from .repository import VacationRepository

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    VacationStatus.PENDING: "In attesa",
    VacationStatus.APPROVED: "Approvato",
    VacationStatus.REJECTED: "Rifiutato",
    VacationStatus.CANCELLED: "Annullato",
}


@dataclass(frozen=True)
class VacationTimelineRow:
    """One employee's approved vacation days inside a month (admin timeline)."""

    user_id: int
    full_name: str
    dates: tuple[date, ...]


class VacationService:
    def __init__(self, vacations: VacationRepository):
        self._vacations = vacations

    def create(self, *, user_id: int, start_date: Optional[date], end_date: Optional[date]) -> int:
        if not start_date or not end_date:
            raise ValidationError("Seleziona sia la data di inizio che quella di fine")
        if start_date > end_date:
            raise ValidationError("La data di fine non può essere precedente alla data di inizio")

        request_id = self._vacations.create(user_id=int(user_id), start_date=start_date, end_date=end_date)
        logger.info("Vacation request %s created for user %s (%s..%s)", request_id, user_id, start_date, end_date)
        return request_id

    def cancel(self, *, user_id: int, request_id: int) -> None:
        req = self._vacations.get(request_id=int(request_id))
        if not req:
            raise NotFoundError("Richiesta non trovata")
        if req.user_id != int(user_id):
            raise AuthorizationError("Non puoi annullare la richiesta di un altro utente")
        if req.status != VacationStatus.PENDING:
            raise ValidationError("La richiesta è già stata elaborata")

        if not self._vacations.set_status(
            request_id=int(request_id), status=VacationStatus.CANCELLED, expected=VacationStatus.PENDING
        ):
            raise ValidationError("Impossibile annullare la richiesta")

    def _decide(self, *, current_role: Role, request_id: int, status: VacationStatus) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Non hai i permessi")

        req = self._vacations.get(request_id=int(request_id))
        if not req:
            raise NotFoundError("Richiesta non trovata")
        if req.status != VacationStatus.PENDING:
            raise ValidationError("La richiesta è già stata elaborata")

        if not self._vacations.set_status(request_id=int(request_id), status=status, expected=VacationStatus.PENDING):
            raise ValidationError("Aggiornamento della richiesta fallito")
        logger.info("Vacation request %s -> %s", request_id, status.value)

    def approve(self, *, current_role: Role, request_id: int) -> None:
        self._decide(current_role=current_role, request_id=request_id, status=VacationStatus.APPROVED)

    def reject(self, *, current_role: Role, request_id: int) -> None:
        self._decide(current_role=current_role, request_id=request_id, status=VacationStatus.REJECTED)

    def list_for_user(self, *, user_id: int) -> Sequence[VacationRequest]:
        return self._vacations.list_for_user(user_id=int(user_id), limit=DEFAULT_LIST_LIMIT)

    def approved_in_month(self, *, current_role: Role, month_key: str) -> list[VacationTimelineRow]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Non hai i permessi")

        start, end = month_bounds(month_key)
        requests = self._vacations.list_overlapping(start_date=start, end_date=end, status=VacationStatus.APPROVED)

        by_user: dict[int, dict] = {}
        for req in requests:
            entry = by_user.setdefault(req.user_id, {"full_name": req.full_name or "-", "dates": set()})
            entry["dates"].update(req.dates_within(start, end))

        return [
            VacationTimelineRow(user_id=uid, full_name=e["full_name"], dates=tuple(sorted(e["dates"])))
            for uid, e in sorted(by_user.items())
        ]

    @staticmethod
    def to_ui(req: VacationRequest) -> dict:
        return {
            "request_id": req.request_id,
            "user_id": req.user_id,
            "start_date": req.start_date.isoformat(),
            "end_date": req.end_date.isoformat(),
            "status": req.status.value,
            "status_label": STATUS_LABELS.get(req.status, req.status.value),
            "created_at": req.created_at.strftime("%Y-%m-%d %H:%M"),
        }
