from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import VacationStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import VacationRequest
from .repository import VacationRepository

_SELECT = """
    SELECT v.request_id, v.user_id, v.start_date, v.end_date, v.status, v.created_at, u.full_name
    FROM vacation_requests v
    LEFT JOIN users u ON u.user_id = v.user_id
"""


def _to_request(r: dict) -> VacationRequest:
    return VacationRequest(
        request_id=int(r["request_id"]),
        user_id=int(r["user_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        status=VacationStatus(r["status"]),
        created_at=r["created_at"],
        full_name=r.get("full_name"),
    )


class MySQLVacationRepository(VacationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_id: int, start_date: date, end_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_requests(user_id, start_date, end_date, status)
                VALUES(%s,%s,%s,%s)
                """,
                (int(user_id), start_date, end_date, VacationStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get(self, *, request_id: int) -> Optional[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE v.request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _to_request(r) if r else None

    def list_for_user(self, *, user_id: int, limit: int = 200) -> Sequence[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE v.user_id=%s ORDER BY v.created_at DESC LIMIT %s",
                (int(user_id), int(limit)),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def list_overlapping(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[VacationStatus] = None,
    ) -> Sequence[VacationRequest]:
        clauses = ["v.start_date <= %s", "v.end_date >= %s"]
        params: list[object] = [end_date, start_date]
        if status is not None:
            clauses.append("v.status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" WHERE {where} ORDER BY v.user_id ASC, v.start_date ASC", tuple(params))
            return [_to_request(r) for r in fetchall(cur)]

    def set_status(self, *, request_id: int, status: VacationStatus, expected: VacationStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE vacation_requests
                SET status=%s
                WHERE request_id=%s AND status=%s
                """,
                (status.value, int(request_id), expected.value),
            )
            return cur.rowcount > 0
