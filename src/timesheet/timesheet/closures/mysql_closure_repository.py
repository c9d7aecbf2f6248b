from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import MonthlyClosure
from .repository import ClosureRepository


def _to_closure(r: dict) -> MonthlyClosure:
    return MonthlyClosure(
        user_id=int(r["user_id"]),
        month_key=str(r["month_key"]),
        submitted_at=r["submitted_at"],
        full_name=r.get("full_name"),
    )


class MySQLClosureRepository(ClosureRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, user_id: int, month_key: str, submitted_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO monthly_closures(user_id, month_key, submitted_at)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE submitted_at=VALUES(submitted_at)
                """,
                (int(user_id), month_key, submitted_at),
            )

    def get(self, *, user_id: int, month_key: str) -> Optional[MonthlyClosure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.user_id, c.month_key, c.submitted_at, u.full_name
                FROM monthly_closures c
                LEFT JOIN users u ON u.user_id = c.user_id
                WHERE c.user_id=%s AND c.month_key=%s
                """,
                (int(user_id), month_key),
            )
            r = fetchone(cur)
            return _to_closure(r) if r else None

    def list_for_user(self, *, user_id: int) -> Sequence[MonthlyClosure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.user_id, c.month_key, c.submitted_at, u.full_name
                FROM monthly_closures c
                LEFT JOIN users u ON u.user_id = c.user_id
                WHERE c.user_id=%s
                ORDER BY c.submitted_at DESC
                """,
                (int(user_id),),
            )
            return [_to_closure(r) for r in fetchall(cur)]

    def list_all(self, *, month_key: Optional[str] = None, limit: int = 200) -> Sequence[MonthlyClosure]:
        clauses = ["1=1"]
        params: list[object] = []
        if month_key is not None:
            clauses.append("c.month_key=%s")
            params.append(month_key)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT c.user_id, c.month_key, c.submitted_at, u.full_name
                FROM monthly_closures c
                LEFT JOIN users u ON u.user_id = c.user_id
                WHERE {where}
                ORDER BY c.submitted_at DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_to_closure(r) for r in fetchall(cur)]
