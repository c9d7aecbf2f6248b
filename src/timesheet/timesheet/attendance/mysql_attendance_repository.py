from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    record_id, user_id, work_date,
    morning_in, morning_out, afternoon_in, afternoon_out,
    is_vacation, notes
"""


def _clock(value: Any) -> Optional[str]:
    t = normalize_mysql_time(value)
    return t.strftime("%H:%M") if t else None


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        morning_in=_clock(r.get("morning_in")),
        morning_out=_clock(r.get("morning_out")),
        afternoon_in=_clock(r.get("afternoon_in")),
        afternoon_out=_clock(r.get("afternoon_out")),
        is_vacation=bool(r.get("is_vacation")),
        notes=r.get("notes") or "",
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_records(self, user_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_records
                WHERE user_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(user_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_records
                WHERE user_id=%s AND work_date=%s
                """,
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_record(r)

    def upsert(self, record: AttendanceRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_records(
                    user_id, work_date, morning_in, morning_out, afternoon_in, afternoon_out, is_vacation, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    record_id=LAST_INSERT_ID(record_id),
                    morning_in=VALUES(morning_in),
                    morning_out=VALUES(morning_out),
                    afternoon_in=VALUES(afternoon_in),
                    afternoon_out=VALUES(afternoon_out),
                    is_vacation=VALUES(is_vacation),
                    notes=VALUES(notes)
                """,
                (
                    int(record.user_id),
                    record.work_date,
                    record.morning_in,
                    record.morning_out,
                    record.afternoon_in,
                    record.afternoon_out,
                    1 if record.is_vacation else 0,
                    record.notes or None,
                ),
            )
            return int(cur.lastrowid)
