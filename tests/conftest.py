from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from src.timesheet.timesheet.accounting.model import AccountingPolicy
from src.timesheet.timesheet.closures.model import MonthlyClosure
from src.timesheet.timesheet.core.enums import VacationStatus
from src.timesheet.timesheet.vacations.model import VacationRequest


class InMemoryAttendanceRepo:
    def __init__(self, records=()):
        self._rows = {}
        self._next_id = 1
        for r in records:
            self.upsert(r)

    def fetch_records(self, user_id, start_date, end_date):
        return [
            r
            for (uid, d), r in self._rows.items()
            if uid == int(user_id) and start_date <= d <= end_date
        ]

    def get_for_user_and_date(self, user_id, work_date):
        return self._rows.get((int(user_id), work_date))

    def upsert(self, record):
        key = (record.user_id, record.work_date)
        existing = self._rows.get(key)
        record_id = existing.record_id if existing else self._next_id
        if not existing:
            self._next_id += 1
        self._rows[key] = replace(record, record_id=record_id)
        return record_id


class InMemoryClosureRepo:
    def __init__(self, names=None):
        self._rows = {}
        self._names = names or {}

    def upsert(self, *, user_id, month_key, submitted_at):
        self._rows[(int(user_id), month_key)] = submitted_at

    def get(self, *, user_id, month_key):
        submitted_at = self._rows.get((int(user_id), month_key))
        if submitted_at is None:
            return None
        return MonthlyClosure(user_id, month_key, submitted_at, self._names.get(int(user_id)))

    def list_for_user(self, *, user_id):
        return [c for c in self.list_all() if c.user_id == int(user_id)]

    def list_all(self, *, month_key=None, limit=200):
        out = [
            MonthlyClosure(uid, mk, at, self._names.get(uid))
            for (uid, mk), at in self._rows.items()
            if month_key is None or mk == month_key
        ]
        return sorted(out, key=lambda c: c.submitted_at, reverse=True)[:limit]


class InMemoryVacationRepo:
    def __init__(self, names=None):
        self._rows = {}
        self._next_id = 1
        self._names = names or {}

    def create(self, *, user_id, start_date, end_date):
        rid = self._next_id
        self._next_id += 1
        self._rows[rid] = VacationRequest(
            request_id=rid,
            user_id=int(user_id),
            start_date=start_date,
            end_date=end_date,
            status=VacationStatus.PENDING,
            created_at=datetime(2026, 6, 1, 9, 0, 0),
            full_name=self._names.get(int(user_id)),
        )
        return rid

    def get(self, *, request_id):
        return self._rows.get(int(request_id))

    def list_for_user(self, *, user_id, limit=200):
        return [r for r in self._rows.values() if r.user_id == int(user_id)][:limit]

    def list_overlapping(self, *, start_date, end_date, status=None):
        return [
            r
            for r in self._rows.values()
            if r.start_date <= end_date and r.end_date >= start_date and (status is None or r.status == status)
        ]

    def set_status(self, *, request_id, status, expected):
        req = self._rows.get(int(request_id))
        if not req or req.status != expected:
            return False
        self._rows[int(request_id)] = replace(req, status=status)
        return True


@pytest.fixture
def policy():
    return AccountingPolicy(threshold_hours=8, standard_daily_hours=8)


@pytest.fixture
def fixed_now():
    return datetime(2026, 7, 1, 18, 30, 0)


@pytest.fixture
def june_first():
    # 2026-06-01 is a Monday; June 2026 has 22 weekdays.
    return date(2026, 6, 1)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendanceRepo()


@pytest.fixture
def closures_repo():
    return InMemoryClosureRepo(names={1: "Mario Rossi", 2: "Giulia Bianchi"})


@pytest.fixture
def vacations_repo():
    return InMemoryVacationRepo(names={1: "Mario Rossi", 2: "Giulia Bianchi"})
