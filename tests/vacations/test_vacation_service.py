from datetime import date

import pytest

from src.timesheet.timesheet.core.enums import Role, VacationStatus
from src.timesheet.timesheet.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.timesheet.timesheet.vacations.service import VacationService


def test_create_requires_ordered_dates(vacations_repo):
    svc = VacationService(vacations_repo)
    with pytest.raises(ValidationError):
        svc.create(user_id=1, start_date=None, end_date=date(2026, 6, 5))
    with pytest.raises(ValidationError):
        svc.create(user_id=1, start_date=date(2026, 6, 5), end_date=date(2026, 6, 1))

    rid = svc.create(user_id=1, start_date=date(2026, 6, 1), end_date=date(2026, 6, 5))
    assert vacations_repo.get(request_id=rid).status == VacationStatus.PENDING


def test_owner_can_cancel_pending_request(vacations_repo):
    svc = VacationService(vacations_repo)
    rid = svc.create(user_id=1, start_date=date(2026, 6, 1), end_date=date(2026, 6, 2))

    with pytest.raises(AuthorizationError):
        svc.cancel(user_id=2, request_id=rid)

    svc.cancel(user_id=1, request_id=rid)
    assert vacations_repo.get(request_id=rid).status == VacationStatus.CANCELLED

    with pytest.raises(ValidationError):
        svc.cancel(user_id=1, request_id=rid)


def test_cancel_unknown_request(vacations_repo):
    with pytest.raises(NotFoundError):
        VacationService(vacations_repo).cancel(user_id=1, request_id=99)


def test_only_admin_decides(vacations_repo):
    svc = VacationService(vacations_repo)
    rid = svc.create(user_id=1, start_date=date(2026, 6, 1), end_date=date(2026, 6, 2))

    with pytest.raises(AuthorizationError):
        svc.approve(current_role=Role.STAFF, request_id=rid)

    svc.approve(current_role=Role.ADMIN, request_id=rid)
    assert vacations_repo.get(request_id=rid).status == VacationStatus.APPROVED

    with pytest.raises(ValidationError):
        svc.reject(current_role=Role.ADMIN, request_id=rid)


def test_timeline_clips_to_month_and_skips_unapproved(vacations_repo):
    svc = VacationService(vacations_repo)
    a = svc.create(user_id=1, start_date=date(2026, 5, 30), end_date=date(2026, 6, 2))
    b = svc.create(user_id=1, start_date=date(2026, 6, 2), end_date=date(2026, 6, 3))
    svc.create(user_id=2, start_date=date(2026, 6, 10), end_date=date(2026, 6, 12))
    c = svc.create(user_id=2, start_date=date(2026, 6, 29), end_date=date(2026, 7, 3))
    for rid in (a, b, c):
        svc.approve(current_role=Role.ADMIN, request_id=rid)

    rows = svc.approved_in_month(current_role=Role.ADMIN, month_key="2026-06")
    assert [r.user_id for r in rows] == [1, 2]
    assert rows[0].full_name == "Mario Rossi"
    assert [d.day for d in rows[0].dates] == [1, 2, 3]
    assert [d.day for d in rows[1].dates] == [29, 30]

    with pytest.raises(AuthorizationError):
        svc.approved_in_month(current_role=Role.STAFF, month_key="2026-06")


def test_to_ui_has_italian_label(vacations_repo):
    svc = VacationService(vacations_repo)
    rid = svc.create(user_id=1, start_date=date(2026, 6, 1), end_date=date(2026, 6, 2))
    ui = svc.to_ui(vacations_repo.get(request_id=rid))
    assert ui["status"] == "pending"
    assert ui["status_label"] == "In attesa"
    assert ui["start_date"] == "2026-06-01"
