from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, current_role, current_user_id, json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _optional_date(value):
        return parse_iso_date(value) if value else None

    @app.route("/api/vacations", methods=["GET"], endpoint="my_vacations")
    @login_required
    @json_errors
    def my_vacations():
        requests_ = container.vacation_service.list_for_user(user_id=current_user_id())
        return jsonify({"success": True, "vacations": [container.vacation_service.to_ui(r) for r in requests_]})

    @app.route("/api/vacations", methods=["POST"], endpoint="vacation_create")
    @login_required
    @json_errors
    def vacation_create():
        data = request.get_json(silent=True) or {}
        request_id = container.vacation_service.create(
            user_id=current_user_id(),
            start_date=_optional_date(data.get("start_date")),
            end_date=_optional_date(data.get("end_date")),
        )
        return jsonify({"success": True, "message": "Richiesta inviata con successo", "request_id": request_id}), 201

    @app.route("/api/vacations/<int:request_id>/cancel", methods=["POST"], endpoint="vacation_cancel")
    @login_required
    @json_errors
    def vacation_cancel(request_id: int):
        container.vacation_service.cancel(user_id=current_user_id(), request_id=request_id)
        return jsonify({"success": True, "message": "Richiesta annullata"})

    @app.route("/admin/vacations/<int:request_id>/approve", methods=["POST"], endpoint="admin_vacation_approve")
    @admin_required
    @json_errors
    def admin_vacation_approve(request_id: int):
        container.vacation_service.approve(current_role=current_role(), request_id=request_id)
        return jsonify({"success": True, "message": "Richiesta approvata"})

    @app.route("/admin/vacations/<int:request_id>/reject", methods=["POST"], endpoint="admin_vacation_reject")
    @admin_required
    @json_errors
    def admin_vacation_reject(request_id: int):
        container.vacation_service.reject(current_role=current_role(), request_id=request_id)
        return jsonify({"success": True, "message": "Richiesta rifiutata"})

    @app.route("/admin/vacations/timeline/<month_key>", methods=["GET"], endpoint="admin_vacation_timeline")
    @admin_required
    @json_errors
    def admin_vacation_timeline(month_key: str):
        rows = container.vacation_service.approved_in_month(current_role=current_role(), month_key=month_key)
        return jsonify(
            {
                "success": True,
                "month": month_key,
                "timeline": [
                    {"user_id": r.user_id, "full_name": r.full_name, "dates": [d.isoformat() for d in r.dates]}
                    for r in rows
                ],
            }
        )
