from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_role, current_user_id, json_errors, login_required
from ..container import Container
from ..reports.projection import build_summary


def register(app: Flask, container: Container) -> None:
    @app.route("/api/months/<month_key>/close", methods=["POST"], endpoint="month_close")
    @login_required
    @json_errors
    def month_close(month_key: str):
        submission = container.closure_service.submit(user_id=current_user_id(), month_key=month_key)
        summary = build_summary(submission.period)
        return jsonify(
            {
                "success": True,
                "message": "Chiusura mese inviata",
                "closure": container.closure_service.to_ui(submission.closure),
                "totals": summary.totals,
            }
        )

    @app.route("/api/closures", methods=["GET"], endpoint="my_closures")
    @login_required
    @json_errors
    def my_closures():
        closures = container.closure_service.list_for_user(user_id=current_user_id())
        return jsonify({"success": True, "closures": [container.closure_service.to_ui(c) for c in closures]})

    @app.route("/admin/closures", methods=["GET"], endpoint="admin_closures")
    @admin_required
    @json_errors
    def admin_closures():
        closures = container.closure_service.list_all(
            current_role=current_role(),
            month_key=request.args.get("month") or None,
        )
        return jsonify({"success": True, "closures": [container.closure_service.to_ui(c) for c in closures]})
