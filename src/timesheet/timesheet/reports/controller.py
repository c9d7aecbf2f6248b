from __future__ import annotations

import csv
import io
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.spreadsheet import xlsx_response
from ..common.web import admin_required, current_user_id, json_errors, login_required
from ..container import Container
from .projection import PrintableReport, SPREADSHEET_COLUMNS


def _printable_to_json(report: PrintableReport) -> dict:
    return {
        "rows": report.rows,
        "total_row": report.total_row,
        "worked_day_count": report.worked_day_count,
        "standard_daily_hours": report.standard_daily_hours,
        "standard_hours_baseline": report.standard_hours_baseline_label,
    }


def _implicit_vacation_arg():
    value = request.args.get("implicit_vacation")
    if value is None or value == "":
        return None
    return value.lower() in {"1", "true", "yes", "si"}


def register(app: Flask, container: Container) -> None:
    def _write_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SPREADSHEET_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/months/<month_key>/summary", methods=["GET"], endpoint="month_summary")
    @login_required
    @json_errors
    def month_summary(month_key: str):
        view = container.report_service.summary(user_id=current_user_id(), month_key=month_key)
        return jsonify({"success": True, "month": month_key, **asdict(view)})

    @app.route("/api/months/<month_key>/printable", methods=["GET"], endpoint="month_printable")
    @login_required
    @json_errors
    def month_printable(month_key: str):
        report = container.report_service.printable(
            user_id=current_user_id(),
            month_key=month_key,
            absent_day_implicit_vacation=_implicit_vacation_arg(),
        )
        return jsonify({"success": True, "month": month_key, **_printable_to_json(report)})

    @app.route("/api/months/<month_key>/export.xlsx", methods=["GET"], endpoint="month_export_xlsx")
    @login_required
    @json_errors
    def month_export_xlsx(month_key: str):
        rows = container.report_service.spreadsheet_rows(user_id=current_user_id(), month_key=month_key)
        return xlsx_response(
            rows=rows, columns=SPREADSHEET_COLUMNS, sheet_name="Chiusura Mese", filename=f"Chiusura_{month_key}.xlsx"
        )

    @app.route("/api/months/<month_key>/export.csv", methods=["GET"], endpoint="month_export_csv")
    @login_required
    @json_errors
    def month_export_csv(month_key: str):
        rows = container.report_service.spreadsheet_rows(user_id=current_user_id(), month_key=month_key)
        return _write_csv(rows=rows, filename=f"Chiusura_{month_key}.csv")

    @app.route(
        "/admin/users/<int:user_id>/months/<month_key>/export.xlsx",
        methods=["GET"],
        endpoint="admin_month_export_xlsx",
    )
    @admin_required
    @json_errors
    def admin_month_export_xlsx(user_id: int, month_key: str):
        rows = container.report_service.spreadsheet_rows(user_id=user_id, month_key=month_key)
        return xlsx_response(
            rows=rows, columns=SPREADSHEET_COLUMNS, sheet_name="Chiusura Mese", filename=f"Chiusura_{user_id}_{month_key}.xlsx"
        )

    @app.route(
        "/admin/users/<int:user_id>/months/<month_key>/printable",
        methods=["GET"],
        endpoint="admin_month_printable",
    )
    @admin_required
    @json_errors
    def admin_month_printable(user_id: int, month_key: str):
        report = container.report_service.printable(
            user_id=user_id,
            month_key=month_key,
            absent_day_implicit_vacation=_implicit_vacation_arg(),
        )
        return jsonify({"success": True, "user_id": user_id, "month": month_key, **_printable_to_json(report)})
