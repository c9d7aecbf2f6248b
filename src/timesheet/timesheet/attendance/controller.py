from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.spreadsheet import xlsx_response
from ..common.web import current_user_id, json_errors, login_required
from ..container import Container

RECORD_EXPORT_COLUMNS = [
    "Data",
    "Entrata Mattina",
    "Uscita Mattina",
    "Entrata Pomeriggio",
    "Uscita Pomeriggio",
    "Note",
]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/days/<date_s>", methods=["GET"], endpoint="day_get")
    @login_required
    @json_errors
    def day_get(date_s: str):
        view = container.attendance_service.get_day(current_user_id(), parse_iso_date(date_s))
        return jsonify({"success": True, "day": view.to_ui()})

    @app.route("/api/days/<date_s>", methods=["POST"], endpoint="day_save")
    @login_required
    @json_errors
    def day_save(date_s: str):
        data = request.get_json(silent=True) or {}
        view = container.attendance_service.save_day(
            user_id=current_user_id(),
            work_date=parse_iso_date(date_s),
            morning_in=data.get("morning_in"),
            morning_out=data.get("morning_out"),
            afternoon_in=data.get("afternoon_in"),
            afternoon_out=data.get("afternoon_out"),
            is_vacation=bool(data.get("is_vacation", False)),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "message": "Giornata salvata", "day": view.to_ui()})

    @app.route("/api/days/<date_s>/vacation", methods=["POST"], endpoint="day_mark_vacation")
    @login_required
    @json_errors
    def day_mark_vacation(date_s: str):
        view = container.attendance_service.mark_vacation(user_id=current_user_id(), work_date=parse_iso_date(date_s))
        return jsonify({"success": True, "message": "Giornata segnata come ferie", "day": view.to_ui()})

    @app.route("/api/months/<month_key>/records", methods=["GET"], endpoint="month_records")
    @login_required
    @json_errors
    def month_records(month_key: str):
        records = container.attendance_service.list_month(current_user_id(), month_key)
        rows = [
            {
                "date": r.work_date.isoformat(),
                "morning_in": r.morning_in or "",
                "morning_out": r.morning_out or "",
                "afternoon_in": r.afternoon_in or "",
                "afternoon_out": r.afternoon_out or "",
                "is_vacation": r.is_vacation,
                "notes": r.notes,
            }
            for r in records
        ]
        return jsonify({"success": True, "month": month_key, "records": rows})

    @app.route("/api/months/<month_key>/records.xlsx", methods=["GET"], endpoint="month_records_xlsx")
    @login_required
    @json_errors
    def month_records_xlsx(month_key: str):
        """Raw stored times for the month (history export), one row per record."""
        records = container.attendance_service.list_month(current_user_id(), month_key)
        rows = [
            {
                "Data": r.work_date.isoformat(),
                "Entrata Mattina": r.morning_in or "",
                "Uscita Mattina": r.morning_out or "",
                "Entrata Pomeriggio": r.afternoon_in or "",
                "Uscita Pomeriggio": r.afternoon_out or "",
                "Note": r.notes,
            }
            for r in records
        ]
        return xlsx_response(
            rows=rows, columns=RECORD_EXPORT_COLUMNS, sheet_name="Presenze", filename=f"Presenze_{month_key}.xlsx"
        )
