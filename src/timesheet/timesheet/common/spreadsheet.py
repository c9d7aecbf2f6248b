from __future__ import annotations

import io

import pandas as pd
from flask import send_file


def xlsx_response(*, rows: list[dict], columns: list[str], sheet_name: str, filename: str):
    """Single-sheet workbook built in memory (pandas + openpyxl)."""
    df = pd.DataFrame(rows, columns=columns)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    output.seek(0)

    return send_file(
        output,
        download_name=filename,
        as_attachment=True,
        mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
