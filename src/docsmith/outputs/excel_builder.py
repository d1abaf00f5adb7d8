import json
import re
from io import BytesIO

import pandas as pd

from docsmith import config
from docsmith.outputs.base import FileMaterializer, RenderedFile, timestamp_millis, xml_safe

INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
MAX_SHEET_NAME = 31
PLACEHOLDER = "No data available"


def sheet_title(name, taken: set[str]) -> str:
    """Excel-safe, unique worksheet title."""
    base = INVALID_SHEET_CHARS.sub("", xml_safe(name or "")).strip()[:MAX_SHEET_NAME] or "Sheet1"
    title, n = base, 1
    while title.lower() in taken:
        n += 1
        suffix = f" ({n})"
        title = base[: MAX_SHEET_NAME - len(suffix)] + suffix
    taken.add(title.lower())
    return title


def cell_value(value):
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, str):
        return xml_safe(value)
    return value


def sheet_frame(rows) -> tuple[pd.DataFrame, bool]:
    """DataFrame for one sheet, plus whether the header row should be written."""
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
        return pd.DataFrame([[PLACEHOLDER]]), False
    # columns come from the first row; later rows are taken as-is
    columns = list(rows[0].keys())
    records = [
        {col: cell_value(row.get(col)) for col in columns}
        for row in rows
        if isinstance(row, dict)
    ]
    frame = pd.DataFrame(records, columns=columns)
    return frame.rename(columns=xml_safe), True


class ExcelMaterializer(FileMaterializer):
    content_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    label = "Excel"

    def fallback(self, raw: str) -> dict:
        return {"sheets": [{"name": "Sheet1", "data": [{"Content": raw}]}]}

    def render_data(self, data) -> RenderedFile:
        sheets = data.get("sheets") if isinstance(data, dict) else None
        if not isinstance(sheets, list) or not sheets:
            sheets = [{"name": "Sheet1", "data": []}]

        buffer = BytesIO()
        taken: set[str] = set()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            for sheet in sheets:
                sheet = sheet if isinstance(sheet, dict) else {}
                frame, header = sheet_frame(sheet.get("data"))
                frame.to_excel(writer, sheet_name=sheet_title(sheet.get("name"), taken), index=False, header=header)

        filename = data.get("filename") if isinstance(data, dict) else None
        filename = str(filename) if filename else str(timestamp_millis())
        if not filename.lower().endswith(".xlsx"):
            filename += ".xlsx"
        return RenderedFile(key=f"{config.RESULTS_PREFIX}{filename}", body=buffer.getvalue())
