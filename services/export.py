import io
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
from openpyxl.utils import get_column_letter

from .batch import ParseResult

SHEET_NAME = "Resumes"
# columns the recruiter fills in by hand
CALLER_COLUMNS = ("Current CTC", "Expected Pay", "Availability to Join")
COLUMNS = (
    "File", "Applicant Name", "Email", "Contact", "Place", "Skills", "Experience",
    "Current Role", "Seniority", "Tools", "Certifications",
) + CALLER_COLUMNS + ("Error",)
COLUMN_WIDTHS = {
    "File": 25, "Applicant Name": 20, "Email": 30, "Contact": 15, "Place": 20,
    "Skills": 40, "Experience": 15, "Current Role": 25, "Seniority": 12, "Tools": 40,
    "Certifications": 30, "Current CTC": 15, "Expected Pay": 15, "Availability to Join": 20,
    "Error": 40,
}


def _join(items: Iterable[str]) -> str:
    return ", ".join(items)


def flatten_result(result: ParseResult, extras: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    r = result.resume
    years = r.total_experience_years
    row = {
        "File": result.file_name,
        "Applicant Name": r.full_name or "",
        "Email": r.email or "",
        "Contact": r.phone or "",
        "Place": r.location or "",
        "Skills": _join(r.skills + r.tools_and_technologies),
        "Experience": f"{years} years" if years is not None else "",
        "Current Role": r.current_role or "",
        "Seniority": r.seniority or "",
        "Tools": _join(r.tools_and_technologies),
        "Certifications": _join(r.certifications),
        "Error": result.error or "",
    }
    for col in CALLER_COLUMNS:
        row[col] = (extras or {}).get(col, "")
    return row


def results_frame(results: Iterable[ParseResult], extras: Optional[List[Dict[str, Any]]] = None) -> pd.DataFrame:
    """One row per file; ``extras[i]`` holds the caller-owned columns of row *i*."""
    extras = extras or []
    rows = [
        flatten_result(r, extras[i] if i < len(extras) else None)
        for i, r in enumerate(results)
    ]
    return pd.DataFrame(rows, columns=list(COLUMNS))


def frame_to_csv(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")


def frame_to_xlsx(df: pd.DataFrame) -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        sheet = writer.sheets[SHEET_NAME]
        for idx, col in enumerate(df.columns, start=1):
            sheet.column_dimensions[get_column_letter(idx)].width = COLUMN_WIDTHS.get(col, 15)
    return buf.getvalue()
