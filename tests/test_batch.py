import io

import pytest
from docx import Document
from openpyxl import load_workbook

from parsing.models import ParsedResume
from services.batch import parse_document, parse_documents, scan_folder
from services.documents import DocumentDecodeError, UnsupportedDocumentError, extract_text
from services.export import COLUMNS, SHEET_NAME, frame_to_csv, frame_to_xlsx, results_frame

SAMPLE = """ANITA RAO
Pune
anita.rao@example.com | +91 91234 56789

SKILLS
Python, Pandas, Tableau
"""


def _docx_bytes(lines):
    doc = Document()
    for line in lines:
        doc.add_paragraph(line)
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Tools"
    table.rows[0].cells[1].text = "Docker"
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_txt_document_parses():
    result = parse_document("anita.txt", SAMPLE.encode("utf-8"))
    assert result.ok
    assert result.resume.email == "anita.rao@example.com"
    assert result.resume.phone == "9123456789"
    assert result.resume.location == "Pune"


def test_latin1_txt_is_decoded():
    assert "Jos" in extract_text("cv.txt", "José Silva".encode("latin-1"))


def test_unsupported_extension():
    with pytest.raises(UnsupportedDocumentError):
        extract_text("cv.xls", b"whatever")
    result = parse_document("cv.xls", b"whatever")
    assert not result.ok
    assert "unsupported" in result.error
    assert result.resume == ParsedResume()


def test_empty_and_corrupt_documents_fail_locally():
    with pytest.raises(DocumentDecodeError):
        extract_text("empty.txt", b"   \n ")
    with pytest.raises(DocumentDecodeError):
        extract_text("old.doc", b"\xd0\xcf\x11\xe0 legacy word file")
    assert not parse_document("broken.pdf", b"not a pdf").ok


def test_docx_document():
    data = _docx_bytes(["ANITA RAO", "anita.rao@example.com"])
    text = extract_text("anita.docx", data)
    assert "ANITA RAO" in text
    assert "Tools | Docker" in text
    result = parse_document("anita.docx", data)
    assert result.resume.full_name == "Anita Rao"


def test_batch_keeps_input_order():
    docs = [("b.txt", SAMPLE.encode()), ("a.xls", b"x"), ("c.txt", b"Priya Nair\npriya@example.com")]
    results = parse_documents(docs, max_workers=3)
    assert [r.file_name for r in results] == ["b.txt", "a.xls", "c.txt"]
    assert [r.ok for r in results] == [True, False, True]
    assert parse_documents([]) == []


def test_scan_folder(tmp_path):
    (tmp_path / "zed.txt").write_text(SAMPLE, encoding="utf-8")
    (tmp_path / "amy.txt").write_text("Amy Shah\namy@example.com", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")
    results = scan_folder(str(tmp_path))
    assert [r.file_name for r in results] == ["amy.txt", "zed.txt"]
    assert all(r.ok for r in results)


def test_scan_missing_folder(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_folder(str(tmp_path / "nope"))


def test_export_frame():
    results = parse_documents([("anita.txt", SAMPLE.encode()), ("bad.xls", b"x")])
    df = results_frame(results, [{"Current CTC": "12 LPA"}])
    assert list(df.columns) == list(COLUMNS)
    first = df.iloc[0]
    assert first["Applicant Name"] == "Anita Rao"
    assert first["Contact"] == "9123456789"
    assert first["Current CTC"] == "12 LPA"
    assert "Python" in first["Skills"]
    assert df.iloc[1]["Error"]
    assert frame_to_csv(df).startswith(b"File,Applicant Name,Email")


def test_export_extras_follow_row_position():
    results = parse_documents([("cv.txt", SAMPLE.encode()), ("cv.txt", b"Priya Nair\npriya@example.com")])
    df = results_frame(results, [{"Expected Pay": "18 LPA"}, {"Expected Pay": "9 LPA"}])
    assert list(df["File"]) == ["cv.txt", "cv.txt"]
    assert list(df["Expected Pay"]) == ["18 LPA", "9 LPA"]
    assert list(results_frame(results)["Expected Pay"]) == ["", ""]


def test_export_xlsx():
    df = results_frame(parse_documents([("anita.txt", SAMPLE.encode())]))
    wb = load_workbook(io.BytesIO(frame_to_xlsx(df)))
    assert wb.sheetnames == [SHEET_NAME]
    ws = wb[SHEET_NAME]
    assert ws["B1"].value == "Applicant Name"
    assert ws["B2"].value == "Anita Rao"
    assert ws.column_dimensions["B"].width == 20
