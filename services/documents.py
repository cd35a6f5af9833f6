"""
Raw bytes -> plain text for the resume formats the engine accepts.
"""
import io
import logging
import os
import re
from typing import Callable, Dict

from docx import Document
from pdfminer.high_level import extract_text as pdfminer_extract_text
from pypdf import PdfReader

logger = logging.getLogger(__name__)

for _noisy in ("pdfminer", "pdfminer.pdfpage", "pdfminer.pdfinterp", "pdfminer.psparser"):
    logging.getLogger(_noisy).setLevel(logging.ERROR)

CID_RE = re.compile(r"\(cid:\d+\)")
# below this many characters pypdf output is compared against pdfminer's
RICH_TEXT_CHARS = 500


class DocumentError(Exception):
    """A resume file could not be turned into text."""


class UnsupportedDocumentError(DocumentError):
    pass


class DocumentDecodeError(DocumentError):
    pass


def _pypdf_text(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(p.extract_text() or "" for p in reader.pages)


def _pdfminer_text(data: bytes) -> str:
    return pdfminer_extract_text(io.BytesIO(data))


def pdf_to_text(data: bytes) -> str:
    try:
        text = _pypdf_text(data)
    except Exception as e:
        logger.info("pypdf failed (%s); switching to pdfminer", e)
        text = _pdfminer_text(data)
    if len(text.strip()) < RICH_TEXT_CHARS:
        try:
            alt = _pdfminer_text(data)
        except Exception as e:
            logger.debug("pdfminer retry failed: %s", e)
        else:
            if len(alt.strip()) > len(text.strip()):
                text = alt
    return CID_RE.sub("", text)


def docx_to_text(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    parts = []
    for section in doc.sections:
        parts.extend(p.text for p in section.header.paragraphs)
    parts.extend(p.text for p in doc.paragraphs)
    for table in doc.tables:
        for row in table.rows:
            parts.append(" | ".join(cell.text.strip() for cell in row.cells if cell.text.strip()))
    for section in doc.sections:
        parts.extend(p.text for p in section.footer.paragraphs)
    return "\n".join(p for p in parts if p and p.strip())


def txt_to_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1", errors="ignore")


DECODERS: Dict[str, Callable[[bytes], str]] = {
    ".pdf": pdf_to_text,
    ".docx": docx_to_text,
    # python-docx only reads the zip container; binary .doc fails as a decode error
    ".doc": docx_to_text,
    ".txt": txt_to_text,
}
SUPPORTED_EXTENSIONS = tuple(DECODERS)


def is_supported(name: str) -> bool:
    return os.path.splitext(name or "")[1].lower() in DECODERS


def extract_text(name: str, data: bytes) -> str:
    ext = os.path.splitext(name or "")[1].lower()
    decoder = DECODERS.get(ext)
    if decoder is None:
        raise UnsupportedDocumentError(f"unsupported file type {ext or '(none)'} for {name}")
    try:
        text = decoder(data)
    except Exception as e:
        raise DocumentDecodeError(f"could not read {name}: {e}") from e
    if not text or not text.strip():
        raise DocumentDecodeError(f"no extractable text in {name}")
    return text
