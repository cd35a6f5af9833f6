import re
from datetime import date
from typing import List, Optional, Tuple

import dateparser

LINE_BREAK_RE = re.compile(r"\r\n?|[\x0b\x0c\x85\u2028\u2029]")
CONTROL_RE = re.compile(r"[\x00-\x08\x0e-\x1f\x7f-\x9f\u200b-\u200d\u2060\ufeff]")
CID_RE = re.compile(r"\(cid:\d+\)")
HYPHEN_RE = re.compile(r"([a-z])-\n([a-z])")
BULLET_VARIANTS = [
    "\u2022", "\u25cf", "\u25aa", "\u25a0", "\u25e6", "\u25ba", "\u27a2", "\u2713", "\u2714",
    "*", "\u00b7", "\uf0b7", "\uf0a7", "\uf076",
]
BULLET_RE = re.compile(r"^[ \t]*[" + "".join(re.escape(b) for b in BULLET_VARIANTS) + r"]+[ \t]*", re.MULTILINE)
MULTISPACES_RE = re.compile(r"[ \t\u00a0\u2000-\u200a\u202f\u3000]+")
NEWLINES_RE = re.compile(r"\n{3,}")

# UTF-8 punctuation that went through a cp1252 decode on the way in
MOJIBAKE = {
    "\u00e2\u20ac\u2122": "'", "\u00e2\u20ac\u02dc": "'", "\u00e2\u20ac\u0153": '"', "\u00e2\u20ac\x9d": '"',
    "\u00e2\u20ac\u201c": "-", "\u00e2\u20ac\u201d": "-", "\u00e2\u20ac\u00a2": "\u2022", "\u00e2\u20ac\u00a6": "...",
    "\u00c2\u00a0": " ",
}
SMART_QUOTES = {
    "\u2018": "'", "\u2019": "'", "\u201c": '"', "\u201d": '"',
    "\u2010": "-", "\u2011": "-", "\u2012": "-", "\u2013": "-", "\u2014": "-", "\u2212": "-",
    "\u2026": "...",
}

MONTHS = (
    "jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    "|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
ONGOING = ("present", "current", "now", "ongoing", "today")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
YEAR_RANGE_RE = re.compile(
    rf"\b((?:(?:{MONTHS})\.?,?\s*)?(?:19|20)\d{{2}})\s*(?:-|to|until)\s*"
    rf"((?:(?:{MONTHS})\.?,?\s*)?(?:19|20)\d{{2}}|{'|'.join(ONGOING)})\b",
    re.IGNORECASE,
)


def unify_line_breaks(txt: str) -> str:
    return LINE_BREAK_RE.sub("\n", txt)


def repair_mojibake(txt: str) -> str:
    for k, v in MOJIBAKE.items():
        txt = txt.replace(k, v)
    return txt


def strip_control_chars(txt: str) -> str:
    return CONTROL_RE.sub("", CID_RE.sub("", txt))


def normalize_quotes_dashes(txt: str) -> str:
    for k, v in SMART_QUOTES.items():
        txt = txt.replace(k, v)
    return txt


def fix_hyphenation(txt: str) -> str:
    return HYPHEN_RE.sub(r"\1\2", txt)


def unify_bullets(txt: str) -> str:
    # Replace any bullet glyph at line start with a single '- '
    return BULLET_RE.sub("- ", txt)


def collapse_whitespace(txt: str, collapse_blank_lines: bool = True) -> str:
    txt = MULTISPACES_RE.sub(" ", txt)
    txt = "\n".join(line.strip() for line in txt.split("\n"))
    if collapse_blank_lines:
        txt = NEWLINES_RE.sub("\n\n", txt)
    return txt.strip()


def normalize_text(txt: str, collapse_blank_lines: bool = True) -> str:
    txt = strip_control_chars(repair_mojibake(unify_line_breaks(txt)))
    txt = unify_bullets(fix_hyphenation(normalize_quotes_dashes(txt)))
    return collapse_whitespace(txt, collapse_blank_lines)


def current_year() -> int:
    return date.today().year


def is_ongoing(token: str) -> bool:
    return (token or "").strip().lower() in ONGOING


def parse_year(token: str) -> Optional[int]:
    token = (token or "").strip().rstrip(".,")
    if not token:
        return None
    if token.isdigit():
        return int(token)
    dt = dateparser.parse(token, languages=["en"], settings={"PREFER_DAY_OF_MONTH": "first"})
    if dt:
        return dt.year
    m = YEAR_RE.search(token)
    return int(m.group()) if m else None


def find_year_ranges(text: str) -> List[Tuple[int, Optional[int]]]:
    """Every ``start - end`` span in *text*; the end is None for ongoing roles."""
    spans: List[Tuple[int, Optional[int]]] = []
    for m in YEAR_RANGE_RE.finditer(text or ""):
        start = parse_year(m.group(1))
        if start is None:
            continue
        end_raw = m.group(2)
        if is_ongoing(end_raw):
            spans.append((start, None))
            continue
        end = parse_year(end_raw)
        if end is not None:
            spans.append((start, end))
    return spans


def normalize_date_range(text: str) -> Tuple[Optional[str], Optional[str]]:
    # Finds first range; callers run it per entry block
    spans = find_year_ranges(text)
    if not spans:
        return None, None
    start, end = spans[0]
    return str(start), ("Present" if end is None else str(end))
