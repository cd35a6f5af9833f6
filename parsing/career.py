import re
from typing import Optional

from .normalizers import current_year, find_year_ranges
from .validators import contains_term
from .vocab import ROLE_KEYWORDS, SENIORITY_KEYWORDS

EXPERIENCE_PATTERNS = [
    re.compile(r"\b(\d{1,2})(?:\.\d+)?\+?\s*(?:years?|yrs?)(?:\s+of)?\s+(?:experience|exp)\b", re.IGNORECASE),
    re.compile(r"\b(?:total\s+)?(?:experience|exp)\s*:?\s*(\d{1,2})(?:\.\d+)?\+?\s*(?:years?|yrs?)\b", re.IGNORECASE),
]
ROLE_LABEL_RE = re.compile(
    r"\b(?i:current(?:[ \t]+(?:role|position|designation|title))?|position|role|title|designation"
    r"|working[ \t]+as|employed[ \t]+as)\b"
    r"[ \t]*:?[ \t]*(?:(?i:an?)[ \t]+)?"
    r"([A-Z][A-Za-z &/.\-]*?)(?=[ \t]+(?:at|in|with|for)\b|[ \t]*[@,|(]|[ \t]*$)",
    re.MULTILINE,
)
FIRST_LINE_RE = re.compile(r"\A[ \t]*([A-Za-z][A-Za-z \t&/.\-]*?)[ \t]*$", re.MULTILINE)


def extract_experience_years(text: str, this_year: Optional[int] = None) -> Optional[int]:
    text = text or ""
    for pattern in EXPERIENCE_PATTERNS:
        m = pattern.search(text)
        if m:
            return int(m.group(1))

    spans = find_year_ranges(text)
    if not spans:
        return None
    this_year = this_year or current_year()
    return sum(max(0, (end if end is not None else this_year) - start) for start, end in spans)


def _valid_role(candidate: Optional[str]) -> Optional[str]:
    role = (candidate or "").strip(" \t-.&/")
    if not 3 <= len(role) <= 100:
        return None
    if not any(contains_term(role, k) for k in ROLE_KEYWORDS):
        return None
    return role


def extract_current_role(text: str) -> Optional[str]:
    text = text or ""
    for m in ROLE_LABEL_RE.finditer(text):
        role = _valid_role(m.group(1))
        if role:
            return role
    m = FIRST_LINE_RE.search(text)
    return _valid_role(m.group(1)) if m else None


def seniority_from_years(years: Optional[int]) -> Optional[str]:
    if years is None:
        return None
    if years == 0:
        return "Intern"
    if years < 2:
        return "Junior"
    if years < 5:
        return "Mid"
    if years < 10:
        return "Senior"
    return "Lead"


def determine_seniority(text: str, years: Optional[int]) -> Optional[str]:
    for keyword, level in SENIORITY_KEYWORDS:
        if contains_term(text, keyword):
            return level
    return seniority_from_years(years)
