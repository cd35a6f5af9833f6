"""
Name, email, phone and location extraction.

Name and location are ordered fallback chains: each strategy is a plain
function and the first one returning a validated value wins.
"""
import re
from functools import partial
from typing import List, Optional

from .validators import (
    WORD_RE,
    first_valid,
    has_blacklisted_word,
    looks_like_name,
    recase,
    strip_name_suffix,
    word_pattern,
)
from .vocab import CITIES, CONTACT_KEYWORDS, LOCATION_STOPWORDS, TOOLS

EMAIL_RE = re.compile(r"\b[A-Za-z][A-Za-z0-9._%+-]*@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(
    r"(?<![\d+])(?:(?:\+91|91|0)[\s-]?)?"
    r"(?:[6-9]\d{9}|[6-9]\d{2}[\s-]\d{3}[\s-]\d{4}|\d{5}[\s-]\d{5}|\(?\d{2,4}\)?[\s-]\d{6,8})"
    r"(?!\d)"
)
PROPER_PHRASE = r"[A-Z][a-z]+(?:,?[ \t]+[A-Z][a-z]+)*"
LOCATION_LABEL_RE = re.compile(rf"\b(?i:location|address|place|city|residence)[ \t]*:?[ \t]*({PROPER_PHRASE})")
LOCATION_PREP_RE = re.compile(rf"\b(?:in|at|from)[ \t]+({PROPER_PHRASE})\b")
NAME_LABEL_RE = re.compile(r"\b(?i:name|candidate|applicant)[ \t]*:?[ \t]*([A-Z][A-Za-z.'\-]*(?:[ \t]+[A-Z][A-Za-z.'\-]*)+)")
EMAIL_SPLIT_RE = re.compile(r"[._\-+\d]+")

TOOL_NAMES = frozenset(t.lower() for t in TOOLS)
CITY_WORDS = frozenset(w for city in CITIES for w in city.split())


def extract_email(text: str) -> Optional[str]:
    m = EMAIL_RE.search(text or "")
    return m.group().lower() if m else None


def extract_phone(text: str) -> Optional[str]:
    for m in PHONE_RE.finditer(text or ""):
        digits = re.sub(r"\D", "", m.group())
        if len(digits) >= 10:
            return digits[-10:]
    return None


# --- location ---

def _accept_location(candidate: str) -> Optional[str]:
    candidate = candidate.strip(" ,")
    words = candidate.split()
    while words and words[-1].strip(",").lower() in LOCATION_STOPWORDS:
        words.pop()
    candidate = " ".join(words).strip(" ,")
    if len(candidate) <= 3 or candidate.lower() in LOCATION_STOPWORDS or candidate.lower() in TOOL_NAMES:
        return None
    return candidate


def _location_from_gazetteer(header: str) -> Optional[str]:
    hits = []
    for city in CITIES:
        m = re.search(word_pattern(city), header, re.IGNORECASE)
        if m:
            hits.append((m.start(), city))
    if not hits:
        return None
    return min(hits)[1].title()


def _location_from_pattern(pattern: re.Pattern, text: str) -> Optional[str]:
    for m in pattern.finditer(text):
        accepted = _accept_location(m.group(1))
        if accepted:
            return accepted
    return None


def extract_location(header: str, text: str) -> Optional[str]:
    return first_valid((
        partial(_location_from_gazetteer, header or ""),
        partial(_location_from_pattern, LOCATION_LABEL_RE, text or ""),
        partial(_location_from_pattern, LOCATION_PREP_RE, text or ""),
    ))


# --- name ---

def _header_lines(header: str) -> List[str]:
    return [l.strip() for l in (header or "").split("\n") if len(l.strip()) > 2]


def _valid_name(candidate: str) -> bool:
    # a header line like "Pune Maharashtra India" is shaped like a name
    return looks_like_name(candidate) and not any(w.lower() in CITY_WORDS for w in candidate.split())


def _is_contact_line(line: str) -> bool:
    low = line.lower()
    return "@" in low or any(k in low for k in CONTACT_KEYWORDS)


def _name_from_capitalized_line(lines: List[str]) -> Optional[str]:
    for line in lines[:8]:
        if "@" in line or sum(c.isdigit() for c in line) > 4:
            continue
        candidate = recase(strip_name_suffix(line))
        if 2 <= len(candidate.split()) <= 4 and _valid_name(candidate):
            return candidate
    return None


def _name_from_email_overlap(lines: List[str], email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    local = re.sub(r"[^a-z]", "", email.split("@")[0].lower())
    if not local:
        return None
    for line in lines[:15]:
        if _is_contact_line(line) or has_blacklisted_word(line):
            continue
        candidate = recase(strip_name_suffix(line))
        words = [w.lower() for w in WORD_RE.findall(candidate) if len(w) > 2]
        if len(candidate.split()) < 2 or not words:
            continue
        overlap = sum(1 for w in words if w in local)
        if overlap * 2 >= len(words) and _valid_name(candidate):
            return candidate
    return None


def _name_from_label(text: str) -> Optional[str]:
    for m in NAME_LABEL_RE.finditer(text):
        candidate = m.group(1).strip()
        if _valid_name(candidate):
            return candidate
    return None


def _name_from_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    parts = [p for p in EMAIL_SPLIT_RE.split(email.split("@")[0]) if len(p) >= 2 and p.isalpha()]
    if len(parts) < 2:
        return None
    candidate = " ".join(p.capitalize() for p in parts[:4])
    return candidate if _valid_name(candidate) else None


def _name_from_first_line(lines: List[str]) -> Optional[str]:
    if not lines:
        return None
    candidate = recase(strip_name_suffix(lines[0]))
    return candidate if _valid_name(candidate) else None


def extract_name(header: str, text: str, email: Optional[str]) -> Optional[str]:
    lines = _header_lines(header)
    return first_valid((
        partial(_name_from_capitalized_line, lines),
        partial(_name_from_email_overlap, lines, email),
        partial(_name_from_label, text or ""),
        partial(_name_from_email, email),
        partial(_name_from_first_line, lines),
    ))
