"""
Education, work history, projects, certifications and summary.

Each extractor takes the body of its own section (or the whole text) and
returns plain records; a missing section simply yields nothing.
"""
import re
from typing import List, Optional, Tuple

from . import config
from .normalizers import YEAR_RANGE_RE, YEAR_RE, is_ongoing, normalize_date_range
from .validators import clean_phrase, contains_term, dedupe, excerpt, scan_vocabulary
from .vocab import (
    CERTIFICATIONS,
    FIELDS_OF_STUDY,
    INSTITUTION_KEYWORDS,
    ROLE_KEYWORDS,
)
from .models import EducationEntry, ProjectEntry, WorkExperienceEntry
from .sections import HEADING_RES

DEGREE_PATTERNS = [
    ("Bachelor", re.compile(
        r"\b(?:bachelor(?:'?s)?\b|b\.[ ]?(?:tech|sc|e|s|a|com|ca|ba)\b|btech\b|bsc\b|bca\b|bba\b|bcom\b|undergraduate\b)",
        re.IGNORECASE)),
    ("Master", re.compile(
        r"\b(?:master(?:'?s)?\b|m\.[ ]?(?:tech|sc|e|s|a|com|ca|ba)\b|mtech\b|msc\b|mca\b|mba\b|post[- ]?graduate\b)",
        re.IGNORECASE)),
    ("PhD", re.compile(r"\b(?:ph\.?[ ]?d\b|doctorate\b|doctor of philosophy\b)", re.IGNORECASE)),
    ("Diploma", re.compile(r"\bdiploma\b", re.IGNORECASE)),
    ("High School", re.compile(
        r"\b(?:high(?:er)? school|(?:higher|senior) secondary|secondary school|hsc|ssc|12th|10th|matriculation)\b",
        re.IGNORECASE)),
]
SEGMENT_SPLIT_RE = re.compile(r"\s*(?:[,|(;]|\s-\s)\s*")
FROM_AT_RE = re.compile(r"\b(?:from|at)[ \t]+([A-Z][^,|(\n]*)")

ENTRY_SPLIT_RE = re.compile(r"\n[ \t]*\n")
COMPANY_RE = re.compile(
    r"(?:\b(?i:company|employer|organi[sz]ation)[ \t]*:[ \t]*|\b(?i:worked[ \t]+(?:at|with|for))[ \t]+|(?<![^ \t])(?:at|@)[ \t]+)"
    r"([A-Z0-9][A-Za-z0-9&.'\- ]*[A-Za-z0-9.&])"
)
ROLE_RE = re.compile(
    r"(?:\b(?i:role|position|designation|title)[ \t]*:[ \t]*|\b(?:as|As)[ \t]+(?:an?[ \t]+)?)"
    r"([A-Z][A-Za-z/&\- ]*?)(?=[ \t]+(?:at|in|with|for|from)\b|[ \t]*[,|(@]|[ \t]+-[ \t]|[ \t]*$)",
    re.MULTILINE,
)
TITLE_PATTERNS = [
    re.compile(r"^(?P<title>[^@\-|\n]+?)\s*[\-|@]\s*(?P<company>[^\n|\-]+?)(?:\s*[\-|]\s*(?P<location>[^\n]+))?$"),
    re.compile(r"^(?P<title>.+?)\s+at\s+(?P<company>[^,\n]+)(?:,\s*(?P<location>[^\n]+))?", re.IGNORECASE),
    re.compile(r"^(?P<title>[^,\n]+?)\s*,\s*(?P<company>[^,\n]+)(?:,\s*(?P<location>[^\n]+))?$"),
]
EMPTY_PARENS_RE = re.compile(r"\(\s*\)")

PROJECT_LABEL_RE = re.compile(r"^(?i:project(?:[ \t]+name)?|title|name)[ \t]*:[ \t]*")
PROJECT_NAME_RE = re.compile(r"^([A-Za-z0-9][A-Za-z0-9 .&+#'/]*?)[ \t]*(?::|\||\(|[ \t]-[ \t]|$)")
TECH_RE = re.compile(
    r"(?:\b(?i:technolog(?:y|ies)(?:[ \t]+used)?|tech(?:[ \t]+stack)?|stack|tools(?:[ \t]+used)?)[ \t]*:"
    r"|\b(?i:built[ \t]+(?:with|using)))[ \t]*([^\n]+)"
)
TECH_SPLIT_RE = re.compile(r"[,;|]")

SUMMARY_LABEL_RE = re.compile(
    r"^[ \t]*(?:(?i:professional|career|executive|profile)[ \t]+)?(?i:summary|objective|about(?:[ \t]+me)?|profile)\b"
    r"[ \t]*:?\s*([^\n]+)(?:\n([^\n]{1,100})(?=\n|$))?",
    re.MULTILINE,
)
SENTENCE_LINE_RE = re.compile(r"^([A-Za-z0-9][^\n]*[.!?])[ \t]*$", re.MULTILINE)
HEADING_LINE_RES = [line_re for pats in HEADING_RES.values() for line_re, _ in pats]


def _split_entries(section: Optional[str], cap: int) -> List[str]:
    if not section:
        return []
    return [c.strip() for c in ENTRY_SPLIT_RE.split(section) if c.strip()][:cap]


def _first_line(entry: str) -> str:
    return entry.split("\n", 1)[0].lstrip("- ").strip()


def _has_role_word(text: Optional[str]) -> bool:
    return bool(text) and any(contains_term(text, k) for k in ROLE_KEYWORDS)


# --- education ---

def _is_degree_line(line: str) -> bool:
    return any(p.search(line) for _, p in DEGREE_PATTERNS)


def _degree_context(lines: List[str], start: int) -> List[str]:
    # the degree line plus up to two follow-up lines, stopping at the next degree
    ctx = [lines[start]]
    for line in lines[start + 1:start + 3]:
        if _is_degree_line(line):
            break
        ctx.append(line)
    return ctx


def _institution(ctx: List[str]) -> Optional[str]:
    for line in ctx:
        for seg in SEGMENT_SPLIT_RE.split(line):
            if any(contains_term(seg, k) for k in INSTITUTION_KEYWORDS) and not _is_degree_line(seg):
                inst = clean_phrase(seg)
                if inst:
                    return inst
    for line in ctx:
        m = FROM_AT_RE.search(line)
        if m:
            return clean_phrase(m.group(1))
    return None


def extract_education(section: Optional[str]) -> List[EducationEntry]:
    if not section:
        return []
    lines = [l.strip() for l in section.split("\n") if l.strip()]
    entries = []
    for degree, pattern in DEGREE_PATTERNS:
        idx = next((i for i, l in enumerate(lines) if pattern.search(l)), None)
        if idx is None:
            continue
        ctx = _degree_context(lines, idx)
        joined = " ".join(ctx)
        years = YEAR_RE.findall(joined)
        entries.append(EducationEntry(
            degree=degree,
            field=next((f for f in FIELDS_OF_STUDY if contains_term(joined, f)), None),
            institution=_institution(ctx),
            year=years[-1] if years else None,
        ))
    return entries


# --- work experience ---

def _accept_company(company: Optional[str]) -> Optional[str]:
    if not company or is_ongoing(company) or not re.search(r"[A-Za-z]", company):
        return None
    return company


def _strip_dates(line: str) -> str:
    # "Engineer, Infosys (2019 - Present)": the range hyphen is not a separator
    line = EMPTY_PARENS_RE.sub("", YEAR_RANGE_RE.sub("", line))
    return line.strip(" \t,-|")


def _title_and_company(line: str) -> Tuple[Optional[str], Optional[str]]:
    line = _strip_dates(line)
    for pat in TITLE_PATTERNS:
        m = pat.match(line)
        if not m:
            continue
        title, company = clean_phrase(m.group("title")), clean_phrase(m.group("company"))
        if not _has_role_word(title) and _has_role_word(company):
            title, company = company, title
        if _has_role_word(title):
            return title, _accept_company(company)
    return None, None


def _company(entry: str) -> Optional[str]:
    for m in COMPANY_RE.finditer(entry):
        company = _accept_company(clean_phrase(re.split(r"\s[-|]\s", m.group(1))[0]))
        if company:
            return company
    return None


def _role(entry: str) -> Optional[str]:
    for m in ROLE_RE.finditer(entry):
        role = clean_phrase(m.group(1))
        if role:
            return role
    return None


def extract_work_experience(section: Optional[str]) -> List[WorkExperienceEntry]:
    jobs = []
    for entry in _split_entries(section, config.MAX_WORK_ENTRIES):
        company, role = _company(entry), _role(entry)
        if not company or not role:
            title_guess, company_guess = _title_and_company(_first_line(entry))
            role = role or title_guess
            company = company or company_guess
        if not company and not role:
            continue
        start, end = normalize_date_range(entry)
        jobs.append(WorkExperienceEntry(
            company=company,
            role=role,
            start_year=start,
            end_year=end,
            summary=excerpt(entry),
        ))
    return jobs


# --- projects ---

def _technologies(entry: str) -> Tuple[str, ...]:
    m = TECH_RE.search(entry)
    if not m:
        return ()
    items = [t.strip().strip(".").strip() for t in TECH_SPLIT_RE.split(m.group(1))]
    return tuple(dedupe([t for t in items if t]))


def extract_projects(section: Optional[str]) -> List[ProjectEntry]:
    projects = []
    for entry in _split_entries(section, config.MAX_PROJECT_ENTRIES):
        first = PROJECT_LABEL_RE.sub("", _first_line(entry))
        if TECH_RE.match(first):
            continue
        m = PROJECT_NAME_RE.match(first)
        name = m.group(1).strip() if m else None
        if not name or not 2 <= len(name) <= 80:
            continue
        projects.append(ProjectEntry(name=name, description=excerpt(entry), technologies=_technologies(entry)))
    return projects


# --- certifications & summary ---

def extract_certifications(text: str) -> List[str]:
    return scan_vocabulary(text or "", CERTIFICATIONS, set())[:config.MAX_CERTIFICATIONS]


def _is_heading(line: str) -> bool:
    return any(line_re.match(line) for line_re in HEADING_LINE_RES)


def _summary_ok(summary: str) -> bool:
    return 20 <= len(summary) <= 500


def extract_summary(text: str) -> Optional[str]:
    text = text or ""
    for m in SUMMARY_LABEL_RE.finditer(text):
        summary = m.group(1).strip()
        follow = (m.group(2) or "").strip()
        if follow and not follow.isupper() and not _is_heading(follow):
            summary = f"{summary} {follow}"
        if _summary_ok(summary):
            return summary
    for m in SENTENCE_LINE_RE.finditer(text):
        summary = m.group(1).strip()
        if _summary_ok(summary):
            return summary
    return None
