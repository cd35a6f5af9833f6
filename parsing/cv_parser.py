import logging
from typing import Any, Dict

from .career import determine_seniority, extract_current_role, extract_experience_years
from .history import (
    extract_certifications,
    extract_education,
    extract_projects,
    extract_summary,
    extract_work_experience,
)
from .identity import extract_email, extract_location, extract_name, extract_phone
from .models import ParsedResume
from .normalizers import normalize_text
from .sections import header_slice, split_sections
from .skills import extract_skills_and_tools

logger = logging.getLogger(__name__)


def parse_resume(raw_text: str) -> ParsedResume:
    """Build a ParsedResume from raw resume text.

    Never raises: anything unexpected is logged and an empty record is returned.
    """
    if not isinstance(raw_text, str):
        return ParsedResume()
    try:
        return _parse(raw_text)
    except Exception:
        logger.exception("resume extraction failed on %d chars of text", len(raw_text))
        return ParsedResume()


def _parse(raw_text: str) -> ParsedResume:
    text = normalize_text(raw_text)
    header = header_slice(text)
    sections = split_sections(text)

    email = extract_email(text)
    years = extract_experience_years(text)
    skills, tools = extract_skills_and_tools(text, sections)

    return ParsedResume(
        full_name=extract_name(header, text, email),
        email=email,
        phone=extract_phone(text),
        location=extract_location(header, text),
        current_role=extract_current_role(text),
        seniority=determine_seniority(text, years),
        total_experience_years=years,
        skills=tuple(skills),
        tools_and_technologies=tuple(tools),
        education=tuple(extract_education(sections.get("education"))),
        work_experience=tuple(extract_work_experience(sections.get("experience"))),
        projects=tuple(extract_projects(sections.get("projects"))),
        certifications=tuple(extract_certifications(text)),
        resume_summary=extract_summary(text),
    )


def extract_cv_structured(raw_text: str) -> Dict[str, Any]:
    return parse_resume(raw_text).to_dict()
