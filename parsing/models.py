"""
Immutable records produced by one parse call.
"""
import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

SENIORITY_LEVELS = ("Intern", "Junior", "Mid", "Senior", "Lead")
DEGREES = ("Bachelor", "Master", "PhD", "Diploma", "High School")


@dataclass(frozen=True)
class EducationEntry:
    degree: str
    field: Optional[str] = None
    institution: Optional[str] = None
    year: Optional[str] = None


@dataclass(frozen=True)
class WorkExperienceEntry:
    company: Optional[str] = None
    role: Optional[str] = None
    start_year: Optional[str] = None
    end_year: Optional[str] = None
    summary: Optional[str] = None


@dataclass(frozen=True)
class ProjectEntry:
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedResume:
    """Structured candidate profile.

    Unresolved scalar fields stay ``None`` and unresolved collections stay
    empty, so ``ParsedResume()`` is the well-formed "nothing found" record.
    """

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    current_role: Optional[str] = None
    seniority: Optional[str] = None
    total_experience_years: Optional[int] = None
    skills: Tuple[str, ...] = ()
    tools_and_technologies: Tuple[str, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    work_experience: Tuple[WorkExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[str, ...] = ()
    resume_summary: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # round-trip through json so nested tuples come back as plain lists
        return json.loads(json.dumps(asdict(self)))
