"""
Header slice and heading-delimited body sections.

A section is a pure function of (text, name): nothing is cached, so callers
may slice the same text as often as they like.
"""
import re
from typing import Dict, List, Optional, Pattern, Tuple

from . import config
from .vocab import SECTION_HEADINGS

# words a heading may carry after its keyword: "Education Details", "Skills & Tools", "Projects (Academic)"
HEADING_TAIL = r"(?:[ \t]+(?:details|highlights|history|summary))?(?:[ \t]*[&/(][^\n:]{0,30})?"
# a colon followed by a number is a label ("Experience: 5 years"), not a heading
HEADING_END = r"[ \t]*(?::(?![ \t]*\d)|$)"


def _keyword(kw: str) -> str:
    return r"\s+".join(re.escape(part) for part in kw.split())


def _heading_line(alternatives: str) -> Pattern:
    # one leading qualifier is allowed: "Academic Projects", "Relevant Experience"
    return re.compile(
        rf"^[ \t#>\-]*(?:[A-Za-z]+[ \t]+)?(?:{alternatives}){HEADING_TAIL}{HEADING_END}",
        re.IGNORECASE | re.MULTILINE,
    )


def _compile_headings() -> Dict[str, List[Tuple[Pattern, Pattern]]]:
    out = {}
    for name, keywords in SECTION_HEADINGS.items():
        out[name] = [
            (_heading_line(_keyword(kw)), re.compile(rf"(?<!\w){_keyword(kw)}(?!\w)", re.IGNORECASE))
            for kw in keywords
        ]
    return out


def _compile_stops() -> Dict[str, Pattern]:
    out = {}
    for name in SECTION_HEADINGS:
        others = [kw for other, kws in SECTION_HEADINGS.items() if other != name for kw in kws]
        others.sort(key=len, reverse=True)
        out[name] = _heading_line("|".join(_keyword(kw) for kw in others))
    return out


HEADING_RES = _compile_headings()
STOP_RES = _compile_stops()


def header_slice(text: str, size: int = config.HEADER_CHARS) -> str:
    return (text or "")[:size]


def _find_heading(text: str, name: str) -> Optional[re.Match]:
    patterns = HEADING_RES[name]
    # a real heading line beats a keyword buried in prose
    for line_re, _ in patterns:
        m = line_re.search(text)
        if m:
            return m
    for _, word_re in patterns:
        m = word_re.search(text)
        if m:
            return m
    return None


def section_body(text: str, name: str, limit: int = config.SECTION_CHARS) -> Optional[str]:
    """Text following the *name* heading, or None when the resume has no such heading.

    The body stops at the next line that opens another known section and is
    capped at *limit* characters.
    """
    text = text or ""
    m = _find_heading(text, name)
    if not m:
        return None
    rest = text[m.end():]
    stop = STOP_RES[name].search(rest)
    if stop:
        rest = rest[:stop.start()]
    return rest[:limit].strip()


def split_sections(text: str, limit: int = config.SECTION_CHARS) -> Dict[str, str]:
    sections = {}
    for name in SECTION_HEADINGS:
        body = section_body(text, name, limit)
        if body is not None:
            sections[name] = body
    return sections
