import re
from typing import Dict, List, Optional, Set, Tuple

from . import config
from .validators import scan_vocabulary
from .vocab import MINING_STOPWORDS, ROLE_KEYWORDS, SOFT_SKILLS, TOOLS

MINED_SECTIONS = ("skills", "experience", "projects")
TOKEN_SPLIT_RE = re.compile(r"[,;|:\n•]|\s-\s")
DIGIT_RUN_RE = re.compile(r"\d{4,}")
URL_LIKE_RE = re.compile(r"https?://|www\.|@|\.(?:com|org|net|io|in)\b", re.IGNORECASE)
ROLE_WORDS = frozenset(ROLE_KEYWORDS)


def _acceptable_token(token: str) -> bool:
    if not 2 <= len(token) <= 30:
        return False
    if not token[0].isalpha() or not token[0].isupper():
        return False
    words = token.split()
    if len(words) > 3 or token.endswith(("!", "?")):
        return False
    low = token.lower()
    if low in MINING_STOPWORDS or any(w.lower() in ROLE_WORDS for w in words):
        return False
    if DIGIT_RUN_RE.search(token) or URL_LIKE_RE.search(token):
        return False
    return bool(re.search(r"[A-Za-z]", token))


def mine_section_terms(section: Optional[str]) -> List[str]:
    """Tool-like names listed in a section: "Python, Django | Docker" -> three terms."""
    if not section:
        return []
    terms = []
    for raw in TOKEN_SPLIT_RE.split(section):
        token = raw.strip().strip("-*()[]{}.'\" \t").strip()
        if token and _acceptable_token(token):
            terms.append(token)
    return terms


def extract_skills_and_tools(text: str, sections: Dict[str, str]) -> Tuple[List[str], List[str]]:
    # one seen-set for both passes keeps skills and tools disjoint
    seen: Set[str] = set()
    skills = scan_vocabulary(text, SOFT_SKILLS, seen)
    tools = scan_vocabulary(text, TOOLS, seen)

    for name in MINED_SECTIONS:
        for term in mine_section_terms(sections.get(name)):
            if term.lower() not in seen:
                tools.append(term)
                seen.add(term.lower())

    tool_cap = config.MAX_TOOLS_DEEP if "skills" in sections else config.MAX_TOOLS
    return skills[:config.MAX_SKILLS], tools[:tool_cap]
