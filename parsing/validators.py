"""
Shared predicates and matching helpers used by every extractor.
"""
import re
from typing import Callable, Iterable, List, Optional, Sequence, Set, TypeVar

from . import config
from .normalizers import MONTHS
from .vocab import NOISE_TERMS, ROLE_BLACKLIST

T = TypeVar("T")

WORD_RE = re.compile(r"[A-Za-z]+")
NAME_TOKEN_RE = re.compile(r"^(?:[A-Z]\.)+$|^[A-Z][A-Za-z'\-]*\.?$")
NAME_BAD_CHARS_RE = re.compile(r"[\d@#$%&*/\\|_=+<>{}\[\]();:!?,\"]")
# everything from the first separator or icon onwards: "Jane Doe | Engineer", "Jane Doe, MBA"
NAME_SUFFIX_RE = re.compile(r"\s*(?:[|,:;(\[/]|\s-\s|[^\w\s.'\-]).*$")
DATE_TAIL_RE = re.compile(
    rf"\s*(?:\(|\b(?:since|from)\b|\b(?:{MONTHS})\b\.?,?\s*(?:19|20)\d{{2}}|\b(?:19|20)\d{{2}}\b).*$",
    re.IGNORECASE,
)


def first_valid(strategies: Sequence[Callable[[], Optional[T]]]) -> Optional[T]:
    """Run strategies in priority order; the first truthy result wins."""
    for strategy in strategies:
        value = strategy()
        if value:
            return value
    return None


def word_pattern(term: str) -> str:
    # whole-word match that also keeps "Java" out of "JavaScript" and "C" out of "C++"
    body = r"\s+".join(re.escape(part) for part in term.split())
    return r"(?<!\w)" + body + r"(?![\w+#])"


def contains_term(text: str, term: str) -> bool:
    return re.search(word_pattern(term), text or "", re.IGNORECASE) is not None


def scan_vocabulary(text: str, vocabulary: Iterable[str], seen: Set[str]) -> List[str]:
    """Dictionary terms present in *text*, in dictionary order and canonical casing.

    *seen* holds lower-cased terms already claimed by an earlier pass; new
    hits are added to it so later passes skip them.
    """
    found = []
    for term in vocabulary:
        key = term.lower()
        if key in seen:
            continue
        if contains_term(text, term):
            found.append(term)
            seen.add(key)
    return found


def has_blacklisted_word(text: str) -> bool:
    return any(w.lower() in ROLE_BLACKLIST or w.lower() in NOISE_TERMS for w in WORD_RE.findall(text or ""))


def strip_name_suffix(line: str) -> str:
    return NAME_SUFFIX_RE.sub("", line or "").strip()


def recase(candidate: str) -> str:
    if candidate.isupper() or candidate.islower():
        return candidate.title()
    return candidate


def looks_like_name(candidate: Optional[str]) -> bool:
    if not candidate:
        return False
    candidate = candidate.strip()
    if not 3 <= len(candidate) <= 100:
        return False
    if NAME_BAD_CHARS_RE.search(candidate):
        return False
    tokens = candidate.split()
    if len([t for t in tokens if WORD_RE.search(t)]) < 2:
        return False
    if not all(NAME_TOKEN_RE.match(t) for t in tokens):
        return False
    return not has_blacklisted_word(candidate)


def clean_phrase(value: Optional[str]) -> Optional[str]:
    """Trim a captured phrase: trailing dates, brackets and separator punctuation."""
    value = DATE_TAIL_RE.sub("", value or "")
    value = value.strip(" \t-|,:;.@")
    return value or None


def excerpt(text: Optional[str], limit: int = config.EXCERPT_CHARS) -> Optional[str]:
    return " ".join((text or "").split())[:limit].strip() or None


def dedupe(xs: List[str]) -> List[str]:
    seen = set()
    out = []
    for x in xs:
        xl = x.lower()
        if xl not in seen:
            out.append(x)
            seen.add(xl)
    return out
