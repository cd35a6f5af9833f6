"""
Run the extraction engine over many resume files.

One bad file never stops a batch: decoder errors become a failed
ParseResult carrying an empty record and the error message.
"""
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from parsing import config
from parsing.cv_parser import parse_resume
from parsing.models import ParsedResume

from .documents import DocumentError, extract_text, is_supported

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    file_name: str
    resume: ParsedResume = field(default_factory=ParsedResume)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_document(name: str, data: bytes) -> ParseResult:
    try:
        text = extract_text(name, data)
    except DocumentError as e:
        logger.warning("skipping %s: %s", name, e)
        return ParseResult(file_name=name, error=str(e))
    return ParseResult(file_name=name, resume=parse_resume(text))


def parse_path(path: str) -> ParseResult:
    name = os.path.basename(path)
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        logger.warning("cannot open %s: %s", path, e)
        return ParseResult(file_name=name, error=str(e))
    return parse_document(name, data)


def parse_documents(docs: Iterable[Tuple[str, bytes]], max_workers: Optional[int] = None) -> List[ParseResult]:
    """Parse (file name, bytes) pairs concurrently; results keep input order."""
    docs = list(docs)
    if not docs:
        return []
    workers = max(1, min(max_workers or config.BATCH_WORKERS, len(docs)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda d: parse_document(*d), docs))
    failed = sum(1 for r in results if not r.ok)
    logger.info("parsed %d resumes (%d failed)", len(results), failed)
    return results


def scan_folder(folder: str, max_workers: Optional[int] = None) -> List[ParseResult]:
    if not os.path.isdir(folder):
        raise FileNotFoundError(f"folder not found: {folder}")
    names = sorted(n for n in os.listdir(folder) if is_supported(n) and os.path.isfile(os.path.join(folder, n)))
    paths = [os.path.join(folder, n) for n in names]
    if not paths:
        return []
    workers = max(1, min(max_workers or config.BATCH_WORKERS, len(paths)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(parse_path, paths))
    logger.info("scanned %s: %d resumes (%d failed)", folder, len(results), sum(1 for r in results if not r.ok))
    return results
