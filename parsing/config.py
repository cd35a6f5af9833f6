"""
Tunable limits for the extraction engine.

Every value can be overridden through the environment or a local .env file.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


HEADER_CHARS = _env_int("RESUME_HEADER_CHARS", 1500)
SECTION_CHARS = _env_int("RESUME_SECTION_CHARS", 2000)

MAX_SKILLS = _env_int("RESUME_MAX_SKILLS", 20)
MAX_TOOLS = _env_int("RESUME_MAX_TOOLS", 25)
# used when the resume carries its own skills section
MAX_TOOLS_DEEP = _env_int("RESUME_MAX_TOOLS_DEEP", 40)
MAX_CERTIFICATIONS = _env_int("RESUME_MAX_CERTIFICATIONS", 10)

MAX_WORK_ENTRIES = 5
MAX_PROJECT_ENTRIES = 4
EXCERPT_CHARS = 200

BATCH_WORKERS = _env_int("RESUME_BATCH_WORKERS", 4)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
