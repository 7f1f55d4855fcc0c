import re
from typing import Optional

SLUG_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_INVALID_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def is_valid_slug(raw: str) -> bool:
    """Lowercase alphanumerics separated by single hyphens, no edge hyphens."""
    return bool(raw) and SLUG_RE.fullmatch(raw) is not None


def normalize_slug(raw: str) -> Optional[str]:
    """Turn an arbitrary identifier into a slug, or None if nothing is left."""
    slug = _INVALID_CHARS.sub("-", raw.lower())
    slug = _HYPHEN_RUNS.sub("-", slug).strip("-")
    return slug or None
