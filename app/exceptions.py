from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class ContentError(Exception):
    """Base class for failures tied to a single source document."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class MissingFrontmatterError(ContentError):
    def __init__(self, source: Optional[str] = None):
        super().__init__(
            f"Missing or malformed frontmatter block in {source or '<document>'}",
            source,
        )


class FrontmatterParseError(ContentError):
    def __init__(self, detail: str, source: Optional[str] = None):
        super().__init__(f"Failed to parse frontmatter: {detail}", source)
        self.detail = detail


class FrontmatterError(ContentError):
    """
    Schema validation failure. Carries every offending field, not just the
    first one, so a single run reports everything that needs fixing.
    """

    def __init__(self, errors: List[FieldError], source: Optional[str] = None):
        self.errors = list(errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(
            f"Invalid frontmatter in {source or '<document>'}: {details}", source
        )

    @property
    def field(self) -> Optional[str]:
        return self.errors[0].field if self.errors else None

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]


class RenderError(ContentError):
    def __init__(self, detail: str, source: Optional[str] = None):
        super().__init__(f"Failed to render markdown: {detail}", source)
