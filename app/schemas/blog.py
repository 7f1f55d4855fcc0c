import math
import re
from typing import Generic, List, Optional, TypeVar

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    field_validator,
)

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_url_adapter = TypeAdapter(AnyUrl)


class PostFrontmatter(BaseModel):
    """Validated metadata block of a post document."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)
    publishedAt: StrictStr
    updatedAt: Optional[StrictStr] = None
    tags: List[StrictStr] = Field(default_factory=list)
    category: Optional[StrictStr] = None
    draft: StrictBool = False
    externalUrl: Optional[StrictStr] = None

    @field_validator("publishedAt", "updatedAt")
    @classmethod
    def _check_date(cls, value):
        if value is not None and not ISO_DATE_RE.fullmatch(value):
            raise ValueError("must be in YYYY-MM-DD format")
        return value

    @field_validator("externalUrl")
    @classmethod
    def _check_url(cls, value):
        if value is None:
            return value
        try:
            _url_adapter.validate_python(value)
        except ValueError:
            raise ValueError("must be an absolute URL") from None
        return value


class PostSummary(BaseModel):
    """A post without its rendered body, used for listings."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    description: str
    publishedAt: str
    updatedAt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    draft: bool = False
    externalUrl: Optional[str] = None
    readingTimeMinutes: int = Field(ge=1)

    @property
    def is_external(self) -> bool:
        return self.externalUrl is not None

    @property
    def is_updated(self) -> bool:
        return self.updatedAt is not None and self.updatedAt != self.publishedAt


class Post(PostSummary):
    content: str

    def to_summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"content"}))


class PaginationParams(BaseModel):
    page: int = Field(default=1, ge=1)
    perPage: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.perPage


T = TypeVar("T")


class PaginatedResult(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    perPage: int
    totalPages: int

    @classmethod
    def paginate(cls, items: List[T], params: PaginationParams) -> "PaginatedResult[T]":
        total = len(items)
        return cls(
            items=items[params.offset : params.offset + params.perPage],
            total=total,
            page=params.page,
            perPage=params.perPage,
            totalPages=max(1, math.ceil(total / params.perPage)),
        )
