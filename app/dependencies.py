from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Query

from app.repos.posts_repo import MarkdownPostsRepo
from app.schemas.blog import PaginationParams
from app.security import get_settings
from app.services.markdown_renderer import MarkdownRenderer
from app.settings import Settings


@lru_cache(maxsize=8)
def _renderer(highlight_style: str, anchor_max_level: int) -> MarkdownRenderer:
    return MarkdownRenderer(highlight_style=highlight_style, anchor_max_level=anchor_max_level)


def get_markdown_renderer(
    current_settings: Settings = Depends(get_settings),
) -> MarkdownRenderer:
    return _renderer(
        current_settings.HIGHLIGHT_STYLE, current_settings.HEADING_ANCHOR_MAX_LEVEL
    )


def get_posts_repo(
    current_settings: Settings = Depends(get_settings),
    renderer: MarkdownRenderer = Depends(get_markdown_renderer),
) -> MarkdownPostsRepo:
    return MarkdownPostsRepo(current_settings.content_path, renderer=renderer)


def get_pagination(
    page: int = Query(1, ge=1),
    perPage: Optional[int] = Query(None, ge=1),
    current_settings: Settings = Depends(get_settings),
) -> PaginationParams:
    per_page = perPage or current_settings.DEFAULT_PER_PAGE
    if per_page > current_settings.MAX_PER_PAGE:
        raise HTTPException(
            status_code=422,
            detail=f"perPage must be at most {current_settings.MAX_PER_PAGE}",
        )
    return PaginationParams(page=page, perPage=per_page)
