import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from app.exceptions import ContentError
from app.schemas.blog import PaginatedResult, PaginationParams, Post, PostSummary
from app.services.markdown_renderer import MarkdownRenderer
from app.services.posts_service import build_post
from app.services.slugs import is_valid_slug

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class MarkdownPostsRepo:
    """
    Read-only post store backed by a directory of markdown files.

    Nothing is cached: every query re-reads the directory, so edits show up
    on the next call and concurrent calls never share state.
    """

    def __init__(
        self, posts_dir: Union[str, Path], renderer: Optional[MarkdownRenderer] = None
    ):
        self.posts_dir = Path(posts_dir)
        self.renderer = renderer or MarkdownRenderer()

    async def find_all(self) -> List[Post]:
        """Every post, drafts included, newest first."""
        posts = await self._discover()
        return _newest_first(posts)

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Exact slug lookup over all posts, drafts included."""
        if not is_valid_slug(slug):
            return None
        posts = await self._discover()
        return next((post for post in posts if post.slug == slug), None)

    async def find_published(
        self, pagination: Optional[PaginationParams] = None
    ) -> PaginatedResult[PostSummary]:
        posts = await self._discover()
        return _paginate_summaries(
            [post for post in posts if not post.draft], pagination
        )

    async def find_by_category(
        self, category: str, pagination: Optional[PaginationParams] = None
    ) -> PaginatedResult[PostSummary]:
        posts = await self._discover()
        return _paginate_summaries(
            [post for post in posts if not post.draft and post.category == category],
            pagination,
        )

    async def find_invalid(self) -> List[ContentError]:
        """Structured errors for every document discovery would skip."""
        _, errors = await asyncio.to_thread(self._load_all)
        return errors

    def list_post_files(self) -> List[Path]:
        if not self.posts_dir.is_dir():
            logger.debug(f"Posts directory {self.posts_dir} does not exist")
            return []
        return sorted(
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and path.suffix == POST_SUFFIX
        )

    def load_post(self, path: Path) -> Post:
        """Build a single post, raising a ContentError when it is unusable."""
        try:
            document = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentError(f"Failed to read {path}: {e}", str(path)) from e
        return build_post(document, str(path), self.renderer)

    async def _discover(self) -> List[Post]:
        posts, _ = await asyncio.to_thread(self._load_all)
        return posts

    def _load_all(self) -> Tuple[List[Post], List[ContentError]]:
        posts: List[Post] = []
        errors: List[ContentError] = []
        for path in self.list_post_files():
            try:
                posts.append(self.load_post(path))
            except ContentError as e:
                logger.warning(f"Skipping post file {path.name}: {e}")
                errors.append(e)
        return posts, errors


def _newest_first(posts: List[Post]) -> List[Post]:
    # sorted() is stable with reverse=True, so ties keep file order
    return sorted(posts, key=lambda post: post.publishedAt, reverse=True)


def _paginate_summaries(
    posts: List[Post], pagination: Optional[PaginationParams]
) -> PaginatedResult[PostSummary]:
    summaries = [post.to_summary() for post in _newest_first(posts)]
    return PaginatedResult[PostSummary].paginate(
        summaries, pagination or PaginationParams()
    )
