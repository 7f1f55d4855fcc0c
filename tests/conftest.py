import textwrap
from pathlib import Path

import pytest

from app.schemas.blog import PaginatedResult, PaginationParams, Post, PostSummary


def make_document(body: str = "Body text.", **fields) -> str:
    """
    Build a post document with a frontmatter block.
    Lists become YAML block sequences, None values are left out.
    """
    lines = ["---"]
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            lines.append(f"{key}: {'true' if value else 'false'}")
        elif isinstance(value, list):
            lines.append(f"{key}:")
            lines.extend(f"  - {item}" for item in value)
        else:
            lines.append(f"{key}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n" + textwrap.dedent(body).lstrip()


def write_post(posts_dir: Path, name: str, body: str = "Body text.", **fields) -> Path:
    fields.setdefault("title", name.replace("-", " ").title())
    fields.setdefault("description", f"About {name}")
    fields.setdefault("publishedAt", "2024-01-15")
    path = posts_dir / f"{name}.md"
    path.write_text(make_document(body, **fields), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path) -> Path:
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


def make_post(slug: str = "hello", **overrides) -> Post:
    data = {
        "slug": slug,
        "title": "Hello",
        "description": "A post",
        "publishedAt": "2024-01-15",
        "readingTimeMinutes": 1,
        "content": "<p>hi</p>",
    }
    data.update(overrides)
    return Post(**data)


class FakePostsRepo:
    """
    Minimal repository stand-in for router tests.
    Records the arguments of every call.
    """

    def __init__(self, posts=None):
        self.posts = list(posts or [])
        self.calls = []

    async def find_all(self):
        self.calls.append(("find_all",))
        return self.posts

    async def find_by_slug(self, slug):
        self.calls.append(("find_by_slug", slug))
        return next((p for p in self.posts if p.slug == slug), None)

    async def find_published(self, pagination=None):
        self.calls.append(("find_published", pagination))
        return self._page([p for p in self.posts if not p.draft], pagination)

    async def find_by_category(self, category, pagination=None):
        self.calls.append(("find_by_category", category, pagination))
        return self._page(
            [p for p in self.posts if not p.draft and p.category == category],
            pagination,
        )

    @staticmethod
    def _page(posts, pagination):
        return PaginatedResult[PostSummary].paginate(
            [p.to_summary() for p in posts], pagination or PaginationParams()
        )
