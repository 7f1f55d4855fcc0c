import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app.exceptions import ContentError, FrontmatterError
from app.repos.posts_repo import MarkdownPostsRepo
from app.settings import settings

logger = logging.getLogger(__name__)


def check_content(posts_dir: Path) -> List[ContentError]:
    """Validate every post document and return the problems found."""
    repo = MarkdownPostsRepo(posts_dir)
    return asyncio.run(repo.find_invalid())


def format_error(error: ContentError) -> str:
    if isinstance(error, FrontmatterError):
        lines = [f"{error.source}: invalid frontmatter"]
        lines.extend(f"  - {field_error}" for field_error in error.errors)
        return "\n".join(lines)
    return f"{error.source}: {error}"


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    posts_dir = Path(args[0]) if args else settings.content_path

    errors = check_content(posts_dir)
    for error in errors:
        print(format_error(error))

    if errors:
        logger.error(f"{len(errors)} invalid post(s) in {posts_dir}")
        return 1
    logger.info(f"All posts in {posts_dir} are valid.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())
