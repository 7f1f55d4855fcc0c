import logging
import os

from app.exceptions import ContentError, RenderError
from app.schemas.blog import Post
from app.services.frontmatter import read_document
from app.services.markdown_renderer import MarkdownRenderer
from app.services.slugs import normalize_slug
from app.utils import calculate_reading_time

logger = logging.getLogger(__name__)


def slug_from_filename(filename: str) -> str:
    """Derive the post slug from a document's file name."""
    base, _ = os.path.splitext(os.path.basename(filename))
    slug = normalize_slug(base)
    if slug is None:
        raise ContentError(f"Cannot derive a slug from '{filename}'", filename)
    return slug


def build_post(document: str, source: str, renderer: MarkdownRenderer) -> Post:
    """
    Turn one source document into a Post.

    Raises a ContentError subclass naming ``source`` when the document cannot
    be used; callers decide whether that is fatal.
    """
    slug = slug_from_filename(source)
    metadata, body = read_document(document, source)

    if metadata.externalUrl:
        logger.debug(f"Not rendering external post {slug} ({metadata.externalUrl})")
        content = ""
        reading_time = calculate_reading_time("")
    else:
        try:
            content = renderer.render(body)
        except Exception as e:
            raise RenderError(str(e), source) from e
        reading_time = calculate_reading_time(body)

    return Post(
        slug=slug,
        title=metadata.title,
        description=metadata.description,
        publishedAt=metadata.publishedAt,
        updatedAt=metadata.updatedAt,
        tags=metadata.tags,
        category=metadata.category,
        draft=metadata.draft,
        externalUrl=metadata.externalUrl,
        content=content,
        readingTimeMinutes=reading_time,
    )
