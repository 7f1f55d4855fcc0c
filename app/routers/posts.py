import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.repos.posts_repo import MarkdownPostsRepo
from app.schemas.blog import PaginatedResult, PaginationParams, Post, PostSummary
from app.security import get_api_key

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PaginatedResult[PostSummary])
async def list_posts(
    pagination: PaginationParams = Depends(deps.get_pagination),
    repo: MarkdownPostsRepo = Depends(deps.get_posts_repo),
):
    """Get a page of published posts."""
    try:
        return await repo.find_published(pagination)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=Post)
async def get_post(
    slug: str,
    repo: MarkdownPostsRepo = Depends(deps.get_posts_repo),
):
    """Get a single post by slug, drafts included."""
    try:
        post = await repo.find_by_slug(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/categories/{category}/posts", response_model=PaginatedResult[PostSummary])
async def list_category_posts(
    category: str,
    pagination: PaginationParams = Depends(deps.get_pagination),
    repo: MarkdownPostsRepo = Depends(deps.get_posts_repo),
):
    try:
        return await repo.find_by_category(category, pagination)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts in category {category}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get(
    "/admin/posts",
    response_model=List[Post],
    dependencies=[Depends(get_api_key)],
)
async def list_all_posts(repo: MarkdownPostsRepo = Depends(deps.get_posts_repo)):
    """Every post including drafts, for previews and tooling."""
    try:
        return await repo.find_all()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing all posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
