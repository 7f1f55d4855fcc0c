import logging

from fastapi import FastAPI

from app.routers import posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Quire API", description="Markdown post store for a personal blog")

app.include_router(posts.router)

logger.info(f"Serving posts from {settings.content_path}")


@app.get("/")
async def root():
    return {"message": "Quire API is running"}
