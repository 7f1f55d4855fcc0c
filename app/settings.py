from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/posts"

    # Pagination
    DEFAULT_PER_PAGE: int = 10
    MAX_PER_PAGE: int = 100

    # Rendering
    HIGHLIGHT_STYLE: str = "github-dark"
    HEADING_ANCHOR_MAX_LEVEL: int = 6

    # Logging
    LOG_LEVEL: str = "INFO"

    # Guards the draft-inclusive listing
    API_KEY: str = ""

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance, only read at the process boundary
settings = Settings()
