from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # File system
    root_path: str = Field(default=".", validation_alias="TYPED_FS_ROOT")
    hash_chunk_size: int = Field(
        default=64 * 1024, gt=0, validation_alias="HASH_CHUNK_SIZE"
    )
    max_tree_depth: int = Field(default=2, ge=0, validation_alias="MAX_TREE_DEPTH")
    ignored_directories: list[str] = Field(
        default_factory=lambda: ["bin", "obj", "node_modules", ".git", ".vs", ".idea"],
        validation_alias="IGNORED_DIRECTORIES",
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
