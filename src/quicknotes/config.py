from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "QUICKNOTES_",
        "extra": "ignore",
    }
