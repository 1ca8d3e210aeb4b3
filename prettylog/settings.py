"""
Settings module - Pydantic env configuration
"""
from pydantic_settings import BaseSettings

from prettylog.formatters import LogStyle


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # App
    app_name: str = "prettylog demo"
    debug: bool = False
    environment: str = "development"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Access log
    log_style: LogStyle = LogStyle.PRETTY
    log_level: str = "INFO"
    log_format: str = "%(message)s"

    # Metrics
    metrics_enabled: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }


settings = Settings()
