from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_csv(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ARCHIVE_ENGINE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "archive-intelligence"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Archive search
    ARCHIVE_SEARCH_MAX_RESULTS: int = 20
    KEYWORD_SEARCH_MAX_RESULTS: int = 10
    SIMILAR_ARCHIVES_LIMIT: int = 10
    SUGGESTION_ARCHIVES_PER_ITEM: int = 5
    MAX_SUGGESTIONS: int = 10
    MIN_SIMILARITY_SCORE: float = 30.0
    SEARCH_TIMEOUT_SECONDS: float = 30.0

    # Adapter retry policy
    SEARCH_RETRY_ATTEMPTS: int = 3
    SEARCH_RETRY_MIN_WAIT: float = 0.5
    SEARCH_RETRY_MAX_WAIT: float = 5.0
    SEARCH_ATTEMPT_TIMEOUT_SECONDS: float = 10.0

    # Performance prediction
    PREDICTION_MAX_ARCHIVES: int = 20

    KNOWN_PROCESSES: Annotated[list[str] | str, BeforeValidator(parse_csv)] = [
        "Turning",
        "3-Axis Milling",
        "4-Axis Milling",
        "5-Axis Milling",
        "Grinding",
        "Heat Treatment",
        "Anodizing",
    ]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_local(self) -> bool:
        return self.ENVIRONMENT == "local"


settings = Settings()
