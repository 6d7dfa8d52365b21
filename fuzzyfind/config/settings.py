"""Library settings and default option values."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Default search options with environment variable support.

    Every field can be set through a ``FUZZYFIND_``-prefixed environment
    variable (``FUZZYFIND_THRESHOLD=0.5``) or a ``.env`` file. Values passed
    explicitly to ``fuzzy``, ``search`` or ``Searcher`` always win.
    """
    
    # Normalization
    ignore_case: bool = Field(default=True)
    ignore_symbols: bool = Field(default=True)
    normalize_whitespace: bool = Field(default=True)
    use_separated_unicode: bool = Field(default=False)
    
    # Matching
    use_damerau: bool = Field(default=True)
    use_sellers: bool = Field(default=True)
    
    # Ranking
    threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    sort_by: str = Field(default="bestMatch")
    return_match_data: bool = Field(default=False)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    model_config = SettingsConfigDict(
        env_prefix="FUZZYFIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore unrelated variables in a shared .env
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()
