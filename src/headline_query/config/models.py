"""Pydantic configuration models for headline query components."""

from pydantic import BaseModel, Field

from headline_query.query import DEFAULT_PAGE_SIZE, DEFAULT_QUERY, MAX_PAGE_SIZE
from headline_query.search.newsapi import NEWSAPI_BASE_URL

# ============================================================
# Client Config
# ============================================================


class ClientConfig(BaseModel):
    """Configuration for HeadlineQueryClient.

    The API key is never read from config files; it comes from the
    NEWS_API_KEY environment variable or an explicit override.
    """

    base_url: str = NEWSAPI_BASE_URL
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    default_query: str = Field(DEFAULT_QUERY, min_length=1)
    timeout: float = Field(30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Session Config
# ============================================================


class SessionConfig(BaseModel):
    """Configuration for HeadlineSession."""

    debounce_seconds: float = Field(0.5, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class HeadlineConfig(BaseModel):
    """Root configuration for headline queries."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)

    model_config = {"frozen": True}
