"""
Conflict Scanner
News Service - NewsAPI "everything" search
"""
import logging
from datetime import date, timedelta
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import (
    InvalidRequestError,
    UpstreamServiceError,
    missing_setting,
)
from conflict_scanner.schemas import NewsSearchResponse

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30


def build_query(names: Optional[str], variants: Optional[str]) -> str:
    """Join the non-empty search fields with OR."""
    parts = [p.strip() for p in (names, variants) if p and p.strip()]
    return " OR ".join(parts)


def clamp_page_size(page_size: Optional[int]) -> int:
    if page_size is None:
        return settings.NEWS_DEFAULT_PAGE_SIZE
    return max(1, min(int(page_size), settings.NEWS_MAX_PAGE_SIZE))


def from_date(months: Optional[int], today: Optional[date] = None) -> Optional[str]:
    """Earliest publish date for a look-back of `months` months."""
    if not months or months <= 0:
        return None
    today = today or date.today()
    return (today - timedelta(days=DAYS_PER_MONTH * months)).isoformat()


class NewsService:
    """
    Searches NewsAPI for articles about the entities under review.

    `transport` lets tests substitute an httpx.MockTransport.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._transport = transport

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key or settings.NEWS_API_KEY

    @property
    def base_url(self) -> str:
        return self._base_url or settings.NEWS_API_URL

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    def build_params(
        self,
        query: str,
        page_size: Optional[int] = None,
        time_range_months: Optional[int] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "q": query,
            "sortBy": settings.NEWS_SORT_BY,
            "pageSize": clamp_page_size(page_size),
            "language": settings.NEWS_LANGUAGE,
        }
        start = from_date(time_range_months)
        if start:
            params["from"] = start
        return params

    async def search(
        self,
        names: Optional[str],
        variants: Optional[str] = None,
        page_size: Optional[int] = None,
        time_range_months: Optional[int] = None,
    ) -> NewsSearchResponse:
        """
        Search news for the given names and variants.

        Raises:
            InvalidRequestError: both fields empty
            ConfigurationError: NEWS_API_KEY missing
            UpstreamServiceError: provider error or unreachable
        """
        query = build_query(names, variants)
        if not query:
            raise InvalidRequestError("Please provide at least one search term")

        if not self.api_key:
            raise missing_setting("NEWS_API_KEY")

        params = self.build_params(query, page_size, time_range_months)
        logger.info("NewsAPI search: q=%r pageSize=%s from=%s", query, params["pageSize"], params.get("from"))

        try:
            async with httpx.AsyncClient(
                timeout=settings.HTTP_TIMEOUT_SECONDS, transport=self._transport
            ) as client:
                response = await client.get(
                    self.base_url, params=params, headers={"X-Api-Key": self.api_key}
                )
        except httpx.HTTPError as e:
            logger.error("NewsAPI request failed: %s", e)
            raise UpstreamServiceError("Failed to search news", details=str(e)) from e

        if response.status_code >= 400:
            message = _error_message(response, "Failed to fetch news")
            logger.error("NewsAPI error %s: %s", response.status_code, message)
            raise UpstreamServiceError("Failed to search news", details=message)

        try:
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError("Expected a JSON object from NewsAPI")
            result = NewsSearchResponse(
                articles=data.get("articles") or [],
                total_results=data.get("totalResults") or 0,
            )
        except (ValueError, ValidationError) as e:
            logger.error("Unreadable NewsAPI response: %s", e)
            raise UpstreamServiceError("Failed to search news", details=str(e)) from e
        logger.info("NewsAPI returned %d articles (total %d)", len(result.articles), result.total_results)
        return result


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or default
    if isinstance(body, dict):
        return body.get("message") or default
    return default


news_service = NewsService()
