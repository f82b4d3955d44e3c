"""
Conflict Scanner
News API Router - entity news search
"""
from fastapi import APIRouter, Depends

from conflict_scanner.schemas import NewsSearchRequest, NewsSearchResponse
from conflict_scanner.services.news_service import NewsService, news_service

router = APIRouter()


def get_news_service() -> NewsService:
    return news_service


@router.post("/search-news", response_model=NewsSearchResponse)
async def search_news(
    request: NewsSearchRequest,
    service: NewsService = Depends(get_news_service),
):
    """
    Search recent news for the entered names and variants.

    Terms are combined with OR. `pageSize` caps the article count and
    `timeRange` limits results to the last N months.
    """
    return await service.search(
        names=request.names,
        variants=request.variants,
        page_size=request.page_size,
        time_range_months=request.time_range,
    )
