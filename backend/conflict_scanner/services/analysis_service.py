"""
Conflict Scanner
Analysis Service - conflict-of-interest summary and risk level from news
"""
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import ResponseParseError
from conflict_scanner.schemas import AnalysisResult, Article, RiskLevel
from conflict_scanner.services.ai_service import AIService, ai_service, parse_json_content
from conflict_scanner.services.prompts import ANALYSIS_SYSTEM_PROMPT, build_analysis_prompt

logger = logging.getLogger(__name__)

PARSE_ERROR = "Failed to parse AI analysis response"

NO_ARTICLES_RECOMMENDATIONS = [
    "Consider expanding search terms to include more variations",
    "Check for potential misspellings in the entity names",
    "Monitor for future news developments",
]


def no_articles_result() -> AnalysisResult:
    return AnalysisResult(
        summary="No news articles found for the provided search terms.",
        risk_level=RiskLevel.LOW,
        conflicts=[],
        recommendations=list(NO_ARTICLES_RECOMMENDATIONS),
    )


def parse_analysis(content: str, max_conflicts: Optional[int] = None) -> AnalysisResult:
    """Turn raw model output into an AnalysisResult with ordered, capped conflicts."""
    data = parse_json_content(content, PARSE_ERROR)
    if not isinstance(data, dict):
        raise ResponseParseError(PARSE_ERROR, details="Expected a JSON object")
    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise ResponseParseError(PARSE_ERROR, details=str(e)) from e

    limit = settings.MAX_CONFLICTS if max_conflicts is None else max_conflicts
    result.conflicts = result.sorted_conflicts()[:limit]
    result.recommendations = [r for r in result.recommendations if r and r.strip()]
    return result


class AnalysisService:
    """Ask the LLM to review articles for conflict-of-interest signals."""

    def __init__(self, ai: Optional[AIService] = None):
        self.ai = ai or ai_service

    async def analyze(self, search_terms: str, articles: Optional[Sequence[Article]]) -> AnalysisResult:
        articles = list(articles or [])
        if not articles:
            logger.info("No articles for %r; returning default LOW assessment", search_terms)
            return no_articles_result()

        prompt = build_analysis_prompt(search_terms, articles, settings.MAX_CONFLICTS)
        content = await self.ai.complete(
            ANALYSIS_SYSTEM_PROMPT,
            prompt,
            temperature=settings.ANALYSIS_TEMPERATURE,
            max_tokens=settings.ANALYSIS_MAX_TOKENS,
            failure_message="Failed to analyze results",
            empty_message="No analysis content returned from AI",
        )
        result = parse_analysis(content)
        logger.info(
            "Analysis for %r: risk=%s conflicts=%d",
            search_terms,
            result.risk_level.value,
            len(result.conflicts),
        )
        return result


analysis_service = AnalysisService()
