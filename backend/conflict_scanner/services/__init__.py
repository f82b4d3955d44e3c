"""
Conflict Scanner
Services Module
"""
from conflict_scanner.services.ai_service import ai_service, AIService, strip_code_fences, parse_json_content
from conflict_scanner.services.news_service import news_service, NewsService, build_query
from conflict_scanner.services.analysis_service import analysis_service, AnalysisService, parse_analysis
from conflict_scanner.services.keyword_service import keyword_service, KeywordService, clean_keywords
from conflict_scanner.services.party_service import party_service, PartyExtractionService

__all__ = [
    # AI
    "ai_service",
    "AIService",
    "strip_code_fences",
    "parse_json_content",

    # News
    "news_service",
    "NewsService",
    "build_query",

    # Conflict analysis
    "analysis_service",
    "AnalysisService",
    "parse_analysis",

    # Documents
    "keyword_service",
    "KeywordService",
    "clean_keywords",
    "party_service",
    "PartyExtractionService",
]
