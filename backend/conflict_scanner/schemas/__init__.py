"""
Conflict Scanner
Schemas Module
"""
from conflict_scanner.schemas.scanner_schemas import (
    RiskLevel,
    risk_priority,
    ArticleSource,
    Article,
    NewsSearchRequest,
    NewsSearchResponse,
    AnalyzeRequest,
    Conflict,
    AnalysisResult,
    KeywordExtractionResponse,
    PartyExtractionResponse,
    ReportRequest,
    StatusResponse,
)

__all__ = [
    "RiskLevel",
    "risk_priority",
    "ArticleSource",
    "Article",
    "NewsSearchRequest",
    "NewsSearchResponse",
    "AnalyzeRequest",
    "Conflict",
    "AnalysisResult",
    "KeywordExtractionResponse",
    "PartyExtractionResponse",
    "ReportRequest",
    "StatusResponse",
]
