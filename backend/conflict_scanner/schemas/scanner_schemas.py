"""
Conflict Scanner
Pydantic Schemas for API Request/Response Validation
"""
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================
# ENUMS
# ============================================================

class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


RISK_PRIORITY = {
    RiskLevel.CRITICAL.value: 0,
    RiskLevel.HIGH.value: 1,
    RiskLevel.MEDIUM.value: 2,
    RiskLevel.LOW.value: 3,
}


def risk_priority(level: Optional[str]) -> int:
    """Sort key for severities; unknown values go last."""
    if level is None:
        return len(RISK_PRIORITY)
    return RISK_PRIORITY.get(str(level).strip().upper(), len(RISK_PRIORITY))


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ============================================================
# NEWS
# ============================================================

class ArticleSource(_WireModel):
    id: Optional[str] = None
    name: Optional[str] = None


class Article(_WireModel):
    """A news article in the provider's wire shape"""
    title: Optional[str] = ""
    description: Optional[str] = None
    source: Optional[ArticleSource] = None
    url: Optional[str] = None
    published_at: Optional[str] = Field(None, alias="publishedAt")
    author: Optional[str] = None
    url_to_image: Optional[str] = Field(None, alias="urlToImage")
    content: Optional[str] = None

    @property
    def source_name(self) -> str:
        if self.source and self.source.name:
            return self.source.name
        return "Unknown"


class NewsSearchRequest(_WireModel):
    names: Optional[str] = ""
    variants: Optional[str] = ""
    page_size: Optional[int] = Field(None, alias="pageSize")
    time_range: Optional[int] = Field(None, alias="timeRange", description="Months to look back")


class NewsSearchResponse(_WireModel):
    articles: List[Article] = Field(default_factory=list)
    total_results: int = Field(0, alias="totalResults")


# ============================================================
# ANALYSIS
# ============================================================

class AnalyzeRequest(_WireModel):
    search_terms: str = Field("", alias="searchTerms")
    articles: Optional[List[Article]] = None


class Conflict(_WireModel):
    title: str = ""
    source: str = ""
    description: str = ""
    severity: str = RiskLevel.LOW.value
    url: Optional[str] = None

    @field_validator("title", "source", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("severity", mode="before")
    @classmethod
    def _upper_severity(cls, v):
        if v is None:
            return RiskLevel.LOW.value
        return str(v).strip().upper()


class AnalysisResult(_WireModel):
    summary: str = ""
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    conflicts: List[Conflict] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @field_validator("summary", mode="before")
    @classmethod
    def _none_summary(cls, v):
        return "" if v is None else v

    @field_validator("conflicts", "recommendations", mode="before")
    @classmethod
    def _none_to_list(cls, v):
        return [] if v is None else v

    @field_validator("risk_level", mode="before")
    @classmethod
    def _upper_risk(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def sorted_conflicts(self) -> List[Conflict]:
        return sorted(self.conflicts, key=lambda c: risk_priority(c.severity))


# ============================================================
# DOCUMENTS
# ============================================================

class KeywordExtractionResponse(_WireModel):
    keywords: List[str]
    file_name: str = Field(..., alias="fileName")


class PartyExtractionResponse(_WireModel):
    success: bool = True
    count: int = 0
    terms: List[Any] = Field(default_factory=list)


# ============================================================
# EXPORTS
# ============================================================

class ReportRequest(_WireModel):
    search_terms: str = Field("", alias="searchTerms")
    analysis: AnalysisResult
    articles: List[Article] = Field(default_factory=list)


# ============================================================
# STATUS
# ============================================================

class StatusResponse(BaseModel):
    news_api_configured: bool
    openai_configured: bool
    party_webhook_configured: bool
    model: str
