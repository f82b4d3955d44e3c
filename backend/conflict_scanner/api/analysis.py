"""
Conflict Scanner
Analysis API Router - LLM conflict-of-interest review
"""
from fastapi import APIRouter, Depends

from conflict_scanner.schemas import AnalysisResult, AnalyzeRequest
from conflict_scanner.services.analysis_service import AnalysisService, analysis_service

router = APIRouter()


def get_analysis_service() -> AnalysisService:
    return analysis_service


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    request: AnalyzeRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Summarize potential conflicts of interest in the supplied articles.

    Returns a LOW assessment without calling the model when no articles
    are supplied.
    """
    return await service.analyze(request.search_terms, request.articles)
