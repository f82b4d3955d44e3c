"""
Conflict Scanner
Exports API Router - PDF conflict reports
"""
import logging
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import Response

from conflict_scanner.generators.report import build_report_pdf, report_filename
from conflict_scanner.schemas import ReportRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/report")
async def export_report(request: ReportRequest):
    """
    Render the current scan (analysis + news sources) as a downloadable PDF.

    Includes:
    - Risk level and summary
    - Conflicts ordered by severity
    - Recommendations
    - News source listing
    """
    generated_at = datetime.now()
    pdf = build_report_pdf(
        request.search_terms,
        request.analysis,
        request.articles,
        generated_at=generated_at,
    )
    filename = report_filename(generated_at)
    logger.info("Generated report %s (%d bytes)", filename, len(pdf))
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
