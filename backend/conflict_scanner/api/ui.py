"""
Conflict Scanner
UI Router - single-page intake form
"""
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from conflict_scanner.core.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()

PAGE_SIZE_LIMITS = (1, 100)
TIME_RANGE_OPTIONS = [1, 2, 3, 6, 12]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.APP_NAME,
            "default_page_size": settings.NEWS_DEFAULT_PAGE_SIZE,
            "page_size_min": PAGE_SIZE_LIMITS[0],
            "page_size_max": min(PAGE_SIZE_LIMITS[1], settings.NEWS_MAX_PAGE_SIZE),
            "time_ranges": TIME_RANGE_OPTIONS,
        },
    )
