"""
Conflict Scanner - FastAPI Backend
News-driven conflict-of-interest screening for new client intake
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from conflict_scanner.api import news, analysis, documents, exports, ui
from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import register_exception_handlers
from conflict_scanner.core.logging import RequestLoggingMiddleware, configure_logging
from conflict_scanner.schemas import StatusResponse
from conflict_scanner.services.ai_service import ai_service
from conflict_scanner.services.news_service import news_service
from conflict_scanner.services.party_service import party_service

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup"""
    configure_logging(settings.LOG_LEVEL)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="""
    News-driven conflict-of-interest screening for new client intake

    ## Features
    - 📰 News search for names and name variants
    - ⚖️ AI conflict-of-interest summary and risk level
    - 📄 Party extraction from uploaded documents
    - 🧾 PDF report export
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# API routers
app.include_router(news.router, prefix="/api", tags=["News"])
app.include_router(analysis.router, prefix="/api", tags=["Analysis"])
app.include_router(documents.router, prefix="/api", tags=["Documents"])
app.include_router(exports.router, prefix="/api/exports", tags=["Exports"])
app.include_router(ui.router, tags=["UI"])


def _component(configured: bool) -> str:
    return "configured" if configured else "not_configured"


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "components": {
            "news_api": _component(news_service.is_available),
            "openai": _component(ai_service.is_available),
            "party_webhook": _component(party_service.is_available),
        },
    }


@app.get("/api/status", response_model=StatusResponse)
async def get_status():
    """Which upstream services are configured"""
    return StatusResponse(
        news_api_configured=news_service.is_available,
        openai_configured=ai_service.is_available,
        party_webhook_configured=party_service.is_available,
        model=ai_service.model,
    )
