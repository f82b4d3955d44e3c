"""
Conflict Scanner
API Routers Module
"""
from conflict_scanner.api import news, analysis, documents, exports, ui

__all__ = [
    "news",
    "analysis",
    "documents",
    "exports",
    "ui",
]
