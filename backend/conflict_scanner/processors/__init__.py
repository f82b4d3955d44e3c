"""
Conflict Scanner
Processors Package
"""
from .document_processor import extract_text, docx_to_text, pdf_to_text, clean_text

__all__ = [
    'extract_text',
    'docx_to_text',
    'pdf_to_text',
    'clean_text',
]
