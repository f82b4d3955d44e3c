"""
Conflict Scanner
Generators Module
PDF Report Exports
"""

from .report import build_report_pdf, report_filename

__all__ = [
    'build_report_pdf',
    'report_filename',
]
