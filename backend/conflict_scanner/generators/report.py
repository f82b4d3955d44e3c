"""
Conflict Scanner
Report Generator - multi-page PDF of a conflict scan
"""
import io
from datetime import datetime
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    KeepTogether,
    ListFlowable,
    ListItem,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from conflict_scanner.schemas import AnalysisResult, Article, Conflict

REPORT_TITLE = "Conflict Scan Report"

RISK_HEX = {
    "LOW": "#047857",
    "MEDIUM": "#b45309",
    "HIGH": "#c2410c",
    "CRITICAL": "#b91c1c",
}
DEFAULT_RISK_HEX = "#374151"


def risk_hex(level: Optional[str]) -> str:
    return RISK_HEX.get((level or "").upper(), DEFAULT_RISK_HEX)


def risk_color(level: Optional[str]):
    return colors.HexColor(risk_hex(level))


def _text(value: Optional[str]) -> str:
    """Escape user and model text for reportlab's mini-markup."""
    return escape(value or "").replace("\n", "<br/>")


def _link(url: Optional[str]) -> str:
    if not url:
        return ""
    safe = escape(url, {'"': "&quot;"})
    if not url.lower().startswith(("http://", "https://")):
        return safe
    return f'<link href="{safe}" color="blue">{safe}</link>'


def _styles():
    base = getSampleStyleSheet()
    return {
        "title": base["Title"],
        "h2": base["Heading2"],
        "h3": ParagraphStyle("ConflictTitle", parent=base["Heading4"], spaceAfter=2),
        "body": base["BodyText"],
        "meta": ParagraphStyle("Meta", parent=base["BodyText"], fontSize=8, textColor=colors.grey),
        "badge": ParagraphStyle("Badge", parent=base["BodyText"], fontSize=12, textColor=colors.white),
    }


def _risk_badge(level: str, styles) -> Table:
    badge = Table(
        [[Paragraph(f"<b>RISK LEVEL: {escape(level)}</b>", styles["badge"])]],
        colWidths=[2.6 * inch],
    )
    badge.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), risk_color(level)),
        ("LEFTPADDING", (0, 0), (-1, -1), 8),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ]))
    badge.hAlign = "LEFT"
    return badge


def _conflict_block(index: int, conflict: Conflict, styles) -> KeepTogether:
    severity = conflict.severity or "LOW"
    parts = [
        Paragraph(
            f'{index}. {_text(conflict.title)} '
            f'<font color="{risk_hex(severity)}">[{escape(severity)}]</font>',
            styles["h3"],
        ),
        Paragraph(_text(conflict.description), styles["body"]),
        Paragraph(f"Source: {_text(conflict.source)}", styles["meta"]),
    ]
    if conflict.url:
        parts.append(Paragraph(_link(conflict.url), styles["meta"]))
    parts.append(Spacer(1, 8))
    return KeepTogether(parts)


def _article_block(index: int, article: Article, styles) -> KeepTogether:
    meta = article.source_name
    if article.published_at:
        meta += f" | {article.published_at[:10]}"
    parts = [
        Paragraph(f"{index}. <b>{_text(article.title)}</b>", styles["body"]),
        Paragraph(_text(meta), styles["meta"]),
    ]
    if article.description:
        parts.append(Paragraph(_text(article.description), styles["body"]))
    if article.url:
        parts.append(Paragraph(_link(article.url), styles["meta"]))
    parts.append(Spacer(1, 6))
    return KeepTogether(parts)


def _page_footer(canvas, doc):
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.grey)
    canvas.drawString(doc.leftMargin, 0.5 * inch, REPORT_TITLE)
    canvas.drawRightString(LETTER[0] - doc.rightMargin, 0.5 * inch, f"Page {doc.page}")
    canvas.restoreState()


def build_report_pdf(
    search_terms: str,
    analysis: AnalysisResult,
    articles: Sequence[Article] = (),
    generated_at: Optional[datetime] = None,
) -> bytes:
    """
    Lay out the scan results as a PDF.

    Sections: header, risk badge, summary, conflicts (most severe first),
    recommendations and news sources. Long sections flow across pages.
    """
    generated_at = generated_at or datetime.now()
    styles = _styles()
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=LETTER,
        leftMargin=0.8 * inch,
        rightMargin=0.8 * inch,
        topMargin=0.8 * inch,
        bottomMargin=0.8 * inch,
        title=REPORT_TITLE,
    )

    story: List = [
        Paragraph(REPORT_TITLE, styles["title"]),
        Paragraph(f"<b>Search terms:</b> {_text(search_terms) or 'N/A'}", styles["body"]),
        Paragraph(f"<b>Generated:</b> {generated_at.strftime('%Y-%m-%d %H:%M')}", styles["body"]),
        Spacer(1, 12),
        _risk_badge(analysis.risk_level.value, styles),
        Spacer(1, 12),
        Paragraph("Summary", styles["h2"]),
        Paragraph(_text(analysis.summary), styles["body"]),
    ]

    conflicts = analysis.sorted_conflicts()
    if conflicts:
        story.append(Paragraph("Identified Conflicts", styles["h2"]))
        story.extend(_conflict_block(i, c, styles) for i, c in enumerate(conflicts, 1))

    if analysis.recommendations:
        story.append(Paragraph("Recommendations", styles["h2"]))
        story.append(ListFlowable(
            [ListItem(Paragraph(_text(r), styles["body"])) for r in analysis.recommendations],
            bulletType="bullet",
        ))

    if articles:
        story.append(Paragraph(f"News Sources ({len(articles)})", styles["h2"]))
        story.extend(_article_block(i, a, styles) for i, a in enumerate(articles, 1))

    doc.build(story, onFirstPage=_page_footer, onLaterPages=_page_footer)
    return buffer.getvalue()


def report_filename(generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now()
    return f"conflict-report-{generated_at.strftime('%Y%m%d-%H%M%S')}.pdf"
