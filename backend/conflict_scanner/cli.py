#!/usr/bin/env python3
"""
conflictscan - Terminal utility to:
  1) Search news for a prospective client and run the AI conflict review
  2) Write the results as a PDF report
  3) Extract party names from a local intake document
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import ScannerError
from conflict_scanner.core.logging import configure_logging
from conflict_scanner.generators.report import build_report_pdf
from conflict_scanner.schemas import AnalysisResult, NewsSearchResponse
from conflict_scanner.services.analysis_service import analysis_service
from conflict_scanner.services.keyword_service import keyword_service
from conflict_scanner.services.news_service import build_query, news_service

app = typer.Typer(add_completion=False, help="Conflict scanner: news search, AI conflict review, PDF reports.")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", help="Log level for service output."),
):
    configure_logging(log_level)


async def _run_scan(names, variants, page_size, months):
    news = await news_service.search(names, variants, page_size, months)
    analysis = await analysis_service.analyze(build_query(names, variants), news.articles)
    return news, analysis


def _echo_analysis(analysis: AnalysisResult, news: NewsSearchResponse) -> None:
    typer.echo(f"Risk level: {analysis.risk_level.value}")
    typer.echo(f"Articles reviewed: {len(news.articles)} (of {news.total_results})")
    typer.echo("")
    typer.echo(analysis.summary)
    if analysis.conflicts:
        typer.echo("\nIdentified conflicts:")
        for i, c in enumerate(analysis.sorted_conflicts(), 1):
            typer.echo(f"  {i}. [{c.severity}] {c.title}")
            if c.description:
                typer.echo(f"     {c.description}")
            if c.source:
                typer.echo(f"     Source: {c.source}")
    if analysis.recommendations:
        typer.echo("\nRecommendations:")
        for r in analysis.recommendations:
            typer.echo(f"  - {r}")


@app.command()
def scan(
    names: str = typer.Argument(..., help="Names or entities, e.g. \"Acme Corp, Jane Doe\"."),
    variants: str = typer.Option("", help="Alternative names or affiliates."),
    page_size: int = typer.Option(settings.NEWS_DEFAULT_PAGE_SIZE, help="Articles to fetch (1-100)."),
    months: int = typer.Option(1, help="Look-back window in months."),
    pdf: Optional[Path] = typer.Option(None, help="Write a PDF report to this path."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of text."),
):
    """
    Search news and print the AI conflict-of-interest assessment.
    """
    try:
        news, analysis = asyncio.run(_run_scan(names, variants, page_size, months))
    except ScannerError as e:
        typer.echo(f"ERROR: {e.message}" + (f" ({e.details})" if e.details else ""), err=True)
        raise typer.Exit(code=1)

    if as_json:
        payload = {
            "analysis": analysis.model_dump(by_alias=True, mode="json"),
            "articles": [a.model_dump(by_alias=True, mode="json") for a in news.articles],
            "totalResults": news.total_results,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _echo_analysis(analysis, news)

    if pdf:
        search_terms = ", ".join(p for p in (names, variants) if p)
        pdf.write_bytes(build_report_pdf(search_terms, analysis, news.articles))
        if not as_json:
            typer.echo(f"Report written to {pdf}")


@app.command()
def keywords(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="A .docx, .pdf or .txt file."),
):
    """
    Extract people and organization names from a document, one per line.
    """
    try:
        result = asyncio.run(keyword_service.extract_keywords(path.name, path.read_bytes()))
    except ScannerError as e:
        typer.echo(f"ERROR: {e.message}", err=True)
        raise typer.Exit(code=1)
    for k in result.keywords:
        typer.echo(k)
    if not result.keywords:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
