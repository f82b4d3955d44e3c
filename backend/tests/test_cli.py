import json

import pytest
from typer.testing import CliRunner

from conflict_scanner import cli
from conflict_scanner.core.errors import ConfigurationError
from conflict_scanner.schemas import AnalysisResult, KeywordExtractionResponse, NewsSearchResponse

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


class StubNews:
    def __init__(self, articles):
        self.calls = []
        self.articles = articles

    async def search(self, names, variants=None, page_size=None, time_range_months=None):
        self.calls.append((names, variants, page_size, time_range_months))
        return NewsSearchResponse(articles=self.articles, total_results=len(self.articles))


class StubAnalysis:
    def __init__(self):
        self.calls = []

    async def analyze(self, search_terms, articles):
        self.calls.append((search_terms, list(articles)))
        return AnalysisResult.model_validate({
            "summary": "One lawsuit found.",
            "riskLevel": "MEDIUM",
            "conflicts": [{"title": "Suit", "source": "Reuters", "description": "Patent case", "severity": "MEDIUM"}],
            "recommendations": ["Run an enhanced conflict check"],
        })


def _patch(monkeypatch, sample_articles):
    news, analysis = StubNews(sample_articles), StubAnalysis()
    monkeypatch.setattr(cli, "news_service", news)
    monkeypatch.setattr(cli, "analysis_service", analysis)
    return news, analysis


def test_scan_prints_assessment(monkeypatch, sample_articles):
    news, analysis = _patch(monkeypatch, sample_articles)

    result = runner.invoke(cli.app, ["scan", "Acme Corp", "--variants", "Acme Holdings", "--months", "3"])

    assert result.exit_code == 0, result.output
    assert "Risk level: MEDIUM" in result.output
    assert "[MEDIUM] Suit" in result.output
    assert "- Run an enhanced conflict check" in result.output
    assert news.calls == [("Acme Corp", "Acme Holdings", 20, 3)]
    assert analysis.calls[0][0] == "Acme Corp OR Acme Holdings"


def test_scan_json_and_pdf(monkeypatch, sample_articles, tmp_path):
    _patch(monkeypatch, sample_articles)
    out = tmp_path / "report.pdf"

    result = runner.invoke(cli.app, ["scan", "Acme Corp", "--json", "--pdf", str(out)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["analysis"]["riskLevel"] == "MEDIUM"
    assert payload["totalResults"] == 2
    assert out.read_bytes().startswith(b"%PDF")


def test_scan_reports_errors(monkeypatch):
    class Failing:
        async def search(self, *args, **kwargs):
            raise ConfigurationError("NEWS_API_KEY is not configured. Please add it to your .env file.")

    monkeypatch.setattr(cli, "news_service", Failing())
    result = runner.invoke(cli.app, ["scan", "Acme"])

    assert result.exit_code == 1
    assert "NEWS_API_KEY is not configured" in result.output


def test_keywords_prints_one_per_line(monkeypatch, tmp_path):
    doc = tmp_path / "letter.txt"
    doc.write_text("Letter between Sarah Johnson and DL Consulting Ltd.")

    class StubKeywords:
        async def extract_keywords(self, filename, content):
            assert filename == "letter.txt"
            return KeywordExtractionResponse(keywords=["Sarah Johnson", "DL Consulting Ltd"], file_name=filename)

    monkeypatch.setattr(cli, "keyword_service", StubKeywords())
    result = runner.invoke(cli.app, ["keywords", str(doc)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["Sarah Johnson", "DL Consulting Ltd"]
