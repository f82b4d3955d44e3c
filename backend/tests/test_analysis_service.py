import asyncio
import json

import pytest

from conflict_scanner.core.errors import ResponseParseError, UpstreamServiceError
from conflict_scanner.schemas import Article, RiskLevel
from conflict_scanner.services.analysis_service import AnalysisService, parse_analysis
from conflict_scanner.services.prompts import build_analysis_prompt

ANALYSIS = {
    "summary": "Acme is a defendant in active patent litigation.",
    "riskLevel": "high",
    "conflicts": [
        {"title": "Pending acquisition", "source": "Bloomberg", "description": "Deal with Widget Inc", "severity": "medium"},
        {"title": "Patent suit", "source": "Reuters", "description": "Rival sued Acme", "severity": "CRITICAL", "url": "https://x.test/1"},
        {"title": "Board change", "source": None, "description": "New director", "severity": "Low"},
        {"title": "Odd one", "source": "Blog", "description": "", "severity": "SEVERE"},
    ],
    "recommendations": ["Run a check against current clients", "  "],
}


def test_parse_analysis_normalizes_and_orders():
    result = parse_analysis("```json\n" + json.dumps(ANALYSIS) + "\n```")

    assert result.risk_level is RiskLevel.HIGH
    assert [c.severity for c in result.conflicts] == ["CRITICAL", "MEDIUM", "LOW", "SEVERE"]
    assert result.conflicts[2].source == ""
    assert result.recommendations == ["Run a check against current clients"]


def test_parse_analysis_caps_conflicts():
    many = dict(ANALYSIS, conflicts=[
        {"title": f"c{i}", "source": "s", "description": "d", "severity": "LOW"} for i in range(15)
    ])
    assert len(parse_analysis(json.dumps(many), max_conflicts=10).conflicts) == 10


def test_parse_analysis_accepts_null_fields():
    content = json.dumps({
        "summary": None,
        "riskLevel": "LOW",
        "conflicts": None,
        "recommendations": None,
    })
    result = parse_analysis(content)

    assert result.summary == ""
    assert result.risk_level is RiskLevel.LOW
    assert result.conflicts == []
    assert result.recommendations == []


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '["a list"]',
        '{"summary": "missing risk level"}',
        '{"summary": "x", "riskLevel": "EXTREME"}',
    ],
)
def test_parse_analysis_rejects_bad_output(content):
    with pytest.raises(ResponseParseError) as exc:
        parse_analysis(content)
    assert exc.value.message == "Failed to parse AI analysis response"


def test_no_articles_skips_the_model(make_ai):
    ai, client = make_ai()
    result = asyncio.run(AnalysisService(ai).analyze("Acme", []))

    assert client.calls == []
    assert result.risk_level is RiskLevel.LOW
    assert result.summary == "No news articles found for the provided search terms."
    assert result.conflicts == []
    assert len(result.recommendations) == 3


def test_analyze_calls_model_with_articles(configured, make_ai, sample_articles):
    ai, client = make_ai(json.dumps(ANALYSIS))
    articles = [Article.model_validate(a) for a in sample_articles]

    result = asyncio.run(AnalysisService(ai).analyze("Acme Corp", articles))

    assert result.risk_level is RiskLevel.HIGH
    call = client.calls[0]
    assert call["temperature"] == 0.3
    assert call["max_tokens"] == 2000
    prompt = call["messages"][1]["content"]
    assert '"Acme Corp"' in prompt
    assert "Acme Corp sued over patent dispute" in prompt
    assert "No description" in prompt


def test_prompt_lists_every_article_and_category(sample_articles):
    articles = [Article.model_validate(a) for a in sample_articles]
    articles.append(Article(title="Untitled"))
    prompt = build_analysis_prompt("Acme", articles, 10)

    assert "Article 3:" in prompt
    assert "- Source: Unknown" in prompt
    assert "10. **Other Conflict-Relevant News**" in prompt
    assert "up to 10 potential conflicts" in prompt


def test_analyze_empty_reply(configured, make_ai, sample_articles):
    ai, _ = make_ai("")
    articles = [Article.model_validate(a) for a in sample_articles]

    with pytest.raises(UpstreamServiceError) as exc:
        asyncio.run(AnalysisService(ai).analyze("Acme Corp", articles))
    assert exc.value.message == "Failed to analyze results"
    assert exc.value.details == "No analysis content returned from AI"
