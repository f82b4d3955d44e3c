"""
Conflict Scanner
Prompt templates for conflict analysis and party extraction
"""
from typing import Iterable

from conflict_scanner.schemas import Article


ANALYSIS_SYSTEM_PROMPT = (
    "You are a senior legal conflicts analyst at a law firm. Your expertise is "
    "identifying potential conflicts of interest that could prevent or complicate "
    "client representation. Always respond with valid JSON only, no additional text."
)

CONFLICT_CATEGORIES = [
    ("Mergers & Acquisitions", "Any M&A activity involving the entity, target companies, or acquiring parties"),
    ("Partnerships & Joint Ventures", "Business partnerships, strategic alliances, or joint ventures"),
    ("Litigation & Lawsuits", "Active or pending lawsuits, legal disputes, class actions (as plaintiff or defendant)"),
    ("Regulatory Actions", "Government investigations, SEC inquiries, FTC actions, compliance issues, fines, sanctions"),
    ("Disputes", "Contract disputes, IP disputes, employment disputes, shareholder disputes"),
    ("Industry-wide Issues", "Sector-wide regulatory changes, antitrust concerns, or collective legal matters"),
    ("Executive Moves", "C-suite changes, key personnel departures, executive controversies"),
    ("Board Memberships", "Board appointments, resignations, or directors serving on multiple boards"),
    ("Ownership Changes", "Significant stake acquisitions, divestitures, private equity involvement, activist investors"),
    ("Other Conflict-Relevant News", "Bankruptcy, restructuring, reputational issues, adverse media coverage"),
]

RISK_GUIDELINES = """Risk Level Guidelines:
- LOW: No significant conflict indicators; standard intake procedures sufficient
- MEDIUM: Potential conflicts identified; requires enhanced conflict check against existing clients and matters
- HIGH: Significant conflict indicators; requires immediate review by conflicts counsel and potentially ethics committee
- CRITICAL: Clear conflict-of-interest red flags; likely cannot represent this client without waivers or declining representation"""

ANALYSIS_RESPONSE_FORMAT = """{
  "summary": "A brief 2-3 sentence overview highlighting the most significant conflict-of-interest concerns for a law firm considering this client",
  "riskLevel": "LOW" | "MEDIUM" | "HIGH" | "CRITICAL",
  "conflicts": [
    {
      "title": "Brief title describing the conflict type (e.g., 'Active Litigation with XYZ Corp')",
      "source": "Source article name",
      "description": "Why this poses a potential conflict of interest for the firm, including relevant parties, nature of the issue, and implications",
      "severity": "LOW" | "MEDIUM" | "HIGH" | "CRITICAL",
      "url": "Article URL"
    }
  ],
  "recommendations": [
    "Specific actionable recommendation for conflict clearance process",
    "Additional due diligence steps"
  ]
}"""


def format_article(index: int, article: Article) -> str:
    return (
        f"Article {index}:\n"
        f"- Title: {article.title or ''}\n"
        f"- Source: {article.source_name}\n"
        f"- Description: {article.description or 'No description'}\n"
        f"- Published: {article.published_at or ''}\n"
        f"- URL: {article.url or ''}\n"
    )


def build_analysis_prompt(search_terms: str, articles: Iterable[Article], max_conflicts: int = 10) -> str:
    categories = "\n".join(
        f"{i}. **{name}** - {desc}" for i, (name, desc) in enumerate(CONFLICT_CATEGORIES, 1)
    )
    article_block = "\n".join(format_article(i, a) for i, a in enumerate(articles, 1))

    return f"""You are a legal conflict of interest analyst for a law firm. Your job is to analyze news articles about "{search_terms}" to identify information that would be relevant when deciding whether the firm can ethically and legally take on this entity as a client.

Focus specifically on identifying:
{categories}

NEWS ARTICLES:
{article_block}

Provide your analysis in the following JSON format:
{ANALYSIS_RESPONSE_FORMAT}

{RISK_GUIDELINES}

Analyze all articles and generate up to {max_conflicts} potential conflicts of interest, prioritized by severity.
Be specific and cite actual content from the articles. Focus on facts that would trigger a conflict check, not general business news."""


EXTRACTION_SYSTEM_PROMPT = (
    "You are an expert at extracting names of people and organizations from legal "
    "documents. Always respond with ONLY a valid JSON array of strings, nothing else. "
    "No markdown, no explanation."
)


def build_extraction_prompt(text: str) -> str:
    return f'''Analyze the following document text and extract ALL key parties that could be relevant for a conflict of interest check.

Look carefully for:
- Full names of people (e.g., "Sarah Johnson", "David Lee")
- Company names (e.g., "DL Consulting Ltd")
- Organization names
- Law firms mentioned
- Any business entities
- Opposing parties in disputes
- Clients
- Partners or associates

Document content:
"""
{text}
"""

Extract every person name and company/organization name you can find. Return a JSON array of strings.
If you find names, return them. If the document is empty or unreadable, return an empty array [].

Example output format:
["Sarah Johnson", "David Lee", "DL Consulting Ltd", "Green Street Properties"]'''
