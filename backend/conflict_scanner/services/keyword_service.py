"""
Conflict Scanner
Keyword Service - pull party names out of an uploaded document with the LLM
"""
import logging
from typing import Any, List, Optional

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import DocumentExtractionError, ResponseParseError
from conflict_scanner.processors.document_processor import extract_text
from conflict_scanner.schemas import KeywordExtractionResponse
from conflict_scanner.services.ai_service import AIService, ai_service, parse_json_content
from conflict_scanner.services.prompts import EXTRACTION_SYSTEM_PROMPT, build_extraction_prompt

logger = logging.getLogger(__name__)

PARSE_ERROR = "Failed to parse AI response"


def clean_keywords(items: Any) -> List[str]:
    """Trim entries, drop blanks and non-strings, dedupe case-insensitively."""
    if not isinstance(items, list):
        raise ResponseParseError(PARSE_ERROR, details="Expected a JSON array")
    seen = set()
    keywords: List[str] = []
    for item in items:
        if not isinstance(item, str):
            continue
        k = item.strip()
        if not k or k.lower() in seen:
            continue
        seen.add(k.lower())
        keywords.append(k)
    return keywords


class KeywordService:
    def __init__(self, ai: Optional[AIService] = None):
        self.ai = ai or ai_service

    async def extract_keywords(self, filename: str, content: bytes) -> KeywordExtractionResponse:
        """
        Extract people and organization names from a document.

        Raises:
            DocumentExtractionError: file unreadable or too little text
            ConfigurationError: OPENAI_API_KEY missing
            ResponseParseError: model did not return a JSON array
        """
        text = extract_text(filename, content)
        logger.info("File %s: extracted text length %d", filename, len(text))

        if len(text) < settings.MIN_EXTRACTED_TEXT_CHARS:
            raise DocumentExtractionError(
                "Could not extract readable text from the file. Please try a .docx or .txt file.",
                extra={"keywords": []},
            )

        prompt = build_extraction_prompt(text[: settings.MAX_DOCUMENT_CHARS])
        raw = await self.ai.complete(
            EXTRACTION_SYSTEM_PROMPT,
            prompt,
            temperature=settings.EXTRACTION_TEMPERATURE,
            max_tokens=settings.EXTRACTION_MAX_TOKENS,
            failure_message="Failed to extract keywords",
        )
        keywords = clean_keywords(parse_json_content(raw, PARSE_ERROR))
        logger.info("Extracted %d keywords from %s", len(keywords), filename)
        return KeywordExtractionResponse(keywords=keywords, file_name=filename)


keyword_service = KeywordService()
