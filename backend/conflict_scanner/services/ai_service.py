"""
Conflict Scanner
AI Service - OpenAI chat completion wrapper and response reshaping
"""
import json
import logging
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import (
    ResponseParseError,
    UpstreamServiceError,
    missing_setting,
)
from conflict_scanner.core.logging import preview

logger = logging.getLogger(__name__)


def strip_code_fences(content: str) -> str:
    """
    Remove a markdown code fence wrapped around model output.

    Handles a leading ```json or ``` and a trailing ```.
    """
    content = (content or "").strip()
    if content.startswith("```json"):
        content = content[len("```json"):]
    elif content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


def parse_json_content(content: str, error_message: str) -> Any:
    """Strip fences and decode JSON, raising ResponseParseError on bad output."""
    cleaned = strip_code_fences(content)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Could not decode model output: %s", preview(cleaned, 200))
        raise ResponseParseError(error_message, details=str(e)) from e


class AIService:
    """
    Thin async wrapper over the OpenAI chat completions API.

    A pre-built client may be injected (used by tests); otherwise one is
    created lazily from the configured API key.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        self._api_key = api_key
        self.model = model or settings.OPENAI_MODEL
        self._client = client

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key or settings.OPENAI_API_KEY

    @property
    def is_available(self) -> bool:
        """Check if AI service is configured"""
        return self._client is not None or bool(self.api_key)

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise missing_setting("OPENAI_API_KEY")
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def complete(
        self,
        system_prompt: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
        failure_message: str = "Failed to get a response from AI",
        empty_message: str = "No content returned from AI",
    ) -> str:
        """
        Run one system+user chat completion and return the message text.

        Raises:
            ConfigurationError: no API key
            UpstreamServiceError: API failure or empty content
        """
        client = self.client
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            logger.error("OpenAI API error: %s", e)
            raise UpstreamServiceError(failure_message, details=str(e)) from e

        content = None
        if response.choices:
            content = response.choices[0].message.content
        if not content:
            raise UpstreamServiceError(failure_message, details=empty_message)

        logger.debug("AI response: %s", preview(content))
        return content


ai_service = AIService()
