"""
Conflict Scanner
Party Extraction Service - proxy uploads to the external n8n workflow
"""
import logging
from typing import Optional

import httpx

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import ScannerError, UpstreamServiceError, missing_setting
from conflict_scanner.schemas import PartyExtractionResponse

logger = logging.getLogger(__name__)


class PartyExtractionService:
    """Forwards a document to the party-extraction webhook and validates the reply."""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._webhook_url = webhook_url
        self._transport = transport

    @property
    def webhook_url(self) -> Optional[str]:
        return self._webhook_url or settings.PARTY_EXTRACTION_WEBHOOK_URL

    @property
    def is_available(self) -> bool:
        return bool(self.webhook_url)

    async def extract(
        self,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> PartyExtractionResponse:
        if not self.webhook_url:
            raise missing_setting("PARTY_EXTRACTION_WEBHOOK_URL")

        logger.info("Proxying file to n8n: %s Size: %d", filename, len(content))
        files = {"data": (filename, content, content_type or "application/octet-stream")}

        try:
            async with httpx.AsyncClient(
                timeout=settings.HTTP_TIMEOUT_SECONDS, transport=self._transport
            ) as client:
                response = await client.post(self.webhook_url, files=files)
        except httpx.HTTPError as e:
            logger.error("n8n request failed: %s", e)
            raise UpstreamServiceError("Failed to extract parties", details=str(e)) from e

        logger.info("n8n response status: %s", response.status_code)

        if response.status_code >= 400:
            logger.error("n8n error: %s", response.text)
            raise ScannerError(
                f"n8n extraction failed: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamServiceError("Invalid response from n8n workflow") from e

        if not isinstance(data, dict) or not data.get("success") or not isinstance(data.get("terms"), list):
            raise UpstreamServiceError("Invalid response from n8n workflow")

        terms = data["terms"]
        count = data.get("count")
        return PartyExtractionResponse(
            success=True,
            count=count if isinstance(count, int) else len(terms),
            terms=terms,
        )


party_service = PartyExtractionService()
