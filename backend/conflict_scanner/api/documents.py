"""
Conflict Scanner
Documents API Router - party names from uploaded documents
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from conflict_scanner.core.config import settings
from conflict_scanner.core.errors import InvalidRequestError, UploadTooLargeError
from conflict_scanner.schemas import KeywordExtractionResponse, PartyExtractionResponse
from conflict_scanner.services.keyword_service import KeywordService, keyword_service
from conflict_scanner.services.party_service import PartyExtractionService, party_service

logger = logging.getLogger(__name__)

router = APIRouter()


def get_keyword_service() -> KeywordService:
    return keyword_service


def get_party_service() -> PartyExtractionService:
    return party_service


async def read_upload(file: Optional[UploadFile]) -> bytes:
    """Read an upload, enforcing presence and the size limit."""
    if file is None or not file.filename:
        raise InvalidRequestError("No file provided")
    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise UploadTooLargeError(
            f"File exceeds the {settings.MAX_UPLOAD_SIZE_MB} MB upload limit"
        )
    logger.info("Received upload %s (%d bytes)", file.filename, len(content))
    return content


@router.post("/extract-keywords", response_model=KeywordExtractionResponse)
async def extract_keywords(
    file: Optional[UploadFile] = File(None),
    service: KeywordService = Depends(get_keyword_service),
):
    """
    Extract people and organization names from a .docx, .pdf or .txt file.

    The names can be fed straight back into the news search.
    """
    content = await read_upload(file)
    return await service.extract_keywords(file.filename, content)


@router.post("/extract-parties", response_model=PartyExtractionResponse)
async def extract_parties(
    file: Optional[UploadFile] = File(None),
    service: PartyExtractionService = Depends(get_party_service),
):
    """Forward a document to the external party-extraction workflow."""
    content = await read_upload(file)
    return await service.extract(file.filename, content, file.content_type)
