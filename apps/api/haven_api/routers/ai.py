"""AI copywriting endpoints."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas import ai as schemas
from ..services import copywriter
from ..services.llm import CompletionClient, get_completion_client

router = APIRouter()


async def _run(template: copywriter.CopyTemplate, payload: dict[str, Any], client: CompletionClient) -> str:
    try:
        return await copywriter.generate(template, payload, client)
    except copywriter.MissingFieldsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None
    except copywriter.CopyGenerationError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from None


@router.post("/listing-description", response_model=schemas.ListingDescriptionResponse)
async def listing_description(
    payload: schemas.ListingDescriptionRequest,
    client: CompletionClient = Depends(get_completion_client),
) -> schemas.ListingDescriptionResponse:
    """Draft a listing description from a few property facts."""

    text = await _run(copywriter.CopyTemplate.LISTING_DESCRIPTION, payload.model_dump(), client)
    return schemas.ListingDescriptionResponse(description=text)


@router.post("/inquiry-reply", response_model=schemas.InquiryReplyResponse)
async def inquiry_reply(
    payload: schemas.InquiryReplyRequest,
    client: CompletionClient = Depends(get_completion_client),
) -> schemas.InquiryReplyResponse:
    """Draft an email reply to a buyer's inquiry."""

    text = await _run(copywriter.CopyTemplate.INQUIRY_REPLY, payload.model_dump(), client)
    return schemas.InquiryReplyResponse(reply=text)


@router.post("/listing-marketing", response_model=schemas.ListingMarketingResponse)
async def listing_marketing(
    payload: schemas.ListingMarketingRequest,
    client: CompletionClient = Depends(get_completion_client),
) -> schemas.ListingMarketingResponse:
    """Draft highlight bullets and a social caption."""

    text = await _run(copywriter.CopyTemplate.LISTING_MARKETING, payload.model_dump(), client)
    highlights, caption = copywriter.parse_marketing(text)
    return schemas.ListingMarketingResponse(highlights=highlights, caption=caption)
