"""Branding endpoints.

Routes
------
POST /branding/extract    Body: {"url": "https://..."}    → extract_branding
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from pitchdeck.branding import BrandingError, extract_branding

router = APIRouter()


class ExtractRequest(BaseModel):
    url: str


@router.post("/extract", response_model=dict[str, Any])
def extract_branding_endpoint(body: ExtractRequest) -> dict[str, Any]:
    """Fetch the page at ``url`` and return its logo, colors, fonts and metadata.

    Invalid URLs and fetch failures both answer 400 with the error message.
    """
    try:
        branding = extract_branding(body.url)
    except BrandingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return branding.to_dict()
