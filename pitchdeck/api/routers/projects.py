"""Project-creation endpoints.

Routes
------
POST /projects/prefill    Draft fields + website_url → draft merged with branding
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from pitchdeck.branding import BrandingError
from pitchdeck.projects import ProjectDraft, prefill_project

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class PrefillRequest(BaseModel):
    website_url: str
    name: str = ""
    description: str = ""
    logo: str = ""
    colors: Optional[dict[str, str]] = None
    fonts: Optional[dict[str, str]] = None


def _draft_from_request(body: PrefillRequest) -> ProjectDraft:
    draft = ProjectDraft(name=body.name, description=body.description, logo=body.logo)
    if body.colors:
        draft.colors.update(body.colors)
    if body.fonts:
        draft.fonts.update(body.fonts)
    return draft


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/prefill", response_model=dict[str, Any])
def prefill_project_endpoint(body: PrefillRequest) -> dict[str, Any]:
    """Return the submitted draft with branding from ``website_url`` merged in."""
    try:
        draft = prefill_project(body.website_url, _draft_from_request(body))
    except BrandingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return draft.to_dict()
