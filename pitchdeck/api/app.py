"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /branding  — brand extraction from a website URL
    /projects  — new-project prefill from extracted branding
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pitchdeck import __version__
from pitchdeck.config import settings
from pitchdeck.logging_config import configure_logging

from pitchdeck.api.routers import branding as branding_router
from pitchdeck.api.routers import projects as projects_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Pitchdeck API",
        description=(
            "Brand extraction for the pitch-deck authoring app: derive a "
            "website's logo, palette, fonts and metadata, and pre-fill new "
            "projects with them."
        ),
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(branding_router.router, prefix="/branding", tags=["branding"])
    app.include_router(projects_router.router, prefix="/projects", tags=["projects"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn pitchdeck.api.app:app --reload
app = create_app()
