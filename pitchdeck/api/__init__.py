"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from pitchdeck.api import app

    uvicorn pitchdeck.api:app --reload
"""

from pitchdeck.api.app import app

__all__ = ["app"]
