"""Project-creation helpers (branding prefill)."""

from pitchdeck.projects.draft import ProjectDraft, apply_branding, prefill_project

__all__ = ["ProjectDraft", "apply_branding", "prefill_project"]
