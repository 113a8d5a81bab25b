"""Branding commands: extract a website's logo, palette, fonts and metadata."""

from __future__ import annotations

import json

import typer

from pitchdeck.branding import BrandingError, ExtractedBranding, extract_branding

branding_app = typer.Typer(help="Extract branding from a website.", no_args_is_help=True)


def _render(branding: ExtractedBranding) -> list[str]:
    colors = branding.colors
    meta = branding.metadata
    swatches = [c for c in (colors.primary, colors.secondary, colors.accent) if c]
    return [
        f"Title       : {meta.title or '(none)'}",
        f"Description : {meta.description or '(none)'}",
        f"Logo        : {branding.logo or '(none)'}",
        f"Favicon     : {meta.favicon or '(none)'}",
        f"Colors      : {', '.join(swatches) or '(no brand colors found)'}",
        f"Fonts       : heading={branding.fonts.heading!r}  body={branding.fonts.body!r}",
    ]


@branding_app.command("extract")
def branding_extract(
    url: str = typer.Argument(..., help="Website URL to extract branding from."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload."),
) -> None:
    """Fetch URL and print the branding derived from it."""
    try:
        branding = extract_branding(url)
    except BrandingError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(branding.to_dict(), indent=2))
        return

    typer.echo(f"🎨 Branding for {url}")
    for line in _render(branding):
        typer.echo(f"  {line}")
