"""Project commands."""

import json
import typer

from pitchdeck.branding import BrandingError
from pitchdeck.projects import ProjectDraft, prefill_project

project_app = typer.Typer(help="Prepare new pitch-deck projects.", no_args_is_help=True)


@project_app.command("prefill")
def project_prefill(
    website_url: str = typer.Argument(..., help="Company website to take branding from."),
    name: str = typer.Option("", "--name", help="Project name (defaults to the page title)."),
    description: str = typer.Option("", "--description", help="Project description."),
) -> None:
    """Build a new-project draft pre-filled from the website's branding."""
    draft = ProjectDraft(name=name, description=description)
    try:
        draft = prefill_project(website_url, draft)
    except BrandingError as e:
        typer.echo(f"❌ Failed to extract branding. Check the URL and try again. ({e})")
        raise typer.Exit(code=1)

    typer.echo(json.dumps(draft.to_dict(), indent=2))
