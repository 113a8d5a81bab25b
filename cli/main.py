"""pitchdeck CLI — entry-point for backend operations.

Usage:
    python cli/main.py --help

Sub-command groups:
    branding  → brand extraction from a website
    project   → new-project prefill
    serve     → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pitchdeck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from pitchdeck.config import settings
from pitchdeck.logging_config import configure_logging
from cli.commands.branding import branding_app
from cli.commands.project import project_app

app = typer.Typer(
    name="pitchdeck",
    help="pitchdeck backend CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    configure_logging("DEBUG" if verbose else settings.log_level)


app.add_typer(branding_app, name="branding")
app.add_typer(project_app, name="project")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    typer.echo(f"[serve] Listening on http://{host}:{port}")
    uvicorn.run("pitchdeck.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
