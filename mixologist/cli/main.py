"""Mixologist CLI using Typer."""

import asyncio
import logging

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler

from mixologist import __version__
from mixologist.cli.display import print_profile, profile_table
from mixologist.cli.favorites import favorites_app
from mixologist.config import Settings, load_env_file
from mixologist.core.enums import SearchMode, SearchOutcome
from mixologist.core.schema import SearchResponse
from mixologist.services.search_service import SearchService, build_search_service

# Load .env file from current directory or project root
_env_path = load_env_file()

app = typer.Typer(
    name="mixologist",
    help="Mixologist - cocktail recipe lookup across a curated collection, TheCocktailDB and AI",
    add_completion=False,
)
app.add_typer(favorites_app, name="favorites")

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for every command."""
    level = "DEBUG" if verbose else Settings.from_env().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _check_ai_config(settings: Settings) -> None:
    """Display which generative backends are configured."""
    if settings.ai_api_key:
        typer.echo(f"  AI Provider: {settings.ai_provider} (configured)")
    else:
        typer.echo("  AI Provider: Not configured (AI recipe fallback disabled)")
        typer.echo("  Tip: Set ANTHROPIC_API_KEY in .env file to enable generated recipes")

    if settings.image_api_key:
        typer.echo("  Image generation: OpenAI (configured)")
    elif not settings.image_generation:
        typer.echo("  Image generation: Disabled")
    else:
        typer.echo("  Image generation: Not configured (set OPENAI_API_KEY)")


async def _run_search(
    service: SearchService,
    query: str,
    mode: SearchMode,
    resolve_image: bool,
    status,
) -> SearchResponse:
    def on_status(message: str) -> None:
        status.update(f"[bold blue]{message}[/bold blue]")

    response = await service.execute(query, mode, on_status=on_status)
    if resolve_image and response.is_single:
        status.update("[bold blue]Looking for a photo...[/bold blue]")
        profile = await service.resolve_image(response.results[0])
        response = response.model_copy(update={"results": [profile]})
    return response


@app.command()
def search(
    query: str = typer.Argument(..., help="Cocktail name or ingredient"),
    ingredient: bool = typer.Option(
        False, "--ingredient", "-i", help="Search by ingredient instead of name"
    ),
    no_image: bool = typer.Option(False, "--no-image", help="Skip image lookup"),
) -> None:
    """
    Search cocktails by name or ingredient.

    Examples:
        mixologist search negroni
        mixologist search campari --ingredient
    """
    if not query.strip():
        rprint("[red]Error:[/red] Query must not be empty")
        raise typer.Exit(1)

    mode = SearchMode.BY_INGREDIENT if ingredient else SearchMode.BY_NAME
    service = build_search_service(Settings.from_env())

    with console.status("[bold blue]Starting search...[/bold blue]") as status:
        response = asyncio.run(
            _run_search(service, query, mode, resolve_image=not no_image, status=status)
        )

    if response.outcome == SearchOutcome.ERROR:
        rprint(f"[red]{response.message}[/red]")
        raise typer.Exit(2)

    if response.outcome == SearchOutcome.NOT_FOUND:
        rprint(f"[yellow]No cocktails found for '{query}'[/yellow]")
        raise typer.Exit(1)

    if response.is_single:
        print_profile(console, response.results[0])
        return

    console.print(profile_table(response.results, title=f"Results for '{query}'"))
    rprint(f"\n[dim]{len(response.results)} cocktails. Search an exact name to see a recipe.[/dim]")


@app.command()
def run(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(
        False, "--reload", "-r", help="Enable auto-reload for development"
    ),
) -> None:
    """Start the Mixologist API server."""
    import uvicorn

    typer.echo(f"Starting Mixologist on http://{host}:{port}")
    _check_ai_config(Settings.from_env())
    typer.echo("Press Ctrl+C to stop the server")
    typer.echo("")

    uvicorn.run(
        "mixologist.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def init_db() -> None:
    """Initialize the favorites database (create tables)."""
    from mixologist.db.engine import create_db_engine, get_database_url
    from mixologist.db.engine import init_db as db_init

    database_url = Settings.from_env().database_url or None
    typer.echo("Initializing database...")
    db_init(create_db_engine(database_url))
    typer.echo(f"Database initialized at {get_database_url(database_url)}")


@app.command()
def version() -> None:
    """Show the Mixologist version."""
    typer.echo(f"Mixologist v{__version__}")


@app.command()
def check_config() -> None:
    """Check the current configuration status."""
    settings = Settings.from_env()

    typer.echo("Mixologist Configuration")
    typer.echo("=" * 40)

    if _env_path is not None:
        typer.echo(f"  .env file: {_env_path}")
    else:
        typer.echo("  .env file: Not found")

    _check_ai_config(settings)

    typer.echo(f"  TheCocktailDB: {settings.cocktaildb_base_url}")
    typer.echo(f"  Favorites backend: {settings.favorites_backend}")

    from mixologist.db.engine import get_database_url

    typer.echo(f"  Database: {get_database_url(settings.database_url or None)}")


if __name__ == "__main__":
    app()
