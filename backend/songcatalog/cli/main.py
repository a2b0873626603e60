"""Song catalog CLI - Main entry point."""
import typer
from rich.console import Console
from rich.table import Table

from songcatalog.cli import songs

app = typer.Typer(
    name="songcatalog",
    help="Song catalog - songs, artists and lyrics",
    add_completion=True,
)

console = Console()

# Add subcommands
app.add_typer(songs.app, name="songs", help="Song catalog commands")


@app.command()
def version():
    """Show version information."""
    from songcatalog import __version__
    console.print(f"Song Catalog v{__version__}")


@app.command()
def status():
    """Check system status."""
    from songcatalog.config import get_settings

    settings = get_settings()

    table = Table(title="Song Catalog Status")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")

    # Check database
    try:
        from sqlalchemy import text
        from songcatalog.database import get_engine
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        table.add_row("Database", "Connected")
    except Exception as e:
        table.add_row("Database", f"[red]Error: {e}[/red]")

    if settings.music_api_url:
        table.add_row("Music info API", f"OK ({settings.music_api_url})")
    else:
        table.add_row("Music info API", "[yellow]Not configured (MUSIC_API_URL)[/yellow]")

    console.print(table)


@app.command("init-db")
def init_db():
    """Create database tables."""
    from songcatalog.config import ConfigurationError
    from songcatalog.database import init_db as create_tables

    try:
        create_tables()
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print("[green]Database tables created[/green]")


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default: HOST)"),
    port: int = typer.Option(None, "--port", "-p", help="Listen port (default: PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API server."""
    import uvicorn
    from songcatalog.config import get_settings, validate_settings, ConfigurationError

    settings = get_settings()
    try:
        validate_settings(settings)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    uvicorn.run(
        "songcatalog.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
