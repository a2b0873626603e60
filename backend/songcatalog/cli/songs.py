"""Song catalog CLI - Song commands."""
import asyncio
from datetime import date

import typer
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from songcatalog.exceptions import CatalogError

app = typer.Typer()
console = Console()


def get_db_session():
    """Get a database session."""
    from songcatalog.database import get_session_factory
    return get_session_factory()()


def fail(message: str):
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


@app.command("list")
def list_songs(
    group: str = typer.Option(None, "--group", "-g", help="Artist name fragment"),
    song: str = typer.Option(None, "--song", "-s", help="Song title fragment"),
    release_date: str = typer.Option(None, "--release-date", "-d", help="Release date (YYYY-MM-DD)"),
    text: str = typer.Option(None, "--text", "-t", help="Lyrics fragment"),
    link: str = typer.Option(None, "--link", help="Link fragment"),
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    page_size: int = typer.Option(10, "--page-size", "-n", help="Items per page"),
):
    """List songs in the catalog."""
    from songcatalog.config import get_settings
    from songcatalog.services.library import SongFilters, SongLibrary
    from songcatalog.utils.pagination import resolve_page

    try:
        released = date.fromisoformat(release_date) if release_date else None
    except ValueError:
        fail("Release date must be in YYYY-MM-DD format")

    settings = get_settings()
    filters = SongFilters(group=group, song=song, release_date=released, text=text, link=link)
    requested = resolve_page(page, page_size, settings.default_page_size, settings.max_page_size)

    db = get_db_session()
    try:
        library = SongLibrary(db)
        total = library.count_songs(filters)
        items = library.list_songs(filters, requested)

        table = Table(title=f"Songs (Page {requested.number}, Total: {total})")
        table.add_column("ID", style="dim")
        table.add_column("Group", style="cyan")
        table.add_column("Song")
        table.add_column("Released")

        for s in items:
            table.add_row(
                str(s.id),
                s.artist.name if s.artist else "",
                s.title,
                str(s.release_date) if s.release_date else "",
            )

        console.print(table)
    except CatalogError as e:
        fail(e.message)
    finally:
        db.close()


@app.command()
def show(song_id: int = typer.Argument(..., help="Song ID")):
    """Show a song."""
    from songcatalog.services.library import SongLibrary

    db = get_db_session()
    try:
        s = SongLibrary(db).get_song(song_id)
        console.print(f"[bold]{s.artist.name} - {s.title}[/bold]")
        console.print(f"Released: {s.release_date or 'unknown'}")
        console.print(f"Link: {s.link or '-'}")
    except CatalogError as e:
        fail(e.message)
    finally:
        db.close()


@app.command()
def lyrics(
    song_id: int = typer.Argument(..., help="Song ID"),
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    page_size: int = typer.Option(5, "--page-size", "-n", help="Verses per page"),
):
    """Print a page of a song's verses."""
    from songcatalog.services.library import SongLibrary
    from songcatalog.utils.lyrics import paginate_verses, split_verses

    db = get_db_session()
    try:
        s = SongLibrary(db).get_song(song_id)
        verses = split_verses(s.lyrics or "")
        for verse in paginate_verses(verses, max(page, 1), max(page_size, 1)):
            console.print(verse)
            console.print()
    except CatalogError as e:
        fail(e.message)
    finally:
        db.close()


@app.command()
def add(
    group: str = typer.Argument(..., help="Artist name"),
    song: str = typer.Argument(..., help="Song title"),
):
    """Add a song, fetching its details from the music info API."""
    from pydantic import ValidationError
    from songcatalog.integrations.music_info import MusicInfoClient
    from songcatalog.schemas.song import SongCreate
    from songcatalog.services.catalog import SongService
    from songcatalog.services.library import SongLibrary

    try:
        data = SongCreate(group=group, song=song)
    except ValidationError:
        fail("Group and song must not be empty")

    db = get_db_session()
    try:
        service = SongService(SongLibrary(db), MusicInfoClient())
        created = asyncio.run(service.create_song(data))
        console.print(f"[green]Added song {created.id}: {group} - {created.title}[/green]")
    except CatalogError as e:
        fail(e.message)
    finally:
        db.close()


@app.command()
def delete(
    song_id: int = typer.Argument(..., help="Song ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a song."""
    from songcatalog.services.library import SongLibrary

    db = get_db_session()
    try:
        library = SongLibrary(db)
        s = library.get_song(song_id)

        if not force:
            if not Confirm.ask(f"Delete '{s.title}'?"):
                console.print("Cancelled")
                return

        library.delete_song(song_id)
        console.print(f"[green]Song {song_id} deleted[/green]")
    except CatalogError as e:
        fail(e.message)
    finally:
        db.close()
