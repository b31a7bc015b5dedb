"""reviewdesk CLI — run the service and inspect the banned-word list."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.table import Table

from reviewdesk import __version__
from reviewdesk.config import get_settings
from reviewdesk.errors import LoadError
from reviewdesk.log import configure_logging
from reviewdesk.moderation.word_filter import BannedWordFilter, load_banned_words

console = Console()

_words_option = click.option(
    "--words",
    "-w",
    "words_path",
    default=None,
    help="Banned-word file (defaults to REVIEWDESK_BANNED_WORDS_PATH)",
)


def _load(words_path: str | None) -> BannedWordFilter:
    path = words_path or get_settings().banned_words_path
    try:
        return load_banned_words(path)
    except LoadError as e:
        console.print(f"[red]Cannot load banned words:[/] {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """reviewdesk — moderated product reviews and pre-sale questions."""


# ── Serve ────────────────────────────────────────────────────────────


@main.command()
@click.option("--host", default=None, help="Bind address")
@click.option("--port", default=None, type=int, help="Bind port")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Report unknown items as 404 instead of silently succeeding",
)
@_words_option
def serve(host: str | None, port: int | None, strict: bool | None, words_path: str | None):
    """Load the banned-word list and serve the HTTP API."""
    import uvicorn

    from web.backend.app.main import create_app

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    word_filter = _load(words_path)
    app = create_app(word_filter, strict=strict, settings=settings)

    host = host or settings.host
    port = port or settings.port
    console.print(
        f"\n[bold blue]reviewdesk[/] — {len(word_filter)} banned words, "
        f"listening on http://{host}:{port}\n"
    )
    uvicorn.run(app, host=host, port=port, log_config=None)


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@_words_option
def check(text: str, words_path: str | None):
    """Report whether TEXT would be rejected by the banned-word filter.

    Exits with status 2 when the text would be rejected.
    """
    word_filter = _load(words_path)
    match = word_filter.find(text)
    if match is None:
        console.print("[green]Accepted[/]")
        return
    console.print(f"[red]Rejected[/] — contains banned word [bold]{match}[/]")
    sys.exit(2)


# ── Words ────────────────────────────────────────────────────────────


@main.command()
@_words_option
def words(words_path: str | None):
    """List the banned words as loaded (lowercased, blanks dropped)."""
    word_filter = _load(words_path)
    if not len(word_filter):
        console.print("[yellow]The banned-word list is empty.[/]")
        return

    table = Table(title=f"Banned words ({len(word_filter)})")
    table.add_column("#", style="dim", width=4)
    table.add_column("Word", style="cyan")
    for i, word in enumerate(word_filter):
        table.add_row(str(i + 1), word)
    console.print(table)


if __name__ == "__main__":
    main()
