"""
Module: cli.py
Description:
    Typer-based command-line interface for the MaiMemo collection plugin.

Usage:
    python cli.py [subcommand] [options]

Notes:
    Reads configuration from `.env`.
    - Required/used env vars:
        * MAIMEMO_API_TOKEN
        * MAIMEMO_WORD_LIST_TITLE
        * MAIMEMO_ENABLE_WORD_CHECK
        * MAIMEMO_TIMEOUT
    - `--title` and `--check/--no-check` override the `.env` values.
"""

import asyncio
import os
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from collector.config import validate_token
from collector.errors import CollectError
from collector.http_client import RequestsHttp
from collector.main import collect
from collector.maimemo_client import MaimemoClient
from utils.env import config_from_env, load_env, validate_env_vars
from utils.logger import PluginLogger

console = Console()
logger = PluginLogger()

app = typer.Typer(help="MaiMemo Collect – Add looked-up words to your MaiMemo notepad.")


def fail(error: CollectError):
    console.print(f"[bold red]❌ {error.kind.value}:[/bold red] {error}")
    raise typer.Exit(code=1)


def make_client() -> tuple[MaimemoClient, RequestsHttp]:
    validate_env_vars(["MAIMEMO_API_TOKEN"])
    api_token = os.getenv("MAIMEMO_API_TOKEN")
    try:
        validate_token(api_token)
    except CollectError as e:
        fail(e)
    http = RequestsHttp()
    return MaimemoClient(api_token, http, logger), http


@app.command("collect")
def collect_word(
    word: str = typer.Argument(..., help="Word or phrase to add."),
    title: str = typer.Option(
        None, "--title", help="Notepad title. Overrides MAIMEMO_WORD_LIST_TITLE from .env."
    ),
    check: Optional[bool] = typer.Option(
        None,
        "--check/--no-check",
        help="Verify the word is in the MaiMemo dictionary. Overrides MAIMEMO_ENABLE_WORD_CHECK.",
    ),
):
    """
    Add WORD to the configured notepad, creating the notepad if needed.
    Duplicates and (with the check enabled) unknown words are refused.
    """
    word_check = None if check is None else ("enable" if check else "disable")
    config = config_from_env(title=title, word_check=word_check)
    http = RequestsHttp()

    try:
        asyncio.run(collect(word, "", config, http, logger=logger))
    except CollectError as e:
        fail(e)
    finally:
        http.close()

    console.print(
        f"[bold green]✅ Added:[/bold green] {word.strip()} → {config['word_list_title']}"
    )


@app.command("check-word")
def check_word(word: str = typer.Argument(..., help="Single word to look up.")):
    """Check whether WORD exists in the MaiMemo dictionary."""
    client, http = make_client()
    try:
        spelling = asyncio.run(client.check_word_in_vocabulary(word.strip()))
    except CollectError as e:
        fail(e)
    finally:
        http.close()

    console.print(f"[bold green]✅ In dictionary:[/bold green] {spelling}")


@app.command("lists")
def list_notepads():
    """Show every notepad on the account."""
    client, http = make_client()
    try:
        notepads = asyncio.run(client.list_notepads())
    except CollectError as e:
        fail(e)
    finally:
        http.close()

    if not notepads:
        console.print("[yellow]⚠️  No notepads found.[/yellow]")
        return

    table = Table(title="MaiMemo notepads")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Status")
    table.add_column("Tags")
    table.add_column("Updated", style="dim")
    for notepad in notepads:
        table.add_row(
            str(notepad.get("id", "")),
            notepad.get("title", ""),
            notepad.get("status", ""),
            ", ".join(notepad.get("tags") or []),
            notepad.get("updated_time", ""),
        )
    console.print(table)


@app.callback()
def main():
    load_env()


# === ENTRY POINT ===
if __name__ == "__main__":
    app()
