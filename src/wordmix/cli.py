"""CLI interface for wordmix."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wordmix import __version__
from wordmix.config import get_settings
from wordmix.errors import ShuffleError
from wordmix.schemas import ShuffleOptions
from wordmix.statement import StatementShuffler
from wordmix.tokenizer import collect_words_info
from wordmix.xml.documents import shuffle_xml_file

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wordmix",
    help="Shuffle letters inside words, whole words or vowels only",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

VowelsOption = Annotated[
    Optional[bool],
    typer.Option("--vowels/--whole-words", help="Shuffle only vowels inside each word"),
]
SeparatorsOption = Annotated[
    Optional[str],
    typer.Option("--separators", "-S", help="Word separator characters (default: space)"),
]
SeedOption = Annotated[
    Optional[int],
    typer.Option("--seed", "-s", help="Random seed for reproducibility"),
]


def version_callback(value: bool):
    if value:
        console.print(f"wordmix version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
):
    """wordmix - scramble the letters of words while keeping their layout."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"[red]Error: invalid settings: {e}[/]")
        raise typer.Exit(1)
    logging.basicConfig(level=settings.log_level)


# --- Shared helpers ---


def _build_options(
    vowels: bool | None, separators: str | None, seed: int | None
) -> ShuffleOptions:
    """Merge CLI flags over environment settings."""
    try:
        return get_settings().to_options(only_vowels=vowels, separators=separators, seed=seed)
    except ValidationError as e:
        err_console.print(f"[red]Error: invalid options: {e}[/]")
        raise typer.Exit(1)


def _read_text(text: str) -> str:
    """Return the text argument, reading stdin when it is '-'."""
    if text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


@app.command()
def statement(
    text: Annotated[str, typer.Argument(help="Statement to shuffle ('-' reads stdin)")],
    vowels: VowelsOption = None,
    separators: SeparatorsOption = None,
    seed: SeedOption = None,
):
    """Shuffle letters inside every word of a statement.

    Examples:
        wordmix statement "the quick brown fox"
        wordmix statement "the quick brown fox" --vowels --seed 42
        echo "one,two three" | wordmix statement - --separators " ,"
    """
    options = _build_options(vowels, separators, seed)
    shuffler = StatementShuffler(options)

    try:
        result = shuffler.shuffle(_read_text(text))
    except ShuffleError as e:
        err_console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    logger.info("Statement shuffled with seed %d", shuffler.seed_used)
    typer.echo(result)


@app.command()
def words(
    text: Annotated[str, typer.Argument(help="Statement to tokenize ('-' reads stdin)")],
    vowels: VowelsOption = None,
    separators: SeparatorsOption = None,
):
    """Show the words found in a statement and their vowel positions."""
    options = _build_options(vowels, separators, None)
    source = _read_text(text)
    infos = collect_words_info(source, options.only_vowels, options.separator_set)

    if not infos:
        console.print("[yellow]No words found[/]")
        return

    table = Table(title=f"Words ({len(infos)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Begin", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Word", style="cyan")
    if options.only_vowels:
        table.add_column("Vowels")

    for i, info in enumerate(infos, 1):
        row = [
            str(i),
            str(info.begin_position),
            str(info.end_position),
            source[info.begin_position:info.end_position + 1],
        ]
        if options.only_vowels:
            row.append(", ".join(str(p) for p in info.vowel_positions) or "-")
        table.add_row(*row)

    console.print(table)


@app.command("xml")
def xml_document(
    path: Annotated[Path, typer.Argument(help="XML file to shuffle")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file (default: stdout)")] = None,
    vowels: VowelsOption = None,
    separators: SeparatorsOption = None,
    seed: SeedOption = None,
):
    """Shuffle the text values of an XML document.

    Tags, attributes and whitespace-only layout text are kept as they are.

    Examples:
        wordmix xml strings.xml
        wordmix xml strings.xml --vowels --output strings.shuffled.xml
    """
    if not path.exists():
        err_console.print(f"[red]Error: {path} does not exist[/]")
        raise typer.Exit(1)

    options = _build_options(vowels, separators, seed)
    shuffler = StatementShuffler(options)

    try:
        result = shuffle_xml_file(
            path,
            output,
            options.only_vowels,
            options.separator_set,
            rng=shuffler.rng,
        )
    except (ShuffleError, OSError) as e:
        err_console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    if output is None:
        typer.echo(result)
    else:
        err_console.print(Panel(
            f"[bold green]Shuffled document written:[/] {output}\n"
            f"Mode: {'vowels' if options.only_vowels else 'whole words'} | Seed: {shuffler.seed_used}",
            title="wordmix",
        ))


if __name__ == "__main__":
    app()
