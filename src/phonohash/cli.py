"""CLI for phonohash."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from phonohash import __version__
from phonohash.bench import load_word_list, run_benchmark
from phonohash.config import (
    PhonoHashConfig,
    load_config,
    resolve_word_list,
    save_config,
)
from phonohash.distance import difference
from phonohash.fingerprint import fingerprint
from phonohash.logging import SessionLogger, analyze_logs, set_logger
from phonohash.matcher import SuggestionMatcher

app = typer.Typer(
    name="phonohash",
    help="Phonetic fingerprints and fuzzy word comparison.",
    no_args_is_help=True,
)
console = Console()


def _cli_error(message: str, detail: str | None = None) -> None:
    """Print formatted error message to console."""
    if detail:
        console.print(f"[red]Error:[/red] {message}: {detail}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def _start_session(command: str, config: PhonoHashConfig) -> SessionLogger | None:
    if not config.log_sessions:
        return None
    try:
        logger = SessionLogger(command)
    except OSError as e:
        console.print(f"[dim]Session logging disabled: {e}[/dim]")
        return None
    set_logger(logger)
    return logger


def _end_session(logger: SessionLogger | None) -> None:
    if logger is None:
        return
    logger.finalize()
    set_logger(None)


def _load_words(config: PhonoHashConfig, words: Path | None) -> list[str]:
    path = resolve_word_list(config, words)
    try:
        return load_word_list(path)
    except (FileNotFoundError, OSError) as e:
        _cli_error("Could not load word list", str(e))
        raise typer.Exit(1)


@app.command(name="hash")
def hash_cmd(
    words: Annotated[list[str], typer.Argument(help="Words to fingerprint")],
):
    """Print the fingerprint of each word."""
    config = load_config()
    logger = _start_session("hash", config)

    table = Table("Word", "Fingerprint", "Integer")
    for word in words:
        fp = fingerprint(word)
        table.add_row(word, fp.hex(), str(int(fp)))
        if logger:
            logger.log_fingerprint(word, fp.hex())
    console.print(table)
    _end_session(logger)


@app.command()
def compare(
    a: Annotated[str, typer.Argument(help="First word")],
    b: Annotated[str, typer.Argument(help="Second word")],
):
    """Compare two words and report their distance."""
    config = load_config()
    logger = _start_session("compare", config)

    fp_a, fp_b = fingerprint(a), fingerprint(b)
    diff = difference(fp_a, fp_b)

    console.print(f"  [dim]{a}:[/dim] {fp_a.hex()}")
    console.print(f"  [dim]{b}:[/dim] {fp_b.hex()}")
    console.print(f"  [dim]xor:[/dim] {diff.xor:016x}")
    console.print(f"  [dim]hamming:[/dim] {diff.hamming}")
    console.print(f"  [dim]distance:[/dim] {diff.distance}")
    if diff.similar:
        console.print("[green]Similar[/green]")
    else:
        console.print("[yellow]Not similar[/yellow]")

    if logger:
        logger.log_comparison(a, b, diff.distance, diff.similar)
    _end_session(logger)


@app.command()
def suggest(
    word: Annotated[str, typer.Argument(help="Word to find suggestions for")],
    words: Annotated[
        Optional[Path],
        typer.Option("--words", "-w", help="Word list, one word per line")
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Maximum number of suggestions")
    ] = None,
    max_distance: Annotated[
        Optional[int],
        typer.Option("--max-distance", help="Fingerprint distance must be below this")
    ] = None,
):
    """Suggest words from a word list that sound like WORD."""
    config = load_config()
    word_list = _load_words(config, words)
    logger = _start_session("suggest", config)

    matcher = SuggestionMatcher(word_list)
    suggestions = matcher.suggest(
        word,
        max_candidates=limit if limit is not None else config.suggest.max_candidates,
        max_distance=max_distance if max_distance is not None else config.suggest.max_distance,
    )

    if logger:
        logger.log_suggestions(word, [s.word for s in suggestions], scanned=len(matcher))

    if not suggestions:
        console.print(f"[dim]No suggestions for {word!r}.[/dim]")
    else:
        table = Table("Word", "Distance", "Edits")
        for s in suggestions:
            table.add_row(s.word, str(s.distance), str(s.edit_distance))
        console.print(table)
    _end_session(logger)


@app.command()
def bench(
    words: Annotated[
        Optional[Path],
        typer.Argument(help="Word list (defaults to the system dictionary)")
    ] = None,
    json_out: Annotated[
        Optional[Path],
        typer.Option("--json", help="Write results to a JSON file")
    ] = None,
):
    """Benchmark fingerprinting over a word list."""
    config = load_config()
    word_list = _load_words(config, words)
    logger = _start_session("bench", config)

    name = words.name if words else "dictionary"
    result = run_benchmark(word_list, name=name)
    console.print(result.summary())

    if json_out:
        try:
            result.to_json(json_out)
        except OSError as e:
            _cli_error("Failed to write results", str(e))
            if logger:
                logger.log_error("write_failed", str(e), {"path": str(json_out)})
            _end_session(logger)
            raise typer.Exit(1)
        console.print(f"[green]Saved:[/green] {json_out}")

    if logger:
        logger.log_benchmark(result.to_dict())
    _end_session(logger)


@app.command(name="config")
def config_cmd(
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Reset to default configuration")
    ] = False,
):
    """Show or reset phonohash configuration."""
    from phonohash.config import CONFIG_FILE

    if reset:
        save_config(PhonoHashConfig())
        console.print("[green]Configuration reset to defaults.[/green]")

    config = load_config()
    console.print(f"[bold]Configuration:[/bold] {CONFIG_FILE}")
    console.print()
    for key, value in config.model_dump().items():
        if key == "suggest":
            console.print(f"  [dim]suggest.max_candidates:[/dim] {value['max_candidates']}")
            console.print(f"  [dim]suggest.max_distance:[/dim] {value['max_distance']}")
        else:
            console.print(f"  [dim]{key}:[/dim] {value}")


@app.command()
def logs(
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of recent sessions to analyze")
    ] = 10,
):
    """Summarize recent session logs."""
    analysis = analyze_logs(limit=limit)

    if "error" in analysis:
        console.print(f"[yellow]{analysis['error']}[/yellow]")
        return

    console.print(f"[bold]Log Analysis[/bold] ({analysis['sessions_analyzed']} sessions)")
    console.print()
    for command, count in sorted(analysis["commands"].items()):
        console.print(f"  [dim]{command}:[/dim] {count}")
    console.print(f"  [dim]Words hashed:[/dim] {analysis['words_hashed']:,}")
    console.print(f"  [dim]Comparisons:[/dim] {analysis['comparisons']}")
    if analysis.get("similar_rate") is not None:
        console.print(f"  [dim]Similar rate:[/dim] {analysis['similar_rate']:.1f}%")

    if analysis.get("common_words"):
        console.print()
        console.print("[bold]Most Compared Words[/bold]")
        for word, count in analysis["common_words"][:15]:
            console.print(f"  {count:3}x  {word}")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version")
    ] = False,
):
    """phonohash - phonetic fingerprints for fuzzy word matching."""
    if version:
        console.print(f"phonohash {__version__}")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
