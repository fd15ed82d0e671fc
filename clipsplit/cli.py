"""
clipsplit.cli - Typer CLI entry point.

Usage: clipsplit MANIFEST INPUT_AUDIO
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from clipsplit import __version__
from clipsplit.exceptions import ClipSplitError, DependencyError, ExtractionError
from clipsplit.logging import configure_logging, logger
from clipsplit.utils import format_duration

app = typer.Typer(
    name="clipsplit",
    help="Split one long audio recording into labeled clips.\n\n"
    "Reads a manifest of '<start>,<end>,<name>' lines (after one header line) "
    "and writes one clip per line into a directory named after the manifest.",
    add_completion=False,
)
console = Console()

USAGE = "usage: clipsplit clipfile.txt input.wav"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"clipsplit {__version__}")
        raise typer.Exit()


# trailing positional arguments are ignored
@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": False})
def main(
    manifest: str | None = typer.Argument(None, help="Clip manifest, e.g. clips.txt"),
    input_audio: str | None = typer.Argument(None, help="Audio file to split"),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-j",
        min=1,
        help="Number of parallel FFmpeg jobs (default: CPU count)",
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="YAML config file (default: ./clipsplit.yaml if present)"
    ),
    skip_checks: bool = typer.Option(
        False, "--skip-checks", help="Skip the FFmpeg and input file preflight checks"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Split INPUT_AUDIO into the clips listed in MANIFEST."""
    if manifest is None or input_audio is None:
        console.print(USAGE)
        raise typer.Exit(1)

    from clipsplit.config import load_config
    from clipsplit.extract.audio import split_audio
    from clipsplit.validation import check_ffmpeg, validate_inputs

    manifest_path = Path(manifest)
    input_path = Path(input_audio)

    try:
        config = load_config(
            Path(config_file) if config_file else None,
            overrides={"workers": workers},
        )
        configure_logging(verbose=verbose, level=config.log_level)

        if not skip_checks:
            validate_inputs(manifest_path, input_path)
            ffmpeg_version = check_ffmpeg(config.ffmpeg_path)
            logger.debug("using ffmpeg %s", ffmpeg_version)

        console.print(
            f"[cyan]Splitting {escape(input_path.name)} "
            f"with {config.worker_count} worker(s)...[/cyan]"
        )
        results = split_audio(manifest_path, input_path, config)
    except DependencyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if e.install_hint:
            console.print(f"[dim]{escape(e.install_hint)}[/dim]")
        raise typer.Exit(1)
    except ExtractionError as e:
        # FFmpeg output may contain square brackets; print it without markup
        console.print("[red]Error: FFmpeg failed[/red]")
        console.print(str(e), markup=False, highlight=False)
        raise typer.Exit(1)
    except ClipSplitError as e:
        logger.debug("run aborted", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] Wrote {results['completed']} clip(s) "
        f"to {escape(results['output_dir'])} "
        f"in {format_duration(results['elapsed_seconds'])}"
    )


if __name__ == "__main__":
    app()
