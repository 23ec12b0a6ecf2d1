"""
Command-line interface for ClipSplitter.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress
from rich.table import Table

from clipsplitter.config import get_config, get_video_extensions
from clipsplitter.exceptions import ClipSplitterError, ValidationError
from clipsplitter.models.batch import Status
from clipsplitter.splitter import BACKENDS, BatchSplitter, get_media_tool
from clipsplitter.splitter.estimator import describe_clip_count
from clipsplitter.splitter.ffmpeg_tool import find_executable
from clipsplitter.splitter.naming import preview_filenames, resolve_naming
from clipsplitter.utils.duration import format_clock, format_duration, parse_duration
from clipsplitter.utils.file_utils import format_bytes, list_files
from clipsplitter.utils.validation import validate_output_dir, validate_video_file

logger = logging.getLogger(__name__)

console = Console()


def _expand_inputs(inputs):
    """Turn file and directory arguments into validated video paths."""
    paths = []
    for value in inputs:
        if os.path.isdir(value):
            found = list_files(value, extensions=get_video_extensions())
            if not found:
                console.print(f"[yellow]No video files in {value}[/yellow]")
            paths.extend(os.path.abspath(path) for path in found)
        else:
            paths.append(validate_video_file(value))
    return paths


def _duration_option(value):
    seconds = parse_duration(value)
    if seconds <= 0:
        raise click.BadParameter(f"'{value}' is not a valid duration, use HH:MM:SS")
    return value


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def main(verbose):
    """ClipSplitter - split videos into fixed-length clips."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command()
@click.argument("inputs", nargs=-1, required=True)
@click.option(
    "--duration",
    "-d",
    default=lambda: get_config("default_split_duration", "00:05:00"),
    callback=lambda ctx, param, value: _duration_option(value),
    help="Length of each clip as HH:MM:SS, MM:SS or seconds.",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    help="Folder for the clips. Defaults to the first video's folder.",
)
@click.option("--prefix", "-p", default=None, help="Clip name prefix (single file only).")
@click.option("--suffix", "-s", default="", help="Clip name suffix.")
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default=None,
    help="Tool used to cut the clips.",
)
def split(inputs, duration, output_dir, prefix, suffix, backend):
    """Split one or more videos into clips of equal length.

    INPUTS are video files or folders containing videos. With several videos
    each clip is named after its source file and --prefix is not allowed.
    """
    try:
        paths = _expand_inputs(inputs)
        if not paths:
            console.print("[bold red]No videos to split[/bold red]")
            sys.exit(1)

        multi_file = len(paths) > 1
        if multi_file and prefix is not None:
            raise click.UsageError("--prefix only applies when splitting a single video")

        splitter = BatchSplitter(get_media_tool(backend), multi_file=multi_file)
        splitter.set_duration(duration)

        console.print(f"[cyan]Reading {len(paths)} video(s)...[/cyan]")
        splitter.select_files(paths)
        if splitter.status == Status.ERROR:
            console.print(f"[bold red]{splitter.error}[/bold red]")
            sys.exit(1)

        if output_dir:
            splitter.set_output_directory(validate_output_dir(output_dir))
        if prefix is not None:
            splitter.set_prefix(prefix)
        splitter.set_suffix(suffix)

        console.print(f"Output directory: {splitter.output.directory}")
        console.print(f"Clip length: {format_duration(splitter.config.duration_seconds)}")
        console.print(describe_clip_count(splitter.total_estimated_clips()))

        if not splitter.is_ready:
            console.print("[bold red]Nothing to split, check the duration and output directory[/bold red]")
            sys.exit(1)

        with Progress(console=console) as progress:
            task = progress.add_task("[cyan]Splitting...", total=100)

            def update(state):
                if state.status != Status.SPLITTING:
                    return
                current = state.progress.current_file
                name = state.items[current - 1].name if current else ""
                progress.update(
                    task,
                    completed=state.progress.percentage,
                    description=(
                        f"[cyan]File {current} of {state.progress.total_files}: {name} "
                        f"({state.progress.expected_clips} clips)"
                    ),
                )

            splitter.on_change = update
            splitter.start()
            if splitter.status == Status.SUCCESS:
                progress.update(task, completed=100, description="[green]Done")

        if splitter.status == Status.ERROR:
            console.print(
                f"[bold red]Failed on file {splitter.progress.current_file} of "
                f"{splitter.progress.total_files}: {splitter.error}[/bold red]"
            )
            console.print(f"{splitter.progress.total_clips_created} clips were created before the failure")
            sys.exit(1)

        console.print(f"[bold green]✓ {splitter.summary()}[/bold green]")

    except ValidationError as e:
        console.print(f"[bold red]Invalid input: {e}[/bold red]")
        sys.exit(1)
    except ClipSplitterError as e:
        console.print(f"[bold red]Processing error: {e}[/bold red]")
        sys.exit(1)


@main.command()
@click.argument("inputs", nargs=-1, required=True)
@click.option(
    "--duration",
    "-d",
    default=lambda: get_config("default_split_duration", "00:05:00"),
    callback=lambda ctx, param, value: _duration_option(value),
    help="Clip length used for the estimate.",
)
@click.option("--backend", type=click.Choice(BACKENDS), default=None, help="Tool used to read the videos.")
def info(inputs, duration, backend):
    """Show length, size and expected clip count for videos."""
    try:
        paths = _expand_inputs(inputs)
        splitter = BatchSplitter(get_media_tool(backend), multi_file=len(paths) > 1)
        splitter.set_duration(duration)
        splitter.select_files(paths)
    except ClipSplitterError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        sys.exit(1)

    if splitter.status == Status.ERROR:
        console.print(f"[bold red]{splitter.error}[/bold red]")
        sys.exit(1)

    table = Table(title=f"Clips of {format_duration(splitter.config.duration_seconds)}")
    table.add_column("File")
    table.add_column("Size", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Clips", justify="right")
    table.add_column("Example names")
    for item in splitter.items:
        prefix, suffix = resolve_naming(splitter.output, item)
        table.add_row(
            item.name,
            format_bytes(item.size),
            format_clock(item.duration_seconds),
            str(splitter.estimated_clips(item)),
            ", ".join(preview_filenames(prefix, suffix)),
        )
    console.print(table)
    console.print(describe_clip_count(splitter.total_estimated_clips()))


@main.command()
def check():
    """Check that ffmpeg and ffprobe can be found."""
    missing = False
    for name in ("ffmpeg", "ffprobe"):
        path = find_executable(name, get_config(f"{name}_path", name))
        if path:
            console.print(f"[green]✓ Found {name} at: {path}[/green]")
        else:
            missing = True
            console.print(f"[red]✗ {name} not found[/red]")
    if missing:
        console.print("[yellow]Please install FFmpeg, e.g. 'brew install ffmpeg' or 'apt install ffmpeg'[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
