"""CLI commands."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from tvpick.config import Config

app = typer.Typer(
    name="tvpick",
    help="Fuzzy picker - choose a line from stdin.",
    no_args_is_help=False,
)
console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _get_config() -> Config:
    """Lazy import and load config."""
    from tvpick.config import Config

    return Config.load()


def _configure_logging(debug: bool, log_file: str) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        filename=log_file or None,
    )


def _reattach_tty() -> None:
    """Read keys from the controlling terminal once stdin has been consumed."""
    if sys.stdin.isatty():
        return
    sys.stdin = open("/dev/tty")  # noqa: SIM115 - lives for the whole process


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    inverted: Annotated[
        bool, typer.Option("--inverted", "-i", help="Prompt on top, list drawn top-down")
    ] = False,
    height: Annotated[
        int | None, typer.Option("--height", "-H", help="Picker height in rows (0 = full)")
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Write debug logs")] = False,
):
    """Pick a line from stdin and print it."""
    if ctx.invoked_subcommand is not None:
        return

    cfg = _get_config()
    _configure_logging(debug, cfg.log_file)
    logger = logging.getLogger("tvpick.cli")

    if inverted:
        cfg.override("inverted", True)
    if height is not None:
        if height < 0:
            console.print("[red]Error:[/red] --height must be 0 or positive")
            raise typer.Exit(2)
        cfg.override("height", height)

    if sys.stdin.isatty():
        console.print("[red]Error:[/red] Nothing to pick from. Pipe lines into tvpick.")
        raise typer.Exit(2)

    from tvpick.channels import StdinChannel

    channel = StdinChannel(sys.stdin)
    if channel.total_count() == 0:
        console.print("[yellow]No input lines[/yellow]")
        raise typer.Exit(2)

    try:
        _reattach_tty()
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot open terminal for input: {e}")
        raise typer.Exit(2)

    from tvpick.ui.interactive import run_picker

    try:
        choice = run_picker(channel, cfg, console)
    finally:
        channel.shutdown()

    if choice is None:
        logger.debug("cancelled")
        raise typer.Exit(1)

    typer.echo(choice)


@app.command()
def config(
    set_: Annotated[
        list[str] | None, typer.Option("--set", "-s", help="Set a value: key=value")
    ] = None,
):
    """Show or change configuration."""
    cfg = _get_config()

    for pair in set_ or []:
        if "=" not in pair:
            console.print(f"[red]Error:[/red] Invalid setting '{pair}'. Use key=value")
            raise typer.Exit(1)
        key, value = pair.split("=", 1)
        key = key.strip()
        try:
            cfg.set(key, cfg.parse(key, value.strip()))
        except KeyError:
            console.print(f"[red]Error:[/red] Unknown setting '{key}'")
            raise typer.Exit(1)
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid value for '{key}': {value}")
            raise typer.Exit(1)

    out = Console()
    out.print(f"[dim]{cfg.config_file}[/dim]")
    for name in cfg.keys():
        value = getattr(cfg, name)
        if isinstance(value, bool):
            shown = "[green]on[/green]" if value else "[dim]off[/dim]"
        else:
            shown = escape(repr(value))
        out.print(f"  {name:<16} {shown}  [dim]{cfg.describe(name)}[/dim]")
