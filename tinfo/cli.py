from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from tinfo.config import load_config
from tinfo.directory import build_directory, filter_directory
from tinfo.dispatch import attach, relocate, render_json, render_listing, render_tree
from tinfo.errors import TinfoError

app = typer.Typer(add_completion=False)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    ctx: typer.Context,
    term: Annotated[Optional[str], typer.Argument(help="Only show windows whose name contains TERM")] = None,
    get: Annotated[bool, typer.Option("--get", "-G", help="Bring matched window here")] = False,
    attach_flag: Annotated[bool, typer.Option("--attach", "-a", help="Attach to matched session")] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    tree: Annotated[bool, typer.Option("--tree", help="Show as session/window tree")] = False,
    config: Annotated[Optional[Path], typer.Option("--config", help="Path to config file")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log tmux commands to stderr")] = False,
) -> None:
    """List tmux sessions and windows, or grab or attach the one matching TERM."""
    if get and attach_flag:
        typer.echo("--get and --attach are mutually exclusive.", err=True)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(name)s: %(message)s",
    )

    try:
        tmux_command = load_config(config)["tmux_command"]
        directory = build_directory(tmux_command)
        if term is not None:
            directory = filter_directory(directory, term)

        if get:
            relocate(directory, tmux_command)
        elif attach_flag:
            attach(directory, tmux_command)
        elif json_output:
            typer.echo(render_json(directory))
        elif tree:
            console = Console(stderr=True)
            console.print(render_tree(directory))
        else:
            listing = render_listing(directory)
            if listing:
                typer.echo(listing)
    except (TinfoError, json.JSONDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
