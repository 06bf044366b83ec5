import os
import sys
from typing import Optional

import click
from rich.console import Console

from .browser import PathPickerApp
from .debug import configure_logging, get_logger
from .version import __version__


@click.command()
@click.argument(
    'start_dir',
    required=False,
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.option(
    '--sort',
    is_flag=True,
    default=False,
    help="List directories first, then names case-insensitively (default: OS order).",
    show_default=True,
)
@click.option(
    '--debug',
    is_flag=True,
    default=False,
    help='Enable verbose debug logging to dirpick_debug.log',
    show_default=True,
)
@click.version_option(__version__, prog_name="dirpick")
def main(start_dir: Optional[str], sort: bool, debug: bool):
    """
    Browse directories and print the chosen one, e.g. cd "$(dirpick)".
    """
    # The UI and any messages go to stderr; stdout only ever carries the result.
    console = Console(stderr=True)
    log_file = configure_logging(debug=True if debug else None)
    if debug and log_file:
        console.print(f"[dim]Debug logging enabled -> {log_file}[/dim]")
    log = get_logger("main")

    start_path = start_dir or os.getcwd()
    log.debug("start: path=%s sort=%s", start_path, sort)

    try:
        app = PathPickerApp(start_path=start_path, sort=sort)
        result = app.run()
    except Exception as e:
        log.exception("app failed")
        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        sys.exit(1)

    log.debug("done: result=%s", result)
    if result:
        click.echo(result)


if __name__ == "__main__":
    main()
