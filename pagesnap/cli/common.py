from typing import NoReturn, Optional

import typer

from pagesnap.console import console


def verbose_callback(value: bool) -> None:
    if value:
        console.quiet = False


def bail(message: Optional[str] = None, code: int = 0, err: bool = False) -> NoReturn:
    """Print `message` if there is one and exit with `code`."""
    if message:
        typer.echo(message, err=err)
    raise typer.Exit(code)
