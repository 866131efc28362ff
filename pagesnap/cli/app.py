from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
import typer

from pagesnap.args import parse_args
from pagesnap.capture import capture
from pagesnap.cli.common import bail, verbose_callback
from pagesnap.config import Config, Engine, get_config
from pagesnap.console import console
from pagesnap.errors import CaptureError, UsageError
from pagesnap.filename import url_to_filename, utcnow

CAPTURE_FAILED = 2

app = typer.Typer(
    name="pagesnap",
    help="Save a png screenshot of a web page under a timestamped filename.",
    add_completion=False,
)


def usage(config: Config, cli_name: str = "pagesnap") -> str:
    """Construct the usage message shown when no url is given or a size is malformed."""
    return f"""
Usage:
  {cli_name} url [dimensions]

  Examples:

  {cli_name} https://www.google.com
  {cli_name} https://www.google.com/foo
  {cli_name} https://www.google.com 1280x960
  {cli_name} https://www.google.com fullpage

Takes a screen shot at the specified dimensions.
If no dimensions are specified, uses {config.default_width}x{config.default_height}
(the 'x' should be lowercase). If 'fullpage' is used instead of dimensions,
captures the entire page regardless of browser window size.

Generates a filename from the last part of the url with any '.'
characters replaced by dashes, then appends the date in your current
locale, followed by the UTC time in milliseconds since 1970.

Examples:

For this command line issued on April 27, 2020:

  {cli_name} https://www.google.com/foo 1280x960

The following filename would be generated:

  foo-2020-04-27-1588021576101.png

For this command line issued on April 27, 2020:

  {cli_name} https://www.google.com fullpage

The following filename would be generated:

  www-google-com-2020-04-27-1588021576101.png
"""


def version_callback(value: bool) -> None:
    """Callback function to print the version of the pagesnap package.

    Args:
        value (bool): Boolean value to determine if the version should be printed.

    Raises:
        typer.Exit: If the value is True, the version will be printed and the program will exit.
    """
    if value:
        from pagesnap.__about__ import __version__

        typer.echo(f"{__version__}")
        raise typer.Exit()


def show_config_callback(value: bool) -> None:
    if value:
        try:
            config = get_config()
        except ValidationError as e:
            bail(f"Invalid configuration: {e}", 1, err=True)
        config.console.print(config)
        raise typer.Exit()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="URL [WIDTHxHEIGHT|fullpage]",
        help="page to capture and an optional viewport size",
        show_default=False,
    ),
    engine: Optional[Engine] = typer.Option(
        None,
        help="browser automation library, defaults to the configured engine",
    ),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
    ),
    show_config: bool = typer.Option(
        None,
        "--show-config",
        callback=show_config_callback,
        is_eager=True,
        help="print the effective configuration",
    ),
) -> None:
    try:
        config = get_config()
    except ValidationError as e:
        bail(f"Invalid configuration: {e}", 1, err=True)

    try:
        request = parse_args(args or [], config)
    except UsageError as e:
        bail(f"\n{e.message}\n{usage(config)}", e.exit_code)
    console.log(request)

    try:
        result = capture(request, config, engine)
    except CaptureError as e:
        bail(str(e), CAPTURE_FAILED, err=True)

    filename = url_to_filename(request.url, utcnow())
    output = Path(filename)
    try:
        output.write_bytes(result.image)
    except OSError as e:
        bail(f"Failed to write {output}: {e}", CAPTURE_FAILED, err=True)
    console.log(f"wrote {output.resolve()}")

    typer.echo(f"{filename} {result.width}x{result.height}")


if __name__ == "__main__":
    app()
