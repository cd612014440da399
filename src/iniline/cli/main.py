import logging
import pathlib
from typing import Annotated, Optional

import typer

from .. import ini, reader, report
from ..exceptions import IniError

from .console import err_console

PROG = "iniline"

LOG_LEVELS = [
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]

_log = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.command()
def main(
    files: Annotated[
        Optional[list[pathlib.Path]],
        typer.Argument(metavar="FILE", show_default=False, help="INI file to parse"),
    ] = None,
    encoding: Annotated[
        Optional[str],
        typer.Option(
            "--encoding",
            "-e",
            envvar="INILINE_ENCODING",
            help="file encoding (detected if not given)",
        ),
    ] = None,
    max_line_length: Annotated[
        Optional[int],
        typer.Option(
            envvar="INILINE_MAX_LINE_LENGTH",
            min=1,
            help="fail on lines longer than this many characters",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, min=0, max=5, help="set logging level"
        ),
    ] = 0,
):
    """Print how each line of an INI file is classified."""

    if verbose == 0:
        logging.disable()
    else:
        logging.basicConfig(level=LOG_LEVELS[verbose - 1])

    # Exactly one file must be given.
    if not files or len(files) != 1:
        err_console.print(f"Usage: {PROG} <ini_file>")
        raise typer.Exit(1)

    path = files[0]
    settings = reader.ReaderSettings(encoding=encoding, max_line_length=max_line_length)

    count = 0

    try:
        for n, result in ini.iterparse(reader.read_lines(path, settings)):
            count = n

            if (text := report.describe(result)) is not None:
                # Printed without rich so tabs and control characters survive.
                typer.echo(text)
            else:
                _log.debug("%s:%d: nothing to report", path, n)

    except OSError as e:
        action = "opening" if count == 0 else "reading"
        err_console.print(f"Error {action} file: {e.strerror or e}")
        raise typer.Exit(1)

    except IniError as e:
        err_console.print(f"Error: {e}")
        raise typer.Exit(1)

    _log.info("parsed %d line(s) from %s", count, path)
