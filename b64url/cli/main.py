"""b64url CLI - encode or decode base64url (unpadded) data."""
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from b64url import __version__
from b64url.core.config import DEFAULT_CHUNK_SIZE, CodecConfig
from b64url.core.exceptions import Base64UrlError
from b64url.core.logging import LogLevel, configure_logging, get_logger
from b64url.core.stream import execute

app = typer.Typer(
    name="b64url",
    help="Base64url encode or decode FILE, or standard input, to standard output.",
    add_completion=False,
    pretty_exceptions_enable=False,
)
console = Console()
err_console = Console(stderr=True)

logger = get_logger("cli")


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"b64url {__version__}", highlight=False)
        raise typer.Exit()


def fail(message: str):
    """Print a diagnostic on stderr and exit with status 1."""
    err_console.print(f"[red]b64url: {escape(message)}[/red]", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


@app.command()
def main(
    file: Optional[str] = typer.Argument(
        None,
        metavar="[FILE]",
        help="With no FILE, or when FILE is -, read standard input.",
        show_default=False,
    ),
    decode: bool = typer.Option(False, "--decode", "-d", help="Decode data."),
    strict: bool = typer.Option(
        False, "--strict", help="Reject non-zero unused bits in the last symbol when decoding."
    ),
    newline: bool = typer.Option(
        False, "--newline", "-n", help="Append a newline after encoded output."
    ),
    chunk_size: int = typer.Option(
        DEFAULT_CHUNK_SIZE,
        "--chunk-size",
        min=1,
        envvar="B64URL_CHUNK_SIZE",
        help="Bytes read per step.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """Base64url encode or decode FILE, or standard input, to standard output."""
    configure_logging(level=LogLevel.DEBUG if verbose else LogLevel.WARNING)

    config = CodecConfig(
        decode=decode,
        strict=strict,
        trailing_newline=newline and not decode,
        chunk_size=chunk_size,
    )
    logger.debug("Running with %s", config)

    stdin = typer.get_binary_stream("stdin")
    stdout = typer.get_binary_stream("stdout")

    try:
        execute(config, file, stdin=stdin, stdout=stdout)
    except Base64UrlError as e:
        fail(str(e))
    except BrokenPipeError:
        fail("broken pipe")
    except OSError as e:
        target = f"'{e.filename}'" if e.filename else "I/O"
        fail(f"{target}: {e.strerror or e}")


if __name__ == "__main__":
    app()
