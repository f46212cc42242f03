"""CLI for utf8-toolkit."""

import click
from dotenv import load_dotenv

from .utf8.errors import Utf8Error

load_dotenv()

DEFAULT_MARKER_TEXT = "…"


def _run(operation, *args):
    """Call a library operation, reporting its errors the click way."""
    try:
        return operation(*args)
    except Utf8Error as e:
        raise click.ClickException(str(e)) from e


input_argument = click.argument("input_file", metavar="INPUT", type=click.File("rb"), default="-")
marker_option = click.option(
    "--marker",
    envvar="UTF8_TOOLKIT_MARKER",
    default=DEFAULT_MARKER_TEXT,
    show_default=True,
    help="Appended when the text is cut (env: UTF8_TOOLKIT_MARKER)",
)


@click.group()
@click.version_option(package_name="utf8-toolkit")
def cli():
    """utf8-toolkit - Validate, repair, split and shorten UTF-8 text."""
    pass


@cli.command()
@input_argument
@click.pass_context
def check(ctx, input_file):
    """Report whether INPUT is valid UTF-8 (exit code 1 if not)."""
    from .utf8.is_valid_utf8 import is_valid_utf8

    if is_valid_utf8(input_file.read()):
        click.echo("valid")
    else:
        click.echo("invalid")
        ctx.exit(1)


@cli.command()
@input_argument
def fix(input_file):
    """Replace invalid UTF-8 in INPUT with U+FFFD."""
    from .utf8.to_valid_utf8 import to_valid_utf8

    click.echo(to_valid_utf8(input_file.read()), nl=False)


@cli.command()
@input_argument
def length(input_file):
    """Print the character length of INPUT."""
    from .utf8.char_length import char_length

    click.echo(_run(char_length, input_file.read()))


@cli.command()
@input_argument
def split(input_file):
    """Print each character of INPUT as hex bytes, one per line."""
    from .utf8.split_codepoints import split_codepoints

    for char in _run(split_codepoints, input_file.read()):
        click.echo(char.hex(" "))


@cli.command()
@input_argument
@click.option("--max-length", type=click.IntRange(min=1), required=True, help="Maximum characters in the result")
@marker_option
def shorten(input_file, max_length, marker):
    """Shorten INPUT to --max-length characters at a word or sentence break."""
    from .utf8.shorten import shorten as shorten_bytes

    result = _run(shorten_bytes, input_file.read(), max_length, marker.encode("utf-8"))
    click.echo(result, nl=False)


@cli.command()
@input_argument
@click.option("--max-bytes", type=click.IntRange(min=1), required=True, help="Maximum bytes in the result")
@click.option("--marker", default="", help="Appended when the text is cut")
def truncate(input_file, max_bytes, marker):
    """Truncate INPUT to --max-bytes bytes without splitting a character."""
    from .utf8.truncate_bytes import truncate_bytes

    result = _run(truncate_bytes, input_file.read(), max_bytes, marker.encode("utf-8"))
    click.echo(result, nl=False)


if __name__ == "__main__":
    cli()
