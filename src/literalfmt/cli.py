import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any

import srsly
import typer
from pydantic import ValidationError

from literalfmt.batch import LiteralRequest, render_rows
from literalfmt.core.int_widths import SUPPORTED_WIDTHS
from literalfmt.formatter import LiteralFormatter
from literalfmt.models import FormatterConfig, IntegerFormat

app = typer.Typer(help="Render values as Java source literals.")
logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class _RowError(Exception):
    def __init__(self, *, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(reason)


def _parse_width(value: int) -> int:
    if value not in SUPPORTED_WIDTHS:
        raise typer.BadParameter(
            f"Invalid width {value}: expected one of "
            + ", ".join(str(w) for w in SUPPORTED_WIDTHS)
        )
    return value


def _iter_validated_requests(input_file: Path) -> Iterator[LiteralRequest]:
    with input_file.open("r", encoding="utf-8") as input_handle:
        for line_number, line in enumerate(input_handle, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            try:
                raw = srsly.json_loads(stripped)
            except ValueError as err:
                raise _RowError(
                    line_number=line_number,
                    reason=f"malformed JSON ({err})",
                ) from err
            try:
                yield LiteralRequest.model_validate(raw)
            except ValidationError as err:
                first_error = err.errors(include_url=False)[0]
                loc = ".".join(str(item) for item in first_error["loc"])
                message = first_error["msg"]
                where = f" at '{loc}'" if loc else ""
                raise _RowError(
                    line_number=line_number,
                    reason=f"invalid literal row{where}: {message}",
                ) from err


def _render_row_error(input_file: Path, error: _RowError) -> str:
    return (
        f"Error: invalid JSONL row in {input_file} at line "
        f"{error.line_number}: {error.reason}"
    )


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = "WARNING",
) -> None:
    """Render values as Java source literals."""
    level = log_level.strip().upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"Invalid log level '{log_level}'", param_hint="--log-level"
        )
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def string(
    text: Annotated[str, typer.Argument(help="Text to quote")],
    escape_unicode: Annotated[
        bool,
        typer.Option("--escape-unicode", help="Escape all non-ASCII chars"),
    ] = False,
) -> None:
    """Render TEXT as a string literal."""
    formatter = LiteralFormatter(
        FormatterConfig(escape_unicode=escape_unicode)
    )
    typer.echo(formatter.string_literal(text))


@app.command()
def char(
    ch: Annotated[str, typer.Argument(help="A single character")],
    cast: Annotated[
        bool, typer.Option("--cast", help="Prefix int codes with (char)")
    ] = False,
    escape_unicode: Annotated[
        bool,
        typer.Option("--escape-unicode", help="Escape all non-ASCII chars"),
    ] = False,
) -> None:
    """Render CH as a char literal."""
    if len(ch) != 1:
        raise typer.BadParameter(
            f"Invalid char '{ch}': expected exactly one character"
        )
    formatter = LiteralFormatter(
        FormatterConfig(escape_unicode=escape_unicode)
    )
    try:
        literal = formatter.char_literal(ch, cast)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="CH") from err
    typer.echo(literal)


@app.command()
def integer(
    value: Annotated[int, typer.Argument(help="Signed integer value")],
    width: Annotated[
        int,
        typer.Option(
            "--width",
            help="Width in bytes: 1, 2, 4 or 8",
            callback=_parse_width,
        ),
    ] = 4,
    integer_format: Annotated[
        IntegerFormat,
        typer.Option("--format", help="auto, decimal or hexadecimal"),
    ] = IntegerFormat.AUTO,
    cast: Annotated[
        bool, typer.Option("--cast", help="Force an explicit cast")
    ] = False,
) -> None:
    """Render VALUE as an integer literal of the given width."""
    formatter = LiteralFormatter(
        FormatterConfig(integer_format=integer_format)
    )
    try:
        literal = formatter.format_integer(value, width, cast)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="VALUE") from err
    typer.echo(literal)


@app.command()
def double(
    value: Annotated[float, typer.Argument(help="Number, nan, inf or -inf")],
) -> None:
    """Render VALUE as a double literal."""
    typer.echo(LiteralFormatter().format_double(value))


@app.command(name="float")
def float_(
    value: Annotated[float, typer.Argument(help="Number, nan, inf or -inf")],
) -> None:
    """Render VALUE as a float literal."""
    typer.echo(LiteralFormatter().format_float(value))


@app.command()
def batch(
    input_file: Annotated[Path, typer.Argument(help="Input JSONL file")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output JSONL (default: stdout)"),
    ] = None,
    integer_format: Annotated[
        IntegerFormat,
        typer.Option("--format", help="auto, decimal or hexadecimal"),
    ] = IntegerFormat.AUTO,
    escape_unicode: Annotated[
        bool,
        typer.Option("--escape-unicode", help="Escape all non-ASCII chars"),
    ] = False,
) -> None:
    """Render every literal request in a JSONL file."""
    formatter = LiteralFormatter(
        FormatterConfig(
            escape_unicode=escape_unicode, integer_format=integer_format
        )
    )
    try:
        rows: list[dict[str, Any]] = list(
            render_rows(formatter, _iter_validated_requests(input_file))
        )
    except _RowError as err:
        typer.echo(_render_row_error(input_file, err), err=True)
        raise typer.Exit(1) from err
    except ValueError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    if output is None:
        for row in rows:
            typer.echo(srsly.json_dumps(row))
    else:
        srsly.write_jsonl(str(output), rows)
        typer.echo(f"Wrote {len(rows)} literals to {output}", err=True)
    logger.info("rendered %d literals from %s", len(rows), input_file)
