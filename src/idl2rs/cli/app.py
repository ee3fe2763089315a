import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from idl2rs.core.compile import OutputFormat, emit_document, load_document
from idl2rs.errors import IdlSyntaxError

app = typer.Typer(
    name="idl2rs",
    help="Compile COM interface definitions into Rust bindings.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
err_console = Console(stderr=True)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _configure_logging(level: LogLevel) -> None:
    """Send package logs to stderr so they never mix with generated code."""
    logger = logging.getLogger("idl2rs")
    logger.handlers = [RichHandler(console=err_console, show_path=False)]
    logger.setLevel(level.value)
    logger.propagate = False


@app.command()
def generate(
    input_path: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            exists=True,
            dir_okay=False,
            readable=True,
            help="IDL file to compile. Reads standard input when omitted.",
        ),
    ] = None,
    output_path: Annotated[
        Path | None,
        typer.Option("--output", "-o", dir_okay=False, help="File to write. Writes standard output when omitted."),
    ] = None,
    prologue: Annotated[
        bool,
        typer.Option(envvar="IDL2RS_PROLOGUE", help="Emit the fixed imports and helper declarations first."),
    ] = True,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", case_sensitive=False, help="Emit Rust bindings or the built AST as JSON."),
    ] = OutputFormat.RUST,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log pipeline progress to stderr.")] = False,
    log_level: Annotated[
        LogLevel,
        typer.Option(envvar="IDL2RS_LOG_LEVEL", case_sensitive=False, help="Log level for stderr logging."),
    ] = LogLevel.WARNING,
) -> None:
    """Compile IDL read from a file or standard input into Rust COM bindings."""
    _configure_logging(LogLevel.DEBUG if verbose else log_level)

    source = input_path.read_text(encoding="utf-8") if input_path else sys.stdin.read()
    try:
        document = load_document(source)
    except IdlSyntaxError as exc:
        err_console.print(f"[red]Parsing error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    if output_path is None:
        emit_document(document, sys.stdout, output_format=output_format, prologue=prologue)
        sys.stdout.flush()
        return
    with output_path.open("w", encoding="utf-8") as sink:
        emit_document(document, sink, output_format=output_format, prologue=prologue)


def main() -> None:
    app()
