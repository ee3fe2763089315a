import logging
from enum import Enum
from typing import TextIO

from idl2rs.core.builders import build_document
from idl2rs.core.parser import parse_idl
from idl2rs.core.prologue import PROLOGUE
from idl2rs.core.render import render_document
from idl2rs.models import Document

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    RUST = "rust"
    AST_JSON = "ast-json"


def load_document(source: str) -> Document:
    """Parse IDL source and build its AST.

    Nothing is written anywhere, so a syntax error leaves every sink untouched.
    """
    tree = parse_idl(source)
    document = build_document(tree, source)
    logger.debug("Built document with %d interface(s)", len(document.interfaces))
    return document


def emit_document(
    document: Document,
    sink: TextIO,
    output_format: OutputFormat = OutputFormat.RUST,
    prologue: bool = True,
) -> None:
    if output_format is OutputFormat.AST_JSON:
        sink.write(document.model_dump_json(indent=2))
        sink.write("\n")
        return
    if prologue:
        sink.write(PROLOGUE)
    render_document(document, sink)


def compile_idl(
    source: str,
    sink: TextIO,
    output_format: OutputFormat = OutputFormat.RUST,
    prologue: bool = True,
) -> Document:
    """Compile IDL source into bindings written to ``sink``.

    Returns the built document.
    """
    document = load_document(source)
    emit_document(document, sink, output_format=output_format, prologue=prologue)
    return document
