"""Compile COM-style IDL interface definitions into Rust bindings."""

from idl2rs.core.compile import OutputFormat, compile_idl, emit_document, load_document
from idl2rs.errors import Idl2RsError, IdlSyntaxError

__all__ = [
    "Idl2RsError",
    "IdlSyntaxError",
    "OutputFormat",
    "compile_idl",
    "emit_document",
    "load_document",
]
