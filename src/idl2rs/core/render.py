"""Render the AST as Rust declarations for the ``com`` crate.

Every function writes to a text sink and returns nothing; write failures
propagate to the caller. The output depends on nothing but the AST, so
rendering the same document twice produces identical text.
"""

import io
import logging
from typing import TextIO

from idl2rs.core.casing import camel_to_snake
from idl2rs.models import (
    Document,
    Interface,
    Method,
    Modifier,
    Parameter,
    Type,
    TypedefEnum,
    TypedefStruct,
)

logger = logging.getLogger(__name__)

_INDENT = "    "


def format_type(type_: Type) -> str:
    # CONST modifiers are kept in the model but render nothing.
    pointers = "".join("*mut " for modifier in type_.modifiers if modifier is Modifier.POINTER)
    return f"{pointers}{type_.base_type}"


def render_type(type_: Type, out: TextIO) -> None:
    out.write(format_type(type_))


def render_parameter(parameter: Parameter, out: TextIO) -> None:
    if parameter.attributes:
        out.write(f"/* {', '.join(parameter.attributes)} */ ")
    out.write(f"{parameter.name}: ")
    render_type(parameter.type, out)


def render_method(method: Method, out: TextIO) -> None:
    out.write(method.doc_comment or "")
    out.write(f"{_INDENT}unsafe fn {camel_to_snake(method.name)}(&self")
    for parameter in method.parameters:
        out.write(", ")
        render_parameter(parameter, out)
    out.write(") -> ")
    render_type(method.return_type, out)
    out.write(";\n")


def render_enum(enum: TypedefEnum, out: TextIO) -> None:
    out.write(enum.doc_comment or "")
    out.write("#[repr(u32)]\n")
    out.write(f"pub enum {enum.name} {{\n")
    for variant in enum.variants:
        out.write(variant.doc_comment or "")
        out.write(f"{_INDENT}{variant.name},\n")
    out.write("}\n")


def render_struct(struct: TypedefStruct, out: TextIO) -> None:
    out.write(struct.doc_comment or "")
    out.write("#[repr(C)]\n")
    out.write(f"pub struct {struct.name} {{\n")
    for field in struct.fields:
        out.write(field.doc_comment or "")
        out.write(f"{_INDENT}{field.name}: ")
        render_type(field.type, out)
        out.write(",\n")
    out.write("}\n")


def render_interface(interface: Interface, out: TextIO) -> None:
    out.write(interface.doc_comment or "")
    if interface.uuid is not None:
        out.write(f'#[com_interface("{interface.uuid}")]\n')
    out.write(f"pub trait {interface.name}: {interface.parent} {{\n")
    for index, method in enumerate(interface.methods):
        if index:
            out.write("\n")
        render_method(method, out)
    out.write("}\n")

    # Nested typedefs become top-level items after the trait.
    for enum in interface.enums:
        out.write("\n")
        render_enum(enum, out)
    for struct in interface.structs:
        out.write("\n")
        render_struct(struct, out)


def render_document(document: Document, out: TextIO) -> None:
    for index, interface in enumerate(document.interfaces):
        if index:
            out.write("\n")
        render_interface(interface, out)
    logger.debug("Rendered %d interface(s)", len(document.interfaces))


def render_to_string(document: Document) -> str:
    buffer = io.StringIO()
    render_document(document, buffer)
    return buffer.getvalue()
