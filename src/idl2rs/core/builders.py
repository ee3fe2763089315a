"""Build the typed AST from an IDL parse tree.

Each builder checks the kind of the node it is handed, walks the node's
immediate children and dispatches on their kind. Kinds a builder has no use
for (tags, method attributes, explicit enum values, imports, stray doc
comments) fall through the wildcard arm. When several doc comment blocks
precede a declaration the last one wins. A node of the wrong kind means the
grammar and the builders disagree, which is a bug rather than an input error,
so it is asserted.
"""

import logging

from lark import Token, Tree

from idl2rs.core.nodes import NodeKind, expect_kind, leaf_text, node_kind, node_text
from idl2rs.core.types import resolve_type
from idl2rs.models import (
    Document,
    Interface,
    Method,
    Parameter,
    StructField,
    Type,
    TypedefEnum,
    TypedefStruct,
    Variant,
)

logger = logging.getLogger(__name__)


def _doc_comment(token: Token) -> str:
    return str(token).rstrip(" \t")


def build_parameter(node: Tree, source: str) -> Parameter:
    expect_kind(node, NodeKind.PARAMETER)

    name = ""
    type_ = Type()
    attributes: list[str] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.PARAMETER_ATTRIBUTE:
                attributes.append(node_text(child, source))
            case NodeKind.TYPE:
                type_ = resolve_type(child)
            case NodeKind.IDENTIFIER:
                name = node_text(child, source)
            case _:
                pass
    return Parameter(name=name, type=type_, attributes=tuple(attributes))


def build_method(node: Tree, source: str) -> Method:
    expect_kind(node, NodeKind.METHOD)

    name = ""
    doc_comment: str | None = None
    return_type = Type()
    parameters: list[Parameter] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.DOC_COMMENT:
                doc_comment = _doc_comment(child)
            case NodeKind.TYPE:
                return_type = resolve_type(child)
            case NodeKind.METHOD_NAME:
                name = leaf_text(child)
            case NodeKind.PARAMETER:
                parameters.append(build_parameter(child, source))
            case _:
                pass
    return Method(
        name=name,
        return_type=return_type,
        parameters=tuple(parameters),
        doc_comment=doc_comment,
    )


def build_variant(node: Tree, source: str) -> Variant:
    expect_kind(node, NodeKind.VARIANT)

    name = ""
    doc_comment: str | None = None
    for child in node.children:
        match node_kind(child):
            case NodeKind.DOC_COMMENT:
                doc_comment = _doc_comment(child)
            case NodeKind.IDENTIFIER:
                name = node_text(child, source)
            case _:
                pass
    return Variant(name=name, doc_comment=doc_comment)


def build_typedef_enum(node: Tree, source: str) -> TypedefEnum:
    expect_kind(node, NodeKind.TYPEDEF_ENUM)

    name = ""
    doc_comment: str | None = None
    variants: list[Variant] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.DOC_COMMENT:
                doc_comment = _doc_comment(child)
            case NodeKind.IDENTIFIER:
                name = node_text(child, source)
            case NodeKind.VARIANT:
                variants.append(build_variant(child, source))
            case _:
                pass
    return TypedefEnum(name=name, variants=tuple(variants), doc_comment=doc_comment)


def build_field(node: Tree, source: str) -> StructField:
    expect_kind(node, NodeKind.FIELD)

    name = ""
    doc_comment: str | None = None
    type_ = Type()
    for child in node.children:
        match node_kind(child):
            case NodeKind.DOC_COMMENT:
                doc_comment = _doc_comment(child)
            case NodeKind.TYPE:
                type_ = resolve_type(child)
            case NodeKind.IDENTIFIER:
                name = node_text(child, source)
            case _:
                pass
    return StructField(name=name, type=type_, doc_comment=doc_comment)


def build_typedef_struct(node: Tree, source: str) -> TypedefStruct:
    expect_kind(node, NodeKind.TYPEDEF_STRUCT)

    name = ""
    doc_comment: str | None = None
    fields: list[StructField] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.DOC_COMMENT:
                doc_comment = _doc_comment(child)
            case NodeKind.IDENTIFIER:
                name = node_text(child, source)
            case NodeKind.FIELD:
                fields.append(build_field(child, source))
            case _:
                pass
    return TypedefStruct(name=name, fields=tuple(fields), doc_comment=doc_comment)


def build_interface(node: Tree, source: str) -> Interface:
    expect_kind(node, NodeKind.INTERFACE)

    name = ""
    parent = ""
    uuid: str | None = None
    doc_comment: str | None = None
    attributes: list[str] = []
    methods: list[Method] = []
    enums: list[TypedefEnum] = []
    structs: list[TypedefStruct] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.DOC_COMMENT:
                doc_comment = _doc_comment(child)
            case NodeKind.UUID:
                uuid = leaf_text(child)
            case NodeKind.OTHER_ATTRIBUTE:
                attributes.append(node_text(child, source))
            case NodeKind.INTERFACE_NAME:
                name = leaf_text(child)
            case NodeKind.PARENT:
                parent = leaf_text(child)
            case NodeKind.METHOD:
                methods.append(build_method(child, source))
            case NodeKind.TYPEDEF_ENUM:
                enums.append(build_typedef_enum(child, source))
            case NodeKind.TYPEDEF_STRUCT:
                structs.append(build_typedef_struct(child, source))
            case _:
                pass

    logger.debug(
        "Built interface %s: %d method(s), %d enum(s), %d struct(s)",
        name,
        len(methods),
        len(enums),
        len(structs),
    )
    return Interface(
        name=name,
        parent=parent,
        uuid=uuid,
        attributes=tuple(attributes),
        methods=tuple(methods),
        enums=tuple(enums),
        structs=tuple(structs),
        doc_comment=doc_comment,
    )


def build_document(node: Tree, source: str) -> Document:
    expect_kind(node, NodeKind.DOCUMENT)

    interfaces: list[Interface] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.INTERFACE:
                interfaces.append(build_interface(child, source))
            case _:
                pass
    return Document(interfaces=tuple(interfaces))
