"""Node kinds of the IDL parse tree.

The grammar in ``grammars/idl.lark`` produces lark ``Tree`` nodes for rules
and ``Token`` leaves for named terminals. ``NodeKind`` enumerates every kind
that can appear in a parse tree, so builders can match exhaustively and treat
anything they do not consume as an explicit wildcard.
"""

from enum import Enum

from lark import Token, Tree

ParseNode = Tree | Token


class NodeKind(str, Enum):
    # rules
    DOCUMENT = "document"
    IMPORT_STATEMENT = "import_statement"
    FORWARD_DECLARATION = "forward_declaration"
    CPP_QUOTE = "cpp_quote"
    STRAY_DOC_COMMENT = "stray_doc_comment"
    INTERFACE = "interface"
    UUID = "uuid"
    OTHER_ATTRIBUTE = "other_attribute"
    INTERFACE_NAME = "interface_name"
    PARENT = "parent"
    METHOD = "method"
    METHOD_ATTRIBUTES = "method_attributes"
    METHOD_NAME = "method_name"
    PARAMETER = "parameter"
    PARAMETER_ATTRIBUTE = "parameter_attribute"
    TYPE = "type"
    TYPEDEF_ENUM = "typedef_enum"
    VARIANT = "variant"
    VARIANT_VALUE = "variant_value"
    TYPEDEF_STRUCT = "typedef_struct"
    FIELD = "field"
    TAG = "tag"
    # terminals
    DOC_COMMENT = "DOC_COMMENT"
    IDENTIFIER = "IDENTIFIER"
    POINTER = "POINTER"
    CONST = "CONST"
    GUID = "GUID"
    NUMBER = "NUMBER"
    STRING = "STRING"
    VALUE_OPERATOR = "VALUE_OPERATOR"


_KNOWN_KINDS = frozenset(kind.value for kind in NodeKind)


def node_kind(node: ParseNode) -> NodeKind:
    raw = node.type if isinstance(node, Token) else node.data
    assert raw in _KNOWN_KINDS, f"parse tree contains unknown node kind {raw!r}"
    return NodeKind(raw)


def expect_kind(node: ParseNode, kind: NodeKind) -> None:
    actual = node_kind(node)
    assert actual is kind, f"expected a {kind.value} node, got {actual.value}"


def node_text(node: ParseNode, source: str) -> str:
    """Return the source text a node spans.

    Rule nodes are sliced out of ``source`` by their propagated positions,
    which keeps whatever spacing the author used inside the span.
    """
    if isinstance(node, Token):
        return str(node)
    return source[node.meta.start_pos : node.meta.end_pos]


def leaf_text(node: Tree) -> str:
    """Return the text of the single token wrapped by a rule such as ``method_name``."""
    tokens = [child for child in node.children if isinstance(child, Token)]
    assert len(tokens) == 1, f"{node.data} node should wrap exactly one token"
    return str(tokens[0])
