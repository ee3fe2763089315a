from lark import Tree

from idl2rs.core.nodes import NodeKind, expect_kind, node_kind
from idl2rs.models import Modifier, Type

PRIMITIVE_TYPES = {
    "int": "i32",
    "double": "f64",
}
VTABLE_SUFFIX = "VTable"


def resolve_base_type(identifier: str) -> tuple[str, bool]:
    """Map an IDL base identifier to its binding name.

    Returns ``(base_type, is_interface)``; interface references name the
    dispatch table of the interface and are always passed by pointer.
    """
    primitive = PRIMITIVE_TYPES.get(identifier.lower())
    if primitive is not None:
        return primitive, False
    if identifier.startswith("I"):
        return f"{identifier}{VTABLE_SUFFIX}", True
    return identifier, False


def resolve_type(node: Tree) -> Type:
    expect_kind(node, NodeKind.TYPE)

    base_type = ""
    modifiers: list[Modifier] = []
    for child in node.children:
        match node_kind(child):
            case NodeKind.IDENTIFIER:
                base_type, is_interface = resolve_base_type(str(child))
                if is_interface:
                    modifiers.append(Modifier.POINTER)
            case NodeKind.POINTER:
                modifiers.append(Modifier.POINTER)
            case NodeKind.CONST:
                modifiers.append(Modifier.CONST)
            case _:
                pass

    # The grammar yields qualifiers innermost first.
    modifiers.reverse()
    return Type(base_type=base_type, modifiers=tuple(modifiers))
