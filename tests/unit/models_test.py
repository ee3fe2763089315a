"""Unit tests for the AST models."""

import pytest
from pydantic import ValidationError

from idl2rs.models import Document, Interface, Method, Modifier, Parameter, Type


def test_defaults() -> None:
    method = Method(name="Run")
    assert method.return_type == Type()
    assert method.parameters == ()
    assert method.doc_comment is None

    interface = Interface(name="IA", parent="IUnknown")
    assert interface.uuid is None
    assert interface.attributes == ()
    assert (interface.methods, interface.enums, interface.structs) == ((), (), ())


def test_models_are_frozen() -> None:
    type_ = Type(base_type="i32")
    with pytest.raises(ValidationError):
        type_.base_type = "f64"  # type: ignore[misc]


def test_equal_models_hash_equally() -> None:
    first = Type(base_type="BYTE", modifiers=(Modifier.POINTER,))
    second = Type(base_type="BYTE", modifiers=(Modifier.POINTER,))
    assert first == second
    assert hash(first) == hash(second)


def test_modifiers_accept_enum_values() -> None:
    type_ = Type.model_validate({"base_type": "WCHAR", "modifiers": ["pointer", "const"]})
    assert type_.modifiers == (Modifier.POINTER, Modifier.CONST)


def test_model_dump() -> None:
    document = Document(
        interfaces=(
            Interface(
                name="IA",
                parent="IUnknown",
                methods=(Method(name="Get", parameters=(Parameter(name="out", attributes=("out",)),)),),
            ),
        )
    )
    dumped = document.model_dump(mode="json")
    parameter = dumped["interfaces"][0]["methods"][0]["parameters"][0]
    assert parameter == {"name": "out", "type": {"base_type": "", "modifiers": []}, "attributes": ["out"]}
