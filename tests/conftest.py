"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from lark import Tree

from idl2rs.core.builders import build_document
from idl2rs.core.parser import parse_idl
from idl2rs.models import Document

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Sample IDL sources
# ---------------------------------------------------------------------------

MINIMAL_IDL = """\
[uuid(0c733a30-2a1c-11ce-ade5-00aa0044773d)]
interface IGreeter : IUnknown {
    HRESULT SayHello();
}
"""

CALCULATOR_IDL = """\
import "objidl.idl";

interface ICalculatorCallback;

/// A simple calculator.
[uuid(4e8a3389-c9d8-4bd2-b6b5-124fee6cc14d), object, pointer_default(unique)]
interface ICalculator : IUnknown {
    /// Adds two numbers.
    HRESULT Add([in] int a, [in] int b, [out, retval] int* result);

    // Not a doc comment.
    [propget] HRESULT get_Count([out, retval] UINT32* count);

    /// Rounding modes.
    typedef enum ROUNDING_MODE {
        /// Round toward zero.
        ROUNDING_MODE_TRUNCATE,
        ROUNDING_MODE_NEAREST = 0x1,
    } ROUNDING_MODE;

    HRESULT SetCallback([in] ICalculatorCallback* callback);

    typedef struct CALC_RESULT {
        /// The computed value.
        double Value;
        ICalculator* Source;
    } CALC_RESULT;
}
"""

CALCULATOR_RUST = """\
/// A simple calculator.
#[com_interface("4e8a3389-c9d8-4bd2-b6b5-124fee6cc14d")]
pub trait ICalculator: IUnknown {
    /// Adds two numbers.
    unsafe fn add(&self, /* in */ a: i32, /* in */ b: i32, /* out, retval */ result: *mut i32) -> HRESULT;

    unsafe fn get_count(&self, /* out, retval */ count: *mut UINT32) -> HRESULT;

    unsafe fn set_callback(&self, /* in */ callback: *mut *mut ICalculatorCallbackVTable) -> HRESULT;
}

    /// Rounding modes.
#[repr(u32)]
pub enum ROUNDING_MODE {
        /// Round toward zero.
    ROUNDING_MODE_TRUNCATE,
    ROUNDING_MODE_NEAREST,
}

#[repr(C)]
pub struct CALC_RESULT {
        /// The computed value.
    Value: f64,
    Source: *mut *mut ICalculatorVTable,
}
"""

UNTERMINATED_IDL = """\
interface IBroken : IUnknown {
    HRESULT Start();
"""


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def grammars_dir() -> Path:
    """Return the path to the grammars directory."""
    return _REPO_ROOT / "src" / "idl2rs" / "grammars"


@pytest.fixture
def calculator_tree() -> Tree:
    """Return the parse tree of the calculator sample."""
    return parse_idl(CALCULATOR_IDL)


@pytest.fixture
def calculator_document(calculator_tree: Tree) -> Document:
    """Return the AST built from the calculator sample."""
    return build_document(calculator_tree, CALCULATOR_IDL)


@pytest.fixture
def minimal_idl() -> str:
    return MINIMAL_IDL


@pytest.fixture
def calculator_idl() -> str:
    return CALCULATOR_IDL


@pytest.fixture
def calculator_rust() -> str:
    """Expected bindings for the calculator sample, without the prologue."""
    return CALCULATOR_RUST


@pytest.fixture
def unterminated_idl() -> str:
    return UNTERMINATED_IDL
