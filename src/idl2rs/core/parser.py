import logging
from functools import cache
from pathlib import Path

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from idl2rs.errors import IdlSyntaxError

logger = logging.getLogger(__name__)


def _load_grammar(name: str = "idl") -> str:
    grammars_dir = Path(__file__).parent.parent / "grammars"
    grammar_path = grammars_dir / f"{name}.lark"
    if not grammar_path.exists():
        raise FileNotFoundError(f"Grammar file not found: {grammar_path}")
    return grammar_path.read_text(encoding="utf-8")


@cache
def get_parser() -> Lark:
    return Lark(
        _load_grammar(),
        start="document",
        parser="lalr",
        lexer="contextual",
        propagate_positions=True,
        maybe_placeholders=False,
    )


def parse_idl(source: str) -> Tree:
    """Parse IDL source text into a tree rooted at a ``document`` node.

    Raises ``IdlSyntaxError`` when the source does not match the grammar.
    """
    try:
        tree = get_parser().parse(source)
    except UnexpectedInput as err:
        raise IdlSyntaxError.from_lark(err, source) from err
    logger.debug("Parsed %d characters of IDL into %d top-level node(s)", len(source), len(tree.children))
    return tree
