"""Exceptions raised by the IDL compiler."""

from __future__ import annotations

from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken


class Idl2RsError(Exception):
    """Base class for idl2rs errors."""


class IdlSyntaxError(Idl2RsError):
    """Raised when the IDL source does not match the grammar.

    ``line`` and ``column`` are 1-based; both are ``None`` when the parser
    could not attribute the failure to a position.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        context: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.context = context

    def __str__(self) -> str:
        location = f"line {self.line}, column {self.column}: " if self.line is not None else ""
        text = f"{location}{self.message}"
        if self.context:
            text = f"{text}\n\n{self.context.rstrip()}"
        return text

    @classmethod
    def from_lark(cls, err: UnexpectedInput, source: str) -> IdlSyntaxError:
        if isinstance(err, UnexpectedToken):
            if err.token.type == "$END":
                message = "unexpected end of input"
            else:
                message = f"unexpected token {err.token.value!r}"
            expected = sorted(err.expected or ())
        elif isinstance(err, UnexpectedCharacters):
            message = f"unexpected character {err.char!r}"
            expected = sorted(err.allowed or ())
        else:
            message = "unexpected end of input"
            expected = sorted(getattr(err, "expected", None) or ())
        if expected:
            message = f"{message}, expected one of: {', '.join(expected)}"

        line = getattr(err, "line", None)
        column = getattr(err, "column", None)
        if line is None or line < 1:
            line, column = None, None

        pos = getattr(err, "pos_in_stream", None)
        context = err.get_context(source) if pos is not None and pos >= 0 else ""
        return cls(message, line=line, column=column, context=context)
