"""Closed error taxonomy for Sable.

Every failure raised by the reader, the evaluator or a primitive is a
SableError. The front ends catch SableError, report it, and carry on.
Each error keeps its structured fields as attributes so callers (and tests)
can inspect them without parsing the message.
"""

from __future__ import annotations

from sable import LispValue


def _show(value: LispValue) -> str:
    # Late import: the printer depends on the value types, which depend on us.
    from sable.printer import to_string
    return to_string(value)


class SableError(Exception):
    """Base class for all Sable errors"""


class UnboundVariable(SableError):
    """Raised when a name is looked up or assigned before it is defined"""

    def __init__(self, operation: str, name: str):
        self.operation = operation
        self.name = name
        super().__init__(f"{operation}: {name}")


class TypeMismatch(SableError):
    """Raised when a primitive cannot coerce an argument to the kind it needs"""

    def __init__(self, expected: str, value: LispValue):
        self.expected = expected
        self.value = value
        super().__init__(f"Invalid type: expected {expected}, found {_show(value)}")


class NumArgs(SableError):
    """Raised when a function receives the wrong number of arguments"""

    def __init__(self, expected: int, values: list[LispValue]):
        self.expected = expected
        self.values = list(values)
        found = " ".join(_show(v) for v in self.values)
        super().__init__(f"Expected {expected} args; found values {found}")


class BadSpecialForm(SableError):
    """Raised when a form has a shape the evaluator does not recognise"""

    def __init__(self, message: str, form: LispValue):
        self.message = message
        self.form = form
        super().__init__(f"{message}: {_show(form)}")


class NotFunction(SableError):
    """Raised when a non-callable value is applied"""

    def __init__(self, message: str, value: LispValue):
        self.message = message
        self.value = value
        super().__init__(f"{message}: {_show(value)}")


class EmptyBody(SableError):
    """Raised when a function (or a loaded file) has no forms to evaluate"""

    def __init__(self):
        super().__init__("Function has empty body")


class RecursionDepth(SableError):
    """Raised when evaluation nests deeper than the host stack allows"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum recursion depth exceeded ({limit} frames)")


class IoError(SableError):
    """Raised when a file cannot be opened, read or written"""

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(message if path is None else f"{message}: {path}")


class PortError(SableError):
    """Raised when a port handle is unknown, closed, or used in the wrong direction"""

    def __init__(self, message: str, port: LispValue):
        self.message = message
        self.port = port
        super().__init__(f"{message}: {_show(port)}")


# -------------------------------
# Reader errors
# -------------------------------
class ParseError(SableError):
    """Base class for reader errors; the evaluator never recovers from these"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Parse error at {detail}")


class NoMoreTokens(ParseError):
    """Input ended in the middle of a form"""

    def __init__(self):
        super().__init__("No more tokens")


class UnexpectedToken(ParseError):
    """A token appeared where no form can start"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unexpected token: {token}")


class ExpectedToken(ParseError):
    """A specific token was required but another one was found"""

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected token {expected}, found {found}")


class TokensLeft(ParseError):
    """A complete form was read but input remains"""

    def __init__(self, tokens: list[str]):
        self.tokens = list(tokens)
        super().__init__(f"Tokens left: {self.tokens!r}")
