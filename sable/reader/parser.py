"""
  Sable Reader: Lexer and Parser

- Regex based lexer yielding (token_type, token_value) pairs
- Recursive-descent parser emitting plain Python values:

    - numbers      -> int
    - strings      -> str (escapes \\" \\\\ \\n \\t decoded)
    - #t / #f      -> bool
    - atoms        -> Symbol
    - lists        -> list
    - dotted lists -> DottedList
    - 'x           -> [Symbol("quote"), x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from sable import SExpression
from sable.errors import NoMoreTokens, UnexpectedToken, ExpectedToken, TokensLeft
from sable.types.symbol import Symbol
from sable.types.dotted_list import DottedList

QUOTE = Symbol("quote")
TRUE = "#t"
FALSE = "#f"

Token = tuple[str, str]

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<number>-?[0-9]+(?![^\s()'\";]))"  # integers, not the prefix of an atom
    r"|(?P<dot>\.(?![^\s()'\";]))"  # a lone dot
    r"|(?P<atom>[A-Za-z0-9!#$%&|*+\-/:<=>?@^_~.]+)"  # atoms
    r")",
    re.DOTALL,
)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unescape(body: str) -> str:
    return _ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(0)), body)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:].lstrip()
            if not rest:
                break
            raise UnexpectedToken(rest[0])
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def show_token(token: Optional[Token]) -> str:
    return "end of input" if token is None else token[1]


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise NoMoreTokens()
        return self.buffer.pop(0)

    def expect(self, kind: str, text: str) -> None:
        token = self.advance()
        if token[0] != kind:
            raise ExpectedToken(text, show_token(token))

    def remaining(self) -> list[str]:
        return [value for _, value in [*self.buffer, *self.tokens]]

    def parse_expr(self) -> SExpression:
        token = self.peek()
        if token is None:
            raise NoMoreTokens()
        tok_type, tok_val = token

        if tok_type == "atom":
            self.advance()
            if tok_val == TRUE:
                return True
            if tok_val == FALSE:
                return False
            return Symbol(tok_val)

        if tok_type == "number":
            self.advance()
            return int(tok_val)

        if tok_type == "string":
            self.advance()
            return _unescape(tok_val[1:-1])

        if tok_type == "quote":
            self.advance()
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            self.advance()
            return self.parse_list()

        raise UnexpectedToken(tok_val)

    def parse_list(self) -> SExpression:
        """Parse the rest of a list after its '(' : a proper list or a dotted list."""
        items: list[SExpression] = []
        while True:
            token = self.peek()
            if token is None:
                raise NoMoreTokens()
            if token[0] == "rparen":
                self.advance()
                return items
            if token[0] == "dot":
                if not items:
                    raise UnexpectedToken(token[1])
                self.advance()
                tail = self.parse_expr()
                self.expect("rparen", ")")
                return DottedList(items, tail)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Parse exactly one form from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    left = stream.remaining()
    if left:
        raise TokensLeft(left)
    return expr


def parse_all(source: str) -> list[SExpression]:
    """Parse every form in `source` (possibly none)."""
    return list(TokenStream(lex(source)).parse_all())
