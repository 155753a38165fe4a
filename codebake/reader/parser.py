"""
  codebake Reader, Lexer and Parser

- Regex driven lexer yielding (token_type, token_value) pairs
- Recursive parser emitting plain Python values:

    - symbols -> Symbol
    - numbers -> float
    - true/false -> bool
    - strings -> str
    - lists -> Python list
    - 'x -> [Symbol("quote"), x]
    - [1 2 3] -> [1.0, 2.0, 3.0], each value a byte 0..255
    - d"text" / d[1 2 3] -> Dish (already successful, never re-evaluated)
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from codebake import SExpression
from codebake.errors import CodebakeSyntaxError
from codebake.types.dish import Dish
from codebake.types.symbol import Symbol

Token = tuple[str, str]

QUOTE = Symbol("quote")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # 'x shorthand
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r'|(?P<dish_string>d"[^"]*")'  # d"payload"
    r"|(?P<dish_bytes>d\[[^\]]*\])"  # d[1 2 3]
    r"|(?P<vector>\[[^\]]*\])"  # [1 2 3]
    r'|(?P<string>"[^"]*")'
    r"|(?P<atom>(?!d[\"\[])[^\s()\[\]'\";]+)"  # symbols, numbers, booleans
)
SPACE_RE = re.compile(r"\s*")
NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")
BYTE_SEP_RE = re.compile(r"[\s,]+")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = SPACE_RE.match(source, 0).end()
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            if source.startswith('d"', pos):
                raise CodebakeSyntaxError("unterminated dish literal")
            if source.startswith("d[", pos):
                raise CodebakeSyntaxError("unterminated byte literal, expected ']'")
            if source[pos] == "[":
                raise CodebakeSyntaxError("unterminated vector literal, expected ']'")
            if source[pos] == '"':
                raise CodebakeSyntaxError("unterminated string, expected '\"'")
            raise CodebakeSyntaxError(f"unexpected character {source[pos]!r} at {pos}")
        pos = SPACE_RE.match(source, m.end()).end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group()


def _parse_bytes(inner: str, what: str = "dish literal") -> bytes:
    """Byte values 0..255 separated by whitespace or commas."""
    inner = inner.strip()
    if not inner:
        return b""
    out = bytearray()
    for item in BYTE_SEP_RE.split(inner):
        if not (item.isascii() and item.isdigit()) or int(item) > 255:
            raise CodebakeSyntaxError(f"invalid byte '{item}' in {what}")
        out.append(int(item))
    return bytes(out)


def parse_atom(token: str) -> SExpression:
    """Classify a bare token as bool, number or symbol."""
    if token == "true":
        return True
    if token == "false":
        return False
    if NUMBER_RE.fullmatch(token):
        return float(token)
    if token[0].isdigit():
        raise CodebakeSyntaxError(f"invalid number '{token}'")
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def remaining(self) -> list[Token]:
        rest = self.buffer + list(self.tokens)
        self.buffer = []
        return rest

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise CodebakeSyntaxError("unexpected end of input")

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise CodebakeSyntaxError("unclosed parenthesis")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise CodebakeSyntaxError("unexpected ')'")

        # 'x at any depth
        if tok_type == "quote":
            if self.at_end():
                raise CodebakeSyntaxError("expected expression after quote")
            return [QUOTE, self.parse_expr()]

        if tok_type == "string":
            return tok_val[1:-1]

        if tok_type == "dish_string":
            return Dish.from_string(tok_val[2:-1])

        if tok_type == "dish_bytes":
            return Dish.from_bytes(_parse_bytes(tok_val[2:-1]))

        if tok_type == "vector":
            return [float(b) for b in _parse_bytes(tok_val[1:-1], "vector literal")]

        if tok_type == "atom":
            return parse_atom(tok_val)

        raise CodebakeSyntaxError(f"unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> tuple[SExpression, list[Token]]:
    """Parse one expression; return it with the tokens left unconsumed."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def read(source: str) -> SExpression:
    """Parse exactly one top-level expression from `source`."""
    expr, rest = parse(lex(source))
    if rest:
        raise CodebakeSyntaxError(f"unexpected input after expression: {rest[0][1]!r}")
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level expression in `source`."""
    return TokenStream(lex(source)).parse_all()
