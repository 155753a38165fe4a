import re

import pytest
from hypothesis import given, strategies as st

from codebake.errors import CodebakeSyntaxError
from codebake.printer import display
from codebake.reader.parser import lex, parse, read, read_all
from codebake.types.dish import Dish
from codebake.types.symbol import Symbol

QUOTE = Symbol("quote")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ('"hello world (x)"', [("string", '"hello world (x)"')]),
        ('d"hi there"', [("dish_string", 'd"hi there"')]),
        ("d[1, 2 3]", [("dish_bytes", "d[1, 2 3]")]),
        ("[1 2 3]", [("vector", "[1 2 3]")]),
        ("(f [7])", [("lparen", "("), ("atom", "f"), ("vector", "[7]"), ("rparen", ")")]),
        ("dish", [("atom", "dish")]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("(+ 1 -2.5)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "-2.5"), ("rparen", ")")]),
        ("((x))", [("lparen", "("), ("lparen", "("), ("atom", "x"), ("rparen", ")"), ("rparen", ")")]),
        ("   ", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("source", ['"abc', 'd"abc', "d[1 2", "[1 2", "(a ]", "]"])
def test_lexer_rejects_unterminated_forms(source):
    with pytest.raises(CodebakeSyntaxError):
        list(lex(source))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("true", True),
        ("false", False),
        ("12", 12.0),
        ("-3.5", -3.5),
        ("300.14159", 300.14159),
        ('"hi"', "hi"),
        ('"this is a\tlong string\nmany spaces"', "this is a\tlong string\nmany spaces"),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("empty?", Symbol("empty?")),
        ("truely", Symbol("truely")),
    ],
)
def test_parse_atoms(source, expected):
    result = read(source)
    assert type(result) is type(expected)
    assert result == expected


def test_numbers_are_floats():
    assert isinstance(read("7"), float)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("'a", [QUOTE, Symbol("a")]),
        ("'(1 2 3)", [QUOTE, [1.0, 2.0, 3.0]]),
        ("(a 'b)", [Symbol("a"), [QUOTE, Symbol("b")]]),
        ("''a", [QUOTE, [QUOTE, Symbol("a")]]),
        ("(f '(g 'x))", [Symbol("f"), [QUOTE, [Symbol("g"), [QUOTE, Symbol("x")]]]]),
        ("'()", [QUOTE, []]),
    ],
)
def test_quote_shorthand_at_any_depth(source, expected):
    assert read(source) == expected


def test_nested_lists():
    assert read("((a b) (c d))") == [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]


def test_dish_string_literal():
    d = read('d"hello world"')
    assert isinstance(d, Dish)
    assert d.is_success
    assert d.data.value == "hello world"


def test_dish_byte_literal():
    d = read("d[24 25 26]")
    assert d.data.value == bytes([24, 25, 26])
    assert read("d[1,2, 3]").data.value == bytes([1, 2, 3])
    assert read("d[]").data.value == b""


def test_vector_literal_is_a_list_of_numbers():
    assert read("[1 2 3]") == [1.0, 2.0, 3.0]
    assert read("[0, 255]") == [0.0, 255.0]
    assert read("[]") == []
    assert read("'[4 5]") == [QUOTE, [4.0, 5.0]]


def test_quoted_vector_evaluates_to_its_numbers(interp):
    assert interp.parse_eval("'[1 2 3]") == [1.0, 2.0, 3.0]
    assert interp.parse_eval("(first '[9 8])") == 9.0


def test_dish_literal_inside_list():
    expr = read('(reverse d"abc")')
    assert expr[0] == Symbol("reverse")
    assert isinstance(expr[1], Dish)


@pytest.mark.parametrize(
    "source, message",
    [
        ("(a b", "unclosed parenthesis"),
        ("(a (b c)", "unclosed parenthesis"),
        (")", "unexpected ')'"),
        ("(a) b", "unexpected input"),
        ("", "unexpected end of input"),
        ("1abc", "invalid number"),
        ("d[256]", "invalid byte"),
        ("d[1 x]", "invalid byte"),
        ("d[²]", "invalid byte"),
        ("[256]", "invalid byte '256' in vector literal"),
        ("[1 -2]", "invalid byte"),
        ("'", "expected expression after quote"),
    ],
)
def test_parse_errors(source, message):
    with pytest.raises(CodebakeSyntaxError, match=re.escape(message)):
        read(source)


def test_parse_returns_remaining_tokens():
    expr, rest = parse(lex("a b)"))
    assert expr == Symbol("a")
    assert rest == [("atom", "b"), ("rparen", ")")]


def test_read_all_yields_every_form():
    forms = list(read_all("(def a 1) a ; trailing comment"))
    assert forms == [[Symbol("def"), Symbol("a"), 1.0], Symbol("a")]


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_integer_round_trip(n):
    parsed = read(str(n))
    assert parsed == float(n)
    assert display(parsed) == str(n)


@given(st.lists(st.integers(min_value=0, max_value=999), max_size=10))
def test_list_round_trip(xs):
    source = "(" + " ".join(str(x) for x in xs) + ")"
    assert display(read(source)) == source


@given(st.text(alphabet=st.characters(exclude_characters='"', exclude_categories=("Cs",))))
def test_string_round_trip(s):
    source = f'"{s}"'
    assert read(source) == s
    assert display(read(source), readable=True) == source


@given(st.from_regex(r"[a-z][a-z0-9?!*-]{0,10}", fullmatch=True).filter(lambda s: s not in ("true", "false")))
def test_symbol_round_trip(name):
    assert read(name) == Symbol(name)
    assert display(read(name)) == name
