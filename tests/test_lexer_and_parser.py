import pytest
from hypothesis import given, strategies as st

from lang1.errors import (
    EmptyInput,
    Lang1SyntaxError,
    TrailingInput,
    UnmatchedCloseParen,
    UnmatchedOpenParen,
    UnterminatedString,
)
from lang1.printer import format_value
from lang1.reader.parser import TokenStream, parse
from lang1.reader.tokenizer import classify_atom, next_token
from lang1.types.quoted_string import QuotedString
from lang1.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("  (a", (("lparen", "("), "a")),
        (")x", (("rparen", ")"), "x")),
        ('"hi there" rest', (("string", "hi there"), " rest")),
        ('""', (("string", ""), "")),
        ("42)", (("int", 42), ")")),
        ("-7 x", (("int", -7), " x")),
        ("+5", (("int", 5), "")),
        ("3.5", (("float", 3.5), "")),
        (".5", (("float", 0.5), "")),
        ("1.", (("float", 1.0), "")),
        ("1e3", (("float", 1000.0), "")),
        ("-2.5E-1", (("float", -0.25), "")),
        ("9223372036854775808", (("float", 9223372036854775808.0), "")),
        ("abc(d", (("symbol", Symbol("abc")), "(d")),
        ('foo"bar"', (("symbol", Symbol("foo")), '"bar"')),
        ("+", (("symbol", Symbol("+")), "")),
        ("1_000", (("symbol", Symbol("1_000")), "")),
        ("inf", (("symbol", Symbol("inf")), "")),
        ("nan", (("symbol", Symbol("nan")), "")),
        ("0x10", (("symbol", Symbol("0x10")), "")),
        ("1e400", (("symbol", Symbol("1e400")), "")),
        ("   \n\t", (None, "")),
        ("", (None, "")),
    ],
)
def test_next_token(source, expected):
    tok, rest = next_token(source)
    assert (tok, rest) == expected
    if tok is not None:
        # 42 == 42.0 in Python; the token kind must match exactly
        assert type(tok[1]) is type(expected[0][1]) or tok[0] in ("symbol", "string")


def test_string_token_is_quoted_string():
    tok, _ = next_token('"a b"')
    assert isinstance(tok[1], QuotedString)


def test_unterminated_string_consumes_nothing():
    with pytest.raises(UnterminatedString) as info:
        next_token('   "abc def')
    assert info.value.remainder == '"abc def'


def test_integer_preferred_over_float():
    assert classify_atom("10") == ("int", 10)
    assert isinstance(classify_atom("10")[1], int)
    assert isinstance(classify_atom("10.0")[1], float)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("foo", Symbol("foo")),
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(a (b c) ())", [Symbol("a"), [Symbol("b"), Symbol("c")], []]),
        ("  42  \n", 42),
        ("(+ 1 2)\n", [Symbol("+"), 1, 2]),
        ('(+ "a" "b")', [Symbol("+"), QuotedString("a"), QuotedString("b")]),
    ],
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_nested_lists():
    source = "((a b) (c d))"
    expected = [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]
    assert parse(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("", EmptyInput),
        ("   \n", EmptyInput),
        ("(+ 1 2", UnmatchedOpenParen),
        ("((a)", UnmatchedOpenParen),
        ("(", UnmatchedOpenParen),
        (")", UnmatchedCloseParen),
        ('"abc', UnterminatedString),
        ('(a "b)', UnterminatedString),
        ("(a))", TrailingInput),
        ("a b", TrailingInput),
        ("(a) (b)", TrailingInput),
    ],
)
def test_parse_errors(source, error):
    with pytest.raises(error):
        parse(source)


def test_parse_errors_are_syntax_errors():
    with pytest.raises(Lang1SyntaxError):
        parse(")")


def test_trailing_input_reports_left_over_text():
    with pytest.raises(TrailingInput) as info:
        parse("(a) b c")
    assert "b c" in str(info.value)
    assert info.value.remainder == " b c"


def test_token_stream_remainder_includes_peeked_token():
    stream = TokenStream("(a) b")
    stream.parse_expr()
    stream.peek()
    assert stream.remainder == " b"


# -------------------------------
# Round trip: print then re-parse
# -------------------------------
symbols = st.from_regex(r"[a-zA-Z_!?<>=*/+-][a-zA-Z0-9_!?<>=*/+.-]{0,8}", fullmatch=True).filter(
    lambda s: classify_atom(s)[0] == "symbol"
)
atoms = st.one_of(
    st.integers(min_value=-(2**63), max_value=2**63 - 1),
    st.floats(allow_nan=False, allow_infinity=False),
    symbols.map(Symbol),
)
trees = st.lists(
    st.recursive(atoms, lambda children: st.lists(children, max_size=4), max_leaves=15),
    max_size=6,
)


def _same(a, b):
    if isinstance(a, list):
        return isinstance(b, list) and len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return type(a) is type(b) and a == b


@given(trees)
def test_round_trip(tree):
    assert _same(parse(format_value(tree)), tree)
