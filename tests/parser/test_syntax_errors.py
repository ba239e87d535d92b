"""Error reporting tests for the parser."""

import pytest

from mirror.ast import Expression, NumberLiteral
from mirror.errors import (
    ConfigError,
    ErrorLocation,
    ExpectedConstructError,
    MirrorError,
    MirrorSyntaxError,
    NestingTooDeepError,
    UnexpectedTokenError,
)
from mirror.parser import parse


@pytest.mark.parametrize("source", ["1 + 2", '"text"', "-> number", "true(1)", "[1]"])
def test_unmatched_statement_start_is_unexpected_token(source: str) -> None:
    with pytest.raises(UnexpectedTokenError) as info:
        parse(source)

    error = info.value
    assert error.code == "UNEXPECTED_TOKEN"
    assert error.message.startswith("Unexpected token: ")
    assert error.expected == ["'signature'", "'example'", "identifier"]


def test_missing_parameter_comma_reports_the_separator() -> None:
    with pytest.raises(ExpectedConstructError) as info:
        parse("signature add(a: number b: number) -> number")

    error = info.value
    assert error.expected == ["','", "')'"]
    assert error.found == "'b'"
    assert error.message == "Expected ',' or ')' in parameter list, but got 'b'"
    assert (error.line, error.column) == (1, 25)


def test_unexpected_token_after_valid_statements_aborts_whole_parse() -> None:
    source = "signature f(x: number) -> number\nexample f(1) = 2\n42"

    with pytest.raises(UnexpectedTokenError) as info:
        parse(source)

    assert info.value.found == "'42'"
    assert info.value.line == 3


@pytest.mark.parametrize(
    "source, expected, found",
    [
        ("signature f(a: int) -> number", ["type"], "'int'"),
        ("signature f(a: list number) -> number", ["type"], "'list'"),
        ("signature f(a: list[number) -> number", ["']'"], "')'"),
        ("signature f() -> number", ["identifier"], "')'"),
        ("signature f(a number) -> number", ["':'"], "'number'"),
        ("signature f(a: number) number", ["'->'"], "'number'"),
        ("signature (a: number) -> number", ["identifier"], "'('"),
        ("signature f(a: number,) -> number", ["identifier"], "')'"),
        ("example f(1) 2", ["'='"], "'2'"),
        ("example f() = 1", ["literal"], "')'"),
        ("example f([1, 2]) = 1", ["']'"], "','"),
        ('example f({"a" 1}) = 1', ["':'"], "'1'"),
        ('example f("abc) = 1', ["literal"], "'\"'"),
        ("example f(1, 2 = 3", ["','", "')'"], "'='"),
        ("foo(bar(1) 2)", ["','", "')'"], "'2'"),
        ("foo 1", ["'('"], "'1'"),
        ("foo()", ["literal"], "')'"),
    ],
)
def test_expected_construct_errors(source, expected, found) -> None:
    with pytest.raises(ExpectedConstructError) as info:
        parse(source)

    assert info.value.expected == expected
    assert info.value.found == found
    assert found in info.value.message


@pytest.mark.parametrize("source", ["signature f(", "example f(1) =", "foo(bar(1)"])
def test_truncated_input_reports_end_of_input(source: str) -> None:
    with pytest.raises(ExpectedConstructError) as info:
        parse(source)
    assert info.value.found == "end of input"
    assert info.value.message.endswith("but got end of input")


def test_reserved_literals_are_not_identifiers() -> None:
    with pytest.raises(ExpectedConstructError) as info:
        parse("signature f(true: number) -> number")
    assert info.value.expected == ["identifier"]
    assert "reserved" in info.value.hint


def test_error_hierarchy_and_formatting() -> None:
    with pytest.raises(MirrorSyntaxError) as info:
        parse("signature f(a: int) -> number", path="math.mirror")

    error = info.value
    assert isinstance(error, MirrorError)
    formatted = error.format()
    assert formatted.startswith("Expected type, but got 'int' (math.mirror:1:16; EXPECTED_CONSTRUCT)")
    assert "Hint: Valid types are" in formatted
    assert str(error) == error.message


def test_format_without_path_uses_line_and_column() -> None:
    with pytest.raises(UnexpectedTokenError) as info:
        parse("\n\n  7")
    assert "(line 3, column 3; UNEXPECTED_TOKEN)" in info.value.format()


@pytest.mark.parametrize(
    "source",
    [
        "f(" * 5000 + "1" + ")" * 5000,
        "signature f(a: " + "list[" * 5000 + "number" + "]" * 5000 + ") -> number",
        "example f(" + "[" * 5000 + "1" + "]" * 5000 + ") = 1",
    ],
)
def test_runaway_nesting_is_a_syntax_error(source: str) -> None:
    with pytest.raises(NestingTooDeepError) as info:
        parse(source, path="deep.mirror")

    error = info.value
    assert isinstance(error, MirrorSyntaxError)
    assert error.code == "NESTING_TOO_DEEP"
    assert error.message == f"Nesting too deep at {error.found}"
    assert error.path == "deep.mirror"
    assert error.line == 1
    assert error.column > 1


def test_moderate_nesting_still_parses() -> None:
    program = parse("f(" * 50 + "1" + ")" * 50)

    node, depth = program[0], 1
    while isinstance(node.mix[0], Expression):
        node, depth = node.mix[0], depth + 1
    assert depth == 50
    assert node.mix == (NumberLiteral(1),)


@pytest.mark.parametrize(
    "location, rendered",
    [
        (ErrorLocation("a.mirror", 2, 5), "a.mirror:2:5"),
        (ErrorLocation("a.mirror", 2), "a.mirror:2"),
        (ErrorLocation("a.mirror"), "a.mirror"),
        (ErrorLocation(line=2, column=5), "line 2, column 5"),
        (ErrorLocation(line=2), "line 2"),
    ],
)
def test_error_location_rendering(location: ErrorLocation, rendered: str) -> None:
    assert location
    assert str(location) == rendered


def test_error_without_location_formats_code_and_hint_only() -> None:
    error = ConfigError("Unknown key 'colour'", hint="Check mirror.toml")

    assert not error.location
    assert error.format() == "Unknown key 'colour' (CONFIG_ERROR) Hint: Check mirror.toml"
    assert MirrorError("plain").format() == "plain"
