"""Tests for attaching examples to signatures."""

from mirror.ast import (
    Example,
    Expression,
    GroupedProgram,
    GroupedSignature,
    NumberLiteral,
    Program,
)
from mirror.grouping import extract_expressions, group_program, group_signatures_with_examples
from mirror.parser import parse


def test_example_attaches_to_its_signature() -> None:
    program = parse("signature add(a: number, b: number) -> number\nexample add(2, 3) = 5")

    grouped = group_signatures_with_examples(program)

    assert len(grouped) == 1
    assert isinstance(grouped[0], GroupedSignature)
    assert grouped[0].name == "add"
    assert grouped[0].examples == (
        Example("add", (NumberLiteral(2), NumberLiteral(3)), NumberLiteral(5)),
    )


def test_examples_keep_source_order_and_duplicates(arithmetic_source: str) -> None:
    source = arithmetic_source + "example add(2, 3) = 5\n"

    add = group_signatures_with_examples(parse(source))[0]

    assert [example.literals[0].value for example in add.examples] == [2, 10, 2]
    assert add.examples[0] == add.examples[2]


def test_examples_never_attach_to_other_signatures(arithmetic_source: str) -> None:
    grouped = {sig.name: sig for sig in group_signatures_with_examples(parse(arithmetic_source))}

    assert set(grouped) == {"add", "concat"}
    assert all(example.name == "add" for example in grouped["add"].examples)
    assert [example.name for example in grouped["concat"].examples] == ["concat"]


def test_orphan_example_parses_and_attaches_nowhere(arithmetic_source: str) -> None:
    program = parse(arithmetic_source)
    assert any(example.name == "square" for example in program.examples)

    grouped = group_signatures_with_examples(program)

    assert all(example.name != "square" for sig in grouped for example in sig.examples)


def test_signature_without_examples_gets_empty_tuple() -> None:
    grouped = group_signatures_with_examples(parse("signature f(x: bool) -> bool"))
    assert grouped[0].examples == ()


def test_example_before_signature_still_groups() -> None:
    grouped = group_signatures_with_examples(parse("example f(1) = 1\nsignature f(x: number) -> number"))
    assert len(grouped[0].examples) == 1


def test_repeated_signature_names_each_get_every_example() -> None:
    source = (
        "signature f(x: number) -> number\n"
        "signature f(x: string) -> string\n"
        "example f(1) = 1\n"
    )
    first, second = group_signatures_with_examples(parse(source))
    assert first.examples == second.examples
    assert len(first.examples) == 1


def test_extract_expressions_returns_nodes_untouched(arithmetic_source: str) -> None:
    program = parse(arithmetic_source + "foo(bar(1), 2)\n")

    expressions = extract_expressions(program)

    assert [expr.name for expr in expressions] == ["add", "foo"]
    assert expressions[1] is program[-1]
    assert expressions[1].mix == (Expression("bar", (NumberLiteral(1),)), NumberLiteral(2))


def test_grouping_is_repeatable(arithmetic_source: str) -> None:
    program = parse(arithmetic_source)
    assert group_program(program) == group_program(program)
    assert group_signatures_with_examples(program) == group_signatures_with_examples(program)


def test_empty_program_groups_to_empty_sequences() -> None:
    assert group_signatures_with_examples(Program(())) == []
    assert extract_expressions(Program(())) == []
    assert group_program([]) == GroupedProgram((), ())


def test_grouping_does_not_modify_the_program(arithmetic_source: str) -> None:
    program = parse(arithmetic_source)
    before = program.to_dict()
    group_program(program)
    assert program.to_dict() == before
