import re

import pytest

from dstructs.expression import (
    infix_to_postfix,
    is_balanced,
    is_operator,
    priority,
)


@pytest.mark.parametrize(
    "expression",
    ["", "()", "{[()]}", "(1+2)*[3-{4/5}]", "abc", "((()))[]{}"],
)
def test_balanced_expressions(expression):
    assert is_balanced(expression) is True


@pytest.mark.parametrize(
    "expression",
    ["(", ")", "(]", "{[}]", "(1+2", "1+2)", "(()", "[[]]]"],
)
def test_unbalanced_expressions(expression):
    assert is_balanced(expression) is False


@pytest.mark.parametrize(
    "op, expected",
    [("(", 0), ("{", 0), ("[", 0), ("+", 1), ("-", 1), ("*", 2), ("/", 2), ("%", 2), ("^", 3)],
)
def test_priority_table(op, expected):
    assert priority(op) == expected


def test_priority_rejects_unknown():
    with pytest.raises(ValueError):
        priority("a")


@pytest.mark.parametrize("ch", list("+-*/%^"))
def test_operators_recognised(ch):
    assert is_operator(ch) is True


@pytest.mark.parametrize("ch", list("()[]{}1a "))
def test_non_operators(ch):
    assert is_operator(ch) is False


def test_precedence_example():
    assert infix_to_postfix("3+4*2") == "3 4 2 * +"


def test_parentheses_example():
    assert infix_to_postfix("(3+4)*2") == "3 4 + 2 *"


def test_left_associative_example():
    assert infix_to_postfix("8-3-2") == "8 3 - 2 -"


def test_single_number_round_trip():
    assert infix_to_postfix("123") == "123"


def test_whitespace_is_ignored():
    assert infix_to_postfix(" 12 + 7 ") == infix_to_postfix("12+7")


@pytest.mark.parametrize(
    "expression",
    ["12+345*6", "(1+2)*(3-4)/5", "[7%2]^{3+1}", "100-20-3", "2^3^2*(9-1)"],
)
def test_postfix_invariants(expression):
    result = infix_to_postfix(expression)
    tokens = result.split(" ")
    numbers_in = re.findall(r"\d+", expression)
    numbers_out = [t for t in tokens if t.isdigit()]
    assert numbers_out == numbers_in
    ops_in = sorted(ch for ch in expression if is_operator(ch))
    ops_out = sorted(t for t in tokens if is_operator(t))
    assert ops_out == ops_in
    assert not any(ch in result for ch in "()[]{}")
    assert len(tokens) == len(numbers_in) + len(ops_in)


def test_unbalanced_input_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("(1+2")


def test_unexpected_character_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("1+x")