import pytest

from infixcalc.errors import CalculatorError, ErrorCode
from infixcalc.infix import infix_to_postfix
from infixcalc.postfix import consume_operator, evaluate_postfix, is_operand
from infixcalc.stack import Stack
from infixcalc.tokenqueue import string_to_queue


@pytest.mark.parametrize(
    "token, expected",
    [("12", True), ("0", True), ("+", False), ("", False), ("(", False)],
)
def test_is_operand(token, expected):
    assert is_operand(token) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 2 +", 3),
        ("2 3 4 * +", 14),
        ("2 7 -", -5),
        ("7 2 /", 3),
        ("7 2 %", 1),
        ("2 3 ^", 8),
        ("2 3 2 ^ ^", 512),
        ("0 !", 1),
        ("5 !", 0),
        ("3 2 > 1 &&", 1),
        ("1 2 == 0 ||", 0),
        ("5 5 >=", 1),
        ("42", 42),
    ],
)
def test_evaluate_postfix_text(text, expected):
    assert evaluate_postfix(string_to_queue(text)) == expected


@pytest.mark.parametrize(
    "text, code",
    [
        ("1 0 /", ErrorCode.DIVIDE_BY_ZERO),
        ("1 0 %", ErrorCode.DIVIDE_BY_ZERO),
        ("0 0 /", ErrorCode.INDETERMINATE),
        ("0 0 ^", ErrorCode.INDETERMINATE),
        ("1 1 0 /", ErrorCode.MISSING_OPERATOR),
        ("1 +", ErrorCode.MISSING_OPERANDS),
        ("!", ErrorCode.MISSING_OPERANDS),
        ("1 2", ErrorCode.MISSING_OPERATOR),
    ],
)
def test_evaluate_postfix_errors(text, code):
    with pytest.raises(CalculatorError) as excinfo:
        evaluate_postfix(string_to_queue(text))
    assert excinfo.value.code == code


def test_empty_sequence_is_missing_operands():
    with pytest.raises(CalculatorError) as excinfo:
        evaluate_postfix([])
    assert excinfo.value.code == ErrorCode.MISSING_OPERANDS


@pytest.mark.parametrize(
    "text, expected",
    [("(1+2)*3", 9), ("1+2*3", 7), ("2^3^2", 512), ("10-4-3", 3), ("!0&&1", 1)],
)
def test_from_infix(text, expected):
    assert evaluate_postfix(infix_to_postfix(text)) == expected


def test_unmatched_open_parenthesis_fails():
    with pytest.raises(CalculatorError) as excinfo:
        evaluate_postfix(infix_to_postfix("(1+2"))
    assert excinfo.value.code == ErrorCode.MISSING_OPERANDS


def test_consume_operator_binary():
    stack = Stack()
    stack.push(8)
    stack.push(2)
    assert consume_operator(stack, "/") == 4
    assert stack.is_empty()


def test_consume_operator_unary_leaves_rest():
    stack = Stack()
    stack.push(3)
    stack.push(0)
    assert consume_operator(stack, "!") == 1
    assert list(stack) == [3]


def test_consume_operator_empty_stack():
    with pytest.raises(CalculatorError) as excinfo:
        consume_operator(Stack(), "+")
    assert excinfo.value.code == ErrorCode.MISSING_OPERANDS


def test_consume_operator_single_operand():
    stack = Stack()
    stack.push(4)
    with pytest.raises(CalculatorError) as excinfo:
        consume_operator(stack, "*")
    assert excinfo.value.code == ErrorCode.MISSING_OPERANDS
    assert stack.is_empty()