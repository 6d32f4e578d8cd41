import pytest

from infixcalc.tokenizer import Token, TokenKind, next_token, tokenize


def texts(expression):
    return [token.text for token in tokenize(expression)]


def test_number_and_operators():
    assert texts("12+3") == ["12", "+", "3"]


def test_number_token_carries_value():
    token, position = next_token("42*1", 0)
    assert token == Token(TokenKind.NUMBER, "42", 42)
    assert position == 2


def test_zero_is_a_number():
    token, _ = next_token("0", 0)
    assert token.kind is TokenKind.NUMBER
    assert token.value == 0


def test_repeated_zeros_are_not_a_number():
    token, position = next_token("00", 0)
    assert token.kind is TokenKind.OPERATION
    assert token.text == "00"
    assert position == 2


def test_leading_zeros_before_non_zero_digits_give_a_number():
    token, _ = next_token("007", 0)
    assert token.kind is TokenKind.NUMBER
    assert token.value == int("007")


@pytest.mark.parametrize("symbol", [">=", "<=", "!=", "==", "&&", "||"])
def test_two_character_operators(symbol):
    assert texts("1" + symbol + "2") == ["1", symbol, "2"]


def test_comparison_followed_by_equality():
    assert texts("1>==2") == ["1", ">", "==", "2"]


def test_comparison_with_equals_followed_by_equality():
    assert texts("1<===2") == ["1", "<=", "==", "2"]


def test_not_operator_before_number():
    tokens = list(tokenize("!5"))
    assert [token.kind for token in tokens] == [TokenKind.OPERATION, TokenKind.NUMBER]
    assert tokens[0].text == "!"


def test_space_is_an_operation_token():
    assert texts("1 +2") == ["1", " ", "+", "2"]


def test_end_of_text():
    token, position = next_token("5", 1)
    assert token.kind is TokenKind.END
    assert position == 1


def test_empty_text_has_no_tokens():
    assert list(tokenize("")) == []


def test_two_character_operator_at_end_advances_past_text():
    token, position = next_token("1&", 1)
    assert token.text == "&"
    assert position > len("1&")


def test_tokens_rebuild_input():
    expression = "(3+4)*2>=10||!0"
    assert "".join(texts(expression)) == expression