"""Tests del evaluador de expresiones (precedencia, identidad y errores)."""

import pytest

from core.evaluator import ErrorKind, evaluate
from core.tokens import Number, Operator


def value_of(tokens):
    result = evaluate(tokens)
    assert result.ok, f"error inesperado: {result.error}"
    return result.value


# --- Precedencia ---

def test_multiplication_before_addition():
    assert value_of(["2", "+", "3", "*", "4"]) == pytest.approx(14.0)


def test_division_before_subtraction():
    assert value_of(["10", "-", "4", "/", "2"]) == pytest.approx(8.0)


def test_mixed_precedence():
    """2 * 3 + 4 * 5 - 6 / 3 = 6 + 20 - 2."""
    tokens = ["2", "*", "3", "+", "4", "*", "5", "-", "6", "/", "3"]
    assert value_of(tokens) == pytest.approx(24.0)


def test_left_to_right_within_tier():
    assert value_of(["8", "/", "2", "/", "2"]) == pytest.approx(2.0)
    assert value_of(["10", "-", "3", "-", "2"]) == pytest.approx(5.0)
    assert value_of(["6", "/", "3", "*", "2"]) == pytest.approx(4.0)


def test_decimal_operands():
    assert value_of(["3.14", "*", "2"]) == pytest.approx(6.28)


def test_typed_tokens():
    tokens = [Number("1.5"), Operator("*"), Number("4")]
    assert value_of(tokens) == pytest.approx(6.0)


def test_zero_numerator_is_fine():
    assert value_of(["0", "/", "5"]) == 0.0


# --- Identidad ---

def test_single_number_is_returned_unchanged():
    assert value_of(["7"]) == 7.0
    assert value_of([Number("0.25")]) == 0.25


# --- Errores ---

@pytest.mark.parametrize("tokens", [
    ["5", "/", "0"],
    ["8", "*", "2", "/", "0", "+", "1"],
    ["1", "+", "2", "/", "0.0"],
])
def test_divide_by_zero(tokens):
    assert evaluate(tokens).error is ErrorKind.DIVIDE_BY_ZERO


@pytest.mark.parametrize("tokens", [
    ["2", "3"],
    ["3", "+"],
    ["+", "3", "4"],
    ["3", "+", "-", "4"],
    [],
])
def test_invalid_expression(tokens):
    assert evaluate(tokens).error is ErrorKind.INVALID_EXPRESSION


@pytest.mark.parametrize("tokens", [
    ["abc", "+", "1"],
    ["."],
    ["Expresión inválida", "+", "2"],
    ["nan", "+", "1"],
    ["inf"],
    ["-infinity", "*", "2"],
    ["1_0"],
])
def test_invalid_number(tokens):
    assert evaluate(tokens).error is ErrorKind.INVALID_NUMBER


def test_failure_has_no_value():
    result = evaluate(["5", "/", "0"])
    assert not result.ok
    assert result.value is None


def test_error_messages():
    assert ErrorKind.DIVIDE_BY_ZERO.message == "No se puede dividir por cero"
    assert ErrorKind.INVALID_NUMBER.message == "Número inválido"
    assert ErrorKind.INVALID_EXPRESSION.message == "Expresión inválida"


def test_unknown_operator_token_rejected():
    with pytest.raises(ValueError):
        Operator("%")


def test_scientific_literal_is_a_number():
    assert value_of(["1.2346e+11", "/", "2"]) == pytest.approx(6.173e10)


def test_overflow_is_invalid_number():
    huge = "1" + "0" * 300
    assert evaluate([huge, "*", huge]).error is ErrorKind.INVALID_NUMBER
