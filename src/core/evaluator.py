"""
Evaluación de expresiones con precedencia de operadores.

Este módulo evalúa una secuencia de tokens sin usar eval(): primero
resuelve multiplicaciones y divisiones, después sumas y restas, siempre
de izquierda a derecha. Los fallos se devuelven como EvaluationResult
con un ErrorKind, nunca como excepción.
"""

import math
import operator
from dataclasses import dataclass
from enum import Enum

from .tokens import HIGH_PRECEDENCE, Operator, to_token


class ErrorKind(Enum):
    """Tipos de fallo de evaluación, con el mensaje que ve el usuario."""
    INVALID_NUMBER = "Número inválido"
    INVALID_EXPRESSION = "Expresión inválida"
    DIVIDE_BY_ZERO = "No se puede dividir por cero"

    @property
    def message(self):
        return self.value


@dataclass(frozen=True)
class EvaluationResult:
    """Resultado de evaluar: un valor numérico o un tipo de error."""
    value: float = None
    error: ErrorKind = None

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, kind):
        return cls(error=kind)


_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _parse_number(text):
    """Valor finito del literal, o None (acepta "1.2346e+11"; rechaza "nan", "inf", "1_0")."""
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _split(tokens):
    """
    Separa la secuencia en lista de números y lista de operadores.

    Returns:
        tuple: (numbers, operators, error) con error None si todo es válido
    """
    numbers = []
    operators = []
    alternates = True
    for index, token in enumerate(tokens):
        if isinstance(token, Operator):
            operators.append(token.symbol)
            # Posiciones impares: operadores
            alternates = alternates and index % 2 == 1
        else:
            value = _parse_number(token.text)
            if value is None:
                return numbers, operators, ErrorKind.INVALID_NUMBER
            numbers.append(value)
            alternates = alternates and index % 2 == 0

    if len(numbers) == 1 and not operators:
        return numbers, operators, None
    if len(numbers) != len(operators) + 1 or not alternates:
        return numbers, operators, ErrorKind.INVALID_EXPRESSION
    return numbers, operators, None


def evaluate(tokens):
    """
    Evalúa una secuencia de tokens con precedencia estándar.

    Args:
        tokens (iterable): Number/Operator o texto crudo ("2", "+", "3")

    Returns:
        EvaluationResult: valor float o error (INVALID_NUMBER,
        INVALID_EXPRESSION, DIVIDE_BY_ZERO)

    Algoritmo (dos pasadas de izquierda a derecha):
        1. Colapsa cada "*" y "/" sobre el número de su izquierda
           2 + 3 * 4 - 6 / 2 → 2 + 12 - 3
        2. Pliega "+" y "-" desde el primer número
           2 + 12 - 3 → 11
    """
    sequence = [to_token(token) for token in tokens]
    numbers, operators, error = _split(sequence)
    if error is not None:
        return EvaluationResult.failure(error)

    # Primera pasada: multiplicación y división
    i = 0
    while i < len(operators):
        op = operators[i]
        if op in HIGH_PRECEDENCE:
            right = numbers[i + 1]
            if op == "/" and right == 0:
                return EvaluationResult.failure(ErrorKind.DIVIDE_BY_ZERO)
            numbers[i] = _OPERATIONS[op](numbers[i], right)
            del numbers[i + 1]
            del operators[i]
        else:
            i += 1

    # Segunda pasada: suma y resta
    result = numbers[0]
    for op, right in zip(operators, numbers[1:]):
        result = _OPERATIONS[op](result, right)

    # Desbordamiento (ej: 1e300 * 1e300): el resultado no es un número válido
    if not math.isfinite(result):
        return EvaluationResult.failure(ErrorKind.INVALID_NUMBER)

    return EvaluationResult.success(result)
