"""
Tokens de una expresión aritmética.

Este módulo define las dos variantes de token que forman una expresión:
números (guardados como texto literal) y operadores.
"""

from dataclasses import dataclass


# Operadores soportados, en el orden en que aparecen en el teclado
OPERATORS = ("+", "-", "*", "/")

# Operadores de precedencia alta (se resuelven en la primera pasada)
HIGH_PRECEDENCE = ("*", "/")


@dataclass(frozen=True)
class Number:
    """Literal numérico tal como lo escribió el usuario (ej: "3.5")."""
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Operator:
    """Operador aritmético: uno de "+", "-", "*", "/"."""
    symbol: str

    def __post_init__(self):
        if self.symbol not in OPERATORS:
            raise ValueError(f"Operador no soportado: {self.symbol!r}")

    def __str__(self):
        return self.symbol


def is_operator_symbol(text):
    """True si el texto es exactamente uno de los cuatro operadores."""
    return text in OPERATORS


def to_token(item):
    """
    Convierte un elemento en token.

    Args:
        item (Number | Operator | str): Token ya tipado o texto crudo

    Returns:
        Number | Operator: "+", "-", "*", "/" exactos son operadores,
        cualquier otro texto se trata como literal numérico.
    """
    if isinstance(item, (Number, Operator)):
        return item
    if is_operator_symbol(item):
        return Operator(item)
    return Number(str(item))


def join_tokens(tokens):
    """Texto legible de una secuencia de tokens (ej: "2 + 3 * 4")."""
    return " ".join(str(token) for token in tokens)
