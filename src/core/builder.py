"""
Construcción incremental de expresiones.

Cada función recibe el estado de la calculadora y aplica una acción del
usuario (dígito, operador, borrar). Las acciones no permitidas se ignoran
en silencio y devuelven False.
"""

import logging

from .tokens import Number, Operator, is_operator_symbol


logger = logging.getLogger(__name__)

DIGITS = "0123456789"
DECIMAL_POINT = "."


def append_digit_or_point(state, ch):
    """
    Añade un dígito o el punto decimal al número actual.

    Args:
        state (CalculatorState): Estado a modificar
        ch (str): "0"-"9" o "."

    Returns:
        bool: True si se añadió, False si se rechazó

    Comportamiento:
        - Tras un resultado: empieza una expresión nueva (el resultado
          anterior se descarta)
        - Un segundo punto decimal en el mismo número se ignora
    """
    if len(ch) != 1 or ch not in DIGITS + DECIMAL_POINT:
        logger.debug(f"Carácter ignorado: {ch!r}")
        return False

    if state.result_displayed:
        state.reset_expression()

    if ch == DECIMAL_POINT and DECIMAL_POINT in state.input_buffer:
        logger.debug("Segundo punto decimal ignorado")
        return False

    state.input_buffer += ch
    return True


def append_operator(state, op):
    """
    Añade un operador a la expresión.

    Args:
        state (CalculatorState): Estado a modificar
        op (str): Operador, admite espacios alrededor (ej: " + ")

    Returns:
        bool: True si se añadió, False si se rechazó

    Ejemplo de flujo:
        input_buffer="5" → append_operator(" + ") → tokens=[5, +]
        resultado "42" mostrado → append_operator("*") → tokens=[42, *]
    """
    symbol = op.strip()
    if not is_operator_symbol(symbol):
        logger.debug(f"Operador desconocido: {op!r}")
        return False

    # Reutilizar el resultado mostrado como primer operando
    if state.result_displayed:
        state.result_displayed = False
        state.tokens = [Number(state.input_buffer)] if state.input_buffer else []
        state.input_buffer = ""

    if not state.input_buffer:
        # Sin número pendiente: no se puede empezar con operador ni
        # poner dos operadores seguidos
        if not state.tokens or isinstance(state.tokens[-1], Operator):
            logger.debug(f"Operador {symbol!r} rechazado: falta operando")
            return False
    else:
        state.tokens.append(Number(state.input_buffer))
        state.input_buffer = ""

    state.tokens.append(Operator(symbol))
    return True


def backspace(state):
    """
    Borra el último carácter introducido.

    Comportamiento:
        - Tras un resultado: vacía la expresión (no edita el resultado)
        - Con número actual: borra su último carácter
        - Sin número actual: descarta el último operador y reabre el
          número anterior para seguir editándolo
    """
    if state.result_displayed:
        state.reset_expression()
    elif state.input_buffer:
        state.input_buffer = state.input_buffer[:-1]
    elif state.tokens:
        state.tokens.pop()
        state.input_buffer = state.tokens.pop().text if state.tokens else ""


def clear(state):
    """Borra número actual y expresión (C). El historial se conserva."""
    state.reset_expression()


def clear_all(state):
    """Borra todo, incluido el historial (CA)."""
    state.reset_expression()
    state.history.clear()
    logger.debug("Historial borrado")


def commit_result(state, text):
    """Muestra un resultado: queda en el número actual para reutilizarlo."""
    state.input_buffer = text
    state.tokens = []
    state.result_displayed = True


def commit_error(state, message):
    """Muestra un mensaje de error en lugar del resultado."""
    commit_result(state, message)
