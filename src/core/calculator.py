"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase Calculator que coordina la construcción
incremental de expresiones, su evaluación y el historial de resultados.
"""

import logging

from . import builder
from .evaluator import evaluate
from .formatter import format_result
from .state import DEFAULT_HISTORY_LIMIT, CalculatorState, History
from .tokens import Number, join_tokens


logger = logging.getLogger(__name__)


# ============================================================================
# CLASE: Calculator
# Propósito: Orquestar estado, constructor, evaluador y formato
# Responsabilidades:
#   - Recibir acciones del usuario (dígitos, operadores, borrar, calcular)
#   - Evaluar la expresión con precedencia (sin eval())
#   - Formatear resultados y mantener el historial
#   - Exponer el texto a mostrar (display, expresión, historial)
# ============================================================================
class Calculator:
    """
    Calculadora con construcción incremental de expresiones.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en state.input_buffer
        2. Usuario selecciona operación → el número pasa a state.tokens
        3. Usuario repite hasta completar expresión (ej: 5 + 3 * 2)
        4. Usuario pulsa Enter → compute() evalúa, formatea y guarda en historial

    El estado es un CalculatorState inyectable; las acciones se delegan a
    las funciones de core.builder.
    """

    def __init__(self, config=None, state=None):
        """
        Inicializa la calculadora.

        Args:
            config (CalculatorConfig): Límite de historial y opciones de formato
                (opcional, valores por defecto si no se indica)
            state (CalculatorState): Estado inicial (opcional)
        """
        self.config = config
        if state is None:
            limit = config.history_limit if config else DEFAULT_HISTORY_LIMIT
            state = CalculatorState(history=History(limit))
        self.state = state
        self._format_options = config.format_options() if config else {}

    # ========================================================================
    # ACCIONES DEL USUARIO
    # ========================================================================
    def append_digit_or_point(self, ch):
        return builder.append_digit_or_point(self.state, ch)

    def append_operator(self, op):
        return builder.append_operator(self.state, op)

    def backspace(self):
        builder.backspace(self.state)

    def clear(self):
        builder.clear(self.state)

    def clear_all(self):
        builder.clear_all(self.state)

    def compute(self):
        """
        Evalúa la expresión actual y muestra el resultado.

        Returns:
            tuple: (éxito: bool, texto: str)
                - (True, "14"): Cálculo exitoso, añadido al historial
                - (False, "No se puede dividir por cero"): Error mostrado,
                  no se añade al historial
                - (False, ""): Nada que evaluar o resultado ya mostrado

        Proceso:
            1. Completa la expresión con el número pendiente
            2. Evalúa (multiplicación/división antes que suma/resta)
            3. Formatea (notación científica para números extremos)
            4. Guarda "expresión = resultado" en el historial
        """
        state = self.state
        if state.result_displayed:
            return False, ""

        tokens = list(state.tokens)
        if state.input_buffer:
            tokens.append(Number(state.input_buffer))
        if not tokens:
            return False, ""

        expression = join_tokens(tokens)
        outcome = evaluate(tokens)
        if not outcome.ok:
            message = outcome.error.message
            logger.info(f"Error al evaluar '{expression}': {message}")
            builder.commit_error(state, message)
            return False, message

        text = format_result(outcome.value, **self._format_options)
        state.history.add(expression, text)
        builder.commit_result(state, text)
        logger.debug(f"{expression} = {text}")
        return True, text

    # ========================================================================
    # LECTURA DEL ESTADO (para el renderizado)
    # ========================================================================
    def get_expression(self):
        """
        Expresión en construcción, incluido el número actual.

        Returns:
            str: Ej: "5 + 3 *" o "5 + 3 * 2"; vacía tras un resultado
        """
        if self.state.result_displayed:
            return ""
        parts = [str(token) for token in self.state.tokens]
        if self.state.input_buffer:
            parts.append(self.state.input_buffer)
        return " ".join(parts)

    def get_display(self):
        """
        Texto del display principal.

        Prioridad:
            1. Resultado o error del último cálculo
            2. Número actual siendo ingresado
            3. "0" por defecto
        """
        return self.state.input_buffer or "0"

    def get_history(self):
        """Entradas del historial, la más antigua primero."""
        return self.state.history.entries()

    @property
    def result_displayed(self):
        return self.state.result_displayed

    def is_error(self):
        """True si el display muestra un mensaje de error."""
        return self.state.result_displayed and not self._is_number(self.state.input_buffer)

    @staticmethod
    def _is_number(text):
        try:
            float(text)
        except ValueError:
            return False
        return True
