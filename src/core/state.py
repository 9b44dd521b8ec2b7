"""
Estado de la calculadora.

Este módulo contiene el objeto de estado que manipulan el constructor de
expresiones y el orquestador, junto con el historial acotado de cálculos.
"""

import logging
from collections import deque
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

# Número máximo de cálculos guardados en el historial
DEFAULT_HISTORY_LIMIT = 10


@dataclass(frozen=True)
class HistoryEntry:
    """Un cálculo completado: expresión evaluada y resultado formateado."""
    expression: str
    result: str

    def __str__(self):
        return f"{self.expression} = {self.result}"


# ============================================================================
# CLASE: History
# Propósito: Registro FIFO de los últimos cálculos exitosos
# Responsabilidades:
#   - Guardar como máximo `limit` entradas
#   - Descartar la más antigua al superar el límite
# ============================================================================
class History:
    """
    Historial acotado de cálculos.

    Usa un buffer circular (deque con maxlen): al añadir la entrada
    número limit + 1 se descarta automáticamente la más antigua.
    """

    def __init__(self, limit=DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("El historial debe admitir al menos una entrada")
        self.limit = limit
        self._entries = deque(maxlen=limit)

    def add(self, expression, result):
        """Añade un cálculo al final del historial y lo devuelve."""
        entry = HistoryEntry(expression, result)
        if len(self._entries) == self.limit:
            logger.debug(f"Historial lleno, se descarta: {self._entries[0]}")
        self._entries.append(entry)
        return entry

    def clear(self):
        self._entries.clear()

    def entries(self):
        """Entradas en orden cronológico (la más antigua primero)."""
        return list(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


@dataclass
class CalculatorState:
    """
    Estado completo de la calculadora.

    Atributos:
        input_buffer: Número que se está escribiendo, o el resultado/error
            mostrado tras un cálculo
        tokens: Secuencia confirmada de Number/Operator alternados
        result_displayed: True justo después de un cálculo (correcto o no),
            hasta la siguiente edición
        history: Historial acotado de cálculos exitosos
    """
    input_buffer: str = ""
    tokens: list = field(default_factory=list)
    result_displayed: bool = False
    history: History = field(default_factory=History)

    def reset_expression(self):
        """Vacía número actual y expresión. El historial se conserva."""
        self.input_buffer = ""
        self.tokens = []
        self.result_displayed = False
