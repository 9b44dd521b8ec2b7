"""
Módulo core con la lógica principal de la calculadora.
Contiene los tokens, el estado, el constructor de expresiones,
el evaluador, el formateo de resultados y el orquestador.
"""

from .calculator import Calculator
from .evaluator import ErrorKind, EvaluationResult, evaluate
from .formatter import format_result
from .state import CalculatorState, History, HistoryEntry
from .tokens import Number, Operator

__all__ = ['Calculator', 'CalculatorState', 'ErrorKind', 'EvaluationResult',
           'History', 'HistoryEntry', 'Number', 'Operator', 'evaluate',
           'format_result']
