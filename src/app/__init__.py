"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes y el mapeo de teclado.
"""

from .calculator_app import CalculatorApp
from .keyboard import action_for_key, key_name_from_code

__all__ = ['CalculatorApp', 'action_for_key', 'key_name_from_code']
