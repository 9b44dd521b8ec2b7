"""
Módulo de configuración de la calculadora.
Contiene las preferencias de la calculadora y la configuración de logging.
"""

from .logging_config import setup_logging
from .settings import CalculatorConfig

__all__ = ['CalculatorConfig', 'setup_logging']
