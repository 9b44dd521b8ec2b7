"""
Formateo de resultados para el display.

Convierte el valor numérico de un cálculo en el texto que se muestra,
se guarda en el historial y se reutiliza como operando.
"""

import math

import numpy as np


MAX_PLAIN_DIGITS = 10       # Más dígitos → notación científica
SCIENTIFIC_UPPER = 1e7      # |x| mayor → notación científica
SCIENTIFIC_LOWER = 1e-7     # 0 < |x| menor → notación científica
SCIENTIFIC_PRECISION = 4    # Decimales de la mantisa


def plain_text(number):
    """
    Representación decimal más corta, sin exponente.

    Ejemplos:
        14.0 → "14"
        0.1 + 0.2 → "0.30000000000000004"
        1e-05 → "0.00001"
    """
    if not math.isfinite(number):
        return str(number)
    if number == 0:
        number = 0.0  # Evita "-0"
    return np.format_float_positional(number, trim='-')


def format_result(number, max_digits=MAX_PLAIN_DIGITS, upper=SCIENTIFIC_UPPER,
                  lower=SCIENTIFIC_LOWER, precision=SCIENTIFIC_PRECISION):
    """
    Formatea un resultado numérico.

    Args:
        number (float): Valor calculado
        max_digits (int): Dígitos máximos en formato normal
        upper (float): Magnitud máxima en formato normal
        lower (float): Magnitud mínima (distinta de cero) en formato normal
        precision (int): Decimales de la mantisa en notación científica

    Returns:
        str: Texto normal ("3.75") o científico ("1.2346e+11")

    Se usa notación científica si el texto normal tiene más de max_digits
    dígitos, o si |number| > upper, o si 0 < |number| < lower.
    """
    plain = plain_text(number)
    magnitude = abs(number)
    digits = sum(1 for c in plain if c.isdigit())

    if digits > max_digits or magnitude > upper or 0 < magnitude < lower:
        return f"{number:.{precision}e}"
    return plain
