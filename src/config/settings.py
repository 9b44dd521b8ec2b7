"""
Configuración de la calculadora.

Este módulo contiene la configuración centralizada: límites del historial,
umbrales de formato de resultados y preferencias de la ventana.
"""

from core.formatter import (MAX_PLAIN_DIGITS, SCIENTIFIC_LOWER,
                            SCIENTIFIC_PRECISION, SCIENTIFIC_UPPER)
from core.state import DEFAULT_HISTORY_LIMIT


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de la calculadora y de su ventana
# Responsabilidades:
#   - Tamaño del historial
#   - Umbrales de notación científica
#   - Tema (oscuro/claro), tamaño de ventana y tiempos de refresco
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Historial: número máximo de cálculos guardados
        - Formato: cuándo pasar a notación científica y con cuántos decimales
        - Ventana: tema, dimensiones, duración del feedback y refresco
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # HISTORIAL
        # ====================================================================
        self.history_limit = DEFAULT_HISTORY_LIMIT   # Cálculos guardados (FIFO)

        # ====================================================================
        # FORMATO DE RESULTADOS
        # ====================================================================
        self.max_plain_digits = MAX_PLAIN_DIGITS         # Dígitos en formato normal
        self.scientific_upper = SCIENTIFIC_UPPER         # |x| > 1e7 → científico
        self.scientific_lower = SCIENTIFIC_LOWER         # 0 < |x| < 1e-7 → científico
        self.scientific_precision = SCIENTIFIC_PRECISION # Decimales de la mantisa

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.dark_mode = True           # Tema oscuro por defecto
        self.window_width = 900         # Ancho en píxeles
        self.window_height = 600        # Alto en píxeles
        self.feedback_duration = 40     # Frames que dura un mensaje de feedback
        self.frame_delay_ms = 30        # Espera de cv2.waitKey por frame

    def format_options(self):
        """Argumentos de core.formatter.format_result según esta configuración."""
        return {
            'max_digits': self.max_plain_digits,
            'upper': self.scientific_upper,
            'lower': self.scientific_lower,
            'precision': self.scientific_precision,
        }
