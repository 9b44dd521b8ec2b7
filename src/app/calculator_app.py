"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import logging

import cv2

from app.keyboard import action_for_key, key_name_from_code
from config.settings import CalculatorConfig
from core.calculator import Calculator
from ui.renderer import UIRenderer


logger = logging.getLogger(__name__)

WINDOW_NAME = 'Calculadora'

# Colores BGR del feedback
COLOR_OK = (100, 255, 100)
COLOR_OPERATOR = (255, 150, 0)
COLOR_RESULT = (0, 255, 255)
COLOR_ERROR = (80, 80, 255)
COLOR_CLEAR = (255, 200, 0)


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Lógica aritmética y estado
        - UIRenderer: Renderizado de interfaz gráfica
        - keyboard: Traducción de teclas a acciones
        - CalculatorApp: Coordinador y loop principal

    Cada tecla se procesa por completo antes de leer la siguiente.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.calc = Calculator(self.config)
        self.ui = UIRenderer(self.config.window_width, self.config.window_height, self.config)

        # Despacho de acciones sin argumento
        self._simple_actions = {
            'compute': self._compute,
            'backspace': self.calc.backspace,
            'clear': self._clear,
            'clear_all': self._clear_all,
            'toggle_theme': self._toggle_theme,
        }

    def _feedback(self, msg, color, duration=None):
        self.ui.show_feedback(msg, color, duration or self.config.feedback_duration)

    def dispatch(self, action, argument=None):
        """
        Ejecuta una acción sobre la calculadora.

        Args:
            action (str): "digit", "operator", "compute", "backspace",
                "clear", "clear_all", "toggle_theme" o "quit"
            argument (str): Dígito u operador (solo para "digit"/"operator")

        Returns:
            bool: False si la aplicación debe terminar

        Raises:
            ValueError: Si la acción no existe
        """
        if action == 'quit':
            return False

        if action == 'digit':
            self.calc.append_digit_or_point(argument)
        elif action == 'operator':
            if self.calc.append_operator(argument):
                self._feedback(argument.strip(), COLOR_OPERATOR, 15)
        elif action in self._simple_actions:
            self._simple_actions[action]()
        else:
            raise ValueError(f"Acción desconocida: {action!r}")
        return True

    def _compute(self):
        success, text = self.calc.compute()
        if success:
            self._feedback(f"= {text}", COLOR_RESULT, 60)
        elif text:
            self._feedback(text, COLOR_ERROR)

    def _clear(self):
        self.calc.clear()
        self._feedback("C", COLOR_CLEAR)

    def _clear_all(self):
        self.calc.clear_all()
        self._feedback("TODO BORRADO", COLOR_ERROR)

    def _toggle_theme(self):
        dark = self.ui.toggle_theme()
        self.config.dark_mode = dark
        self._feedback("TEMA OSCURO" if dark else "TEMA CLARO", COLOR_OK)

    def handle_key_code(self, code):
        """
        Procesa un código de cv2.waitKey.

        Returns:
            bool: False si la aplicación debe terminar
        """
        key, shift = key_name_from_code(code)
        mapped = action_for_key(key, shift)
        if mapped is None:
            return True
        action, argument = mapped
        logger.debug(f"Tecla {key!r} → {action}")
        return self.dispatch(action, argument)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar UI completa
            2. Mostrar frame
            3. Leer tecla y ejecutar su acción
            4. Repetir hasta 'q' o cierre de la ventana
        """
        # Imprimir instrucciones de uso en terminal
        print("\n" + "="*70)
        print("CALCULADORA")
        print("="*70)
        print("\nNumeros: 0-9 y '.'")
        print("Operaciones: + - * /")
        print("Calcular: Enter")
        print("Borrar: Retroceso | Esc: C | A (Shift+Esc): CA")
        print("\nPresiona 't' para cambiar el tema")
        print("Presiona 'q' para salir\n")
        print("="*70 + "\n")

        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)

        # ====================================================================
        # BUCLE PRINCIPAL
        # ====================================================================
        while True:
            frame = self.ui.render(self.calc)
            cv2.imshow(WINDOW_NAME, frame)

            key = cv2.waitKey(self.config.frame_delay_ms)
            if not self.handle_key_code(key):
                break

            # Ventana cerrada con el ratón
            if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                break

        # ====================================================================
        # LIMPIEZA Y CIERRE
        # ====================================================================
        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
