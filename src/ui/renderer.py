"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import time
import unicodedata

import cv2
import numpy as np


# Paletas BGR de los dos temas
THEMES = {
    'dark': {
        'background': (45, 37, 26),
        'panel': (72, 55, 45),
        'border': (255, 200, 100),
        'title': (240, 232, 226),
        'expression': (180, 180, 180),
        'text': (255, 255, 255),
        'result': (100, 255, 100),
        'error': (100, 100, 255),
        'cursor': (0, 255, 0),
        'muted': (150, 150, 150),
    },
    'light': {
        'background': (247, 242, 237),
        'panel': (255, 255, 255),
        'border': (150, 110, 60),
        'title': (72, 55, 45),
        'expression': (110, 110, 110),
        'text': (30, 30, 30),
        'result': (40, 140, 40),
        'error': (40, 40, 200),
        'cursor': (40, 140, 40),
        'muted': (120, 120, 120),
    },
}

HELP_TEXT = "0-9 . + - * / | Enter: = | Retroceso: borrar | Esc: C | A: CA | t: tema | q: salir"


def to_display_text(text):
    """
    Quita acentos y caracteres no ASCII.

    Las fuentes Hershey de OpenCV solo dibujan ASCII
    (ej: "Número inválido" → "Numero invalido").
    """
    normalized = unicodedata.normalize('NFKD', text)
    return normalized.encode('ascii', 'ignore').decode('ascii')


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: Expresión en construcción y número/resultado
        2. Historial: Últimos cálculos "expresión = resultado"
        3. Ayuda de teclado en la parte inferior
        4. Feedback: Mensajes temporales de confirmación/error
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional, tema oscuro
                por defecto)
        """
        self.width = width
        self.height = height
        self.config = config
        self.dark_mode = config.dark_mode if config else True
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)   # Color del feedback

    @property
    def palette(self):
        return THEMES['dark' if self.dark_mode else 'light']

    def toggle_theme(self):
        """Alterna entre tema oscuro y claro. Devuelve True si queda oscuro."""
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    def show_feedback(self, msg, color=(0, 255, 0), duration=40):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (~40 frames = 1.2 segundos @ 30ms)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration

    def render(self, calc):
        """
        Dibuja un frame completo.

        Args:
            calc (Calculator): Calculadora con el estado actual

        Returns:
            np.array: Imagen BGR (height x width x 3, uint8)
        """
        img = np.full((self.height, self.width, 3), self.palette['background'], dtype=np.uint8)
        self.draw_display(img, calc)
        self.draw_history(img, calc)
        self.draw_help(img)
        self.draw_feedback(img)
        return img

    def draw_display(self, img, calc):
        """
        Dibuja el display principal de la calculadora.

        Componentes:
            1. Título "CALCULADORA"
            2. Expresión en construcción (parte superior)
            3. Número actual o resultado (grande, parte inferior)
            4. Cursor parpadeante cuando está esperando input

        Colores del display:
            - Texto normal: Número en edición
            - Verde: Resultado de cálculo
            - Rojo: Error
        """
        p = self.palette
        x, y, w, h = 30, 30, self.width - 60, 200

        cv2.rectangle(img, (x, y), (x + w, y + h), p['panel'], -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), p['border'], 3)

        cv2.putText(img, "CALCULADORA", (x + 20, y + 40),
                   cv2.FONT_HERSHEY_DUPLEX, 1.0, p['title'], 2)

        expr = to_display_text(calc.get_expression())
        if expr:
            cv2.putText(img, expr, (x + 20, y + 85),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.9, p['expression'], 2)

        display = to_display_text(calc.get_display())

        color = p['text']
        if calc.is_error():
            color = p['error']
        elif calc.result_displayed:
            color = p['result']

        # Reducir fuente para números largos
        font_scale = 2.5 if len(display) < 12 else 1.5
        cv2.putText(img, display, (x + 20, y + 170),
                   cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 3)

        # Cursor parpadeante (solo mientras se edita)
        if not calc.result_displayed and int(time.time() * 2) % 2 == 0:
            text_w = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, font_scale, 3)[0][0]
            cx = x + 30 + text_w
            cv2.line(img, (cx, y + 125), (cx, y + 175), p['cursor'], 3)

    def draw_history(self, img, calc):
        """
        Dibuja el historial de cálculos (el más reciente abajo).

        Cada línea: "expresión = resultado"
        """
        p = self.palette
        x, y = 30, 250
        w, h = self.width - 60, self.height - y - 70

        cv2.rectangle(img, (x, y), (x + w, y + h), p['panel'], -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), p['muted'], 2)

        cv2.putText(img, "HISTORIAL", (x + 20, y + 35),
                   cv2.FONT_HERSHEY_DUPLEX, 0.8, p['border'], 2)

        line_height = 28
        max_lines = max((h - 55) // line_height, 0)
        entries = calc.get_history()
        visible = entries[-max_lines:] if max_lines else []

        cy = y + 70
        for entry in visible:
            cv2.putText(img, to_display_text(str(entry)), (x + 20, cy),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.7, p['expression'], 1)
            cy += line_height

    def draw_help(self, img):
        cv2.putText(img, HELP_TEXT, (30, self.height - 30),
                   cv2.FONT_HERSHEY_SIMPLEX, 0.5, self.palette['muted'], 1)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal sobre el historial.

        Efecto:
            - Fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            # Calcular alpha para fade-out suave
            alpha = min(self.feedback_timer / 20.0, 1.0)

            x, y = self.width // 2 - 200, self.height - 100

            overlay = img.copy()
            cv2.rectangle(overlay, (x - 20, y - 40), (x + 420, y + 12), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, to_display_text(self.feedback_msg), (x, y),
                       cv2.FONT_HERSHEY_DUPLEX, 1.0, color, 2)
