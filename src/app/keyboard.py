"""
Mapeo de teclado a acciones de la calculadora.

Traduce teclas (por nombre) a acciones, y los códigos que devuelve
cv2.waitKey a nombres de tecla.
"""

# Códigos de cv2.waitKey (tras & 0xFF)
KEY_ENTER = (13, 10)
KEY_BACKSPACE = (8, 127)
KEY_ESCAPE = 27
NO_KEY = 255

# HighGUI no informa de modificadores: 'A' (mayúscula) equivale a Shift+Escape
CLEAR_ALL_ALIAS = "A"
TOGGLE_THEME_KEY = "t"
QUIT_KEY = "q"


def key_name_from_code(code):
    """
    Convierte un código de cv2.waitKey en nombre de tecla.

    Args:
        code (int): Valor devuelto por cv2.waitKey(...)

    Returns:
        tuple: (nombre, shift) ej: ("Enter", False), ("Escape", True),
        o (None, False) si no hay tecla o no es reconocible
    """
    if code < 0:
        return None, False
    code &= 0xFF
    if code == NO_KEY:
        return None, False
    if code in KEY_ENTER:
        return "Enter", False
    if code in KEY_BACKSPACE:
        return "Backspace", False
    if code == KEY_ESCAPE:
        return "Escape", False

    ch = chr(code)
    if ch == CLEAR_ALL_ALIAS:
        return "Escape", True
    if ch.isprintable():
        return ch, False
    return None, False


def action_for_key(key, shift=False):
    """
    Acción asociada a una tecla.

    Args:
        key (str): Nombre de tecla ("7", ".", "+", "Enter", "Escape"...)
        shift (bool): True si Shift estaba pulsado

    Returns:
        tuple | None: (acción, argumento) o None si la tecla no hace nada

    Mapeo:
        - 0-9 y "."      → ("digit", tecla)
        - + - * /        → ("operator", " op ") con espacios alrededor
        - Enter          → ("compute", None)
        - Backspace      → ("backspace", None)
        - Escape         → ("clear", None)
        - Shift+Escape   → ("clear_all", None)
        - t / q          → ("toggle_theme", None) / ("quit", None)
    """
    if key is None:
        return None
    if len(key) == 1 and key in "0123456789.":
        return "digit", key
    if key in ("+", "-", "*", "/"):
        return "operator", f" {key} "
    if key == "Enter":
        return "compute", None
    if key == "Backspace":
        return "backspace", None
    if key == "Escape":
        return ("clear_all", None) if shift else ("clear", None)
    if key == TOGGLE_THEME_KEY:
        return "toggle_theme", None
    if key == QUIT_KEY:
        return "quit", None
    return None
