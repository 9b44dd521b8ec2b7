"""
Punto de entrada de la calculadora.

Uso:
    python3 src/main.py [--light] [--history N] [--debug] [--log-file RUTA]
"""

import argparse
import logging
import traceback

from app.calculator_app import CalculatorApp
from config.logging_config import setup_logging
from config.settings import CalculatorConfig


def build_config(argv=None):
    """
    Construye la configuración a partir de la línea de comandos.

    Args:
        argv (list): Argumentos (None = sys.argv)

    Returns:
        tuple: (CalculatorConfig, nivel de logging, archivo de log o None)
    """
    parser = argparse.ArgumentParser(description="Calculadora de expresiones por teclado")
    parser.add_argument('--light', action='store_true', help="Usar tema claro")
    parser.add_argument('--history', type=int, default=None,
                        help="Número de cálculos en el historial (10 por defecto)")
    parser.add_argument('--debug', action='store_true', help="Logging detallado")
    parser.add_argument('--log-file', default=None, help="Guardar también el log en este archivo")
    args = parser.parse_args(argv)

    config = CalculatorConfig()
    if args.light:
        config.dark_mode = False
    if args.history is not None:
        if args.history < 1:
            parser.error("--history debe ser al menos 1")
        config.history_limit = args.history

    level = logging.DEBUG if args.debug else logging.INFO
    return config, level, args.log_file


def main(argv=None):
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback
    """
    config, level, log_file = build_config(argv)
    setup_logging(level, log_file)
    try:
        app = CalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        # Usuario presionó Ctrl+C
        print("\nInterrumpido por el usuario")
    except Exception as e:
        # Error inesperado - mostrar información completa
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    raise SystemExit(main())
