"""
Configuración de logging.

Prepara el logger raíz de la aplicación (consola y, opcionalmente, archivo).
"""

import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configura el logger raíz.

    Args:
        level (int): Nivel de logging (ej: logging.DEBUG, logging.INFO)
        log_file (str): Ruta opcional de un archivo de log
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Evitar handlers duplicados si se llama más de una vez
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging inicializado")
