"""Configuración de logging para el espacio de nombres `molcore`.

La biblioteca nunca configura handlers al importarse; las aplicaciones
llaman a `setup_logging` si quieren ver los registros de mutación.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configura el logger `molcore` con salida a consola y archivo opcional.

    Args:
        level: Nivel de logging (p. ej., `logging.DEBUG`).
        log_file: Ruta opcional donde duplicar los registros.

    Returns:
        El logger raíz del paquete ya configurado.

    Side Effects:
        Sustituye los handlers previos del logger `molcore`.
    """
    logger = logging.getLogger("molcore")
    logger.setLevel(level)

    # Evita registros duplicados si se reconfigura.
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
