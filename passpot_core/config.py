# --------------------------------------------------------------
# File: config.py
# Description: Variables de entorno y configuración de logging del proyecto.
# --------------------------------------------------------------
"""Configuración cargada desde `.env` y variables de entorno."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("PASSPOT_LOG_LEVEL", "WARNING").upper()
DEMO_KEY = os.getenv("PASSPOT_DEMO_KEY", "")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configura el logging raíz para los puntos de entrada (bridge y UI).

    Args:
        level (Optional[str]): Nivel a aplicar; por defecto `PASSPOT_LOG_LEVEL`.

    Raises:
        ValueError: Si el nombre del nivel no es reconocido por `logging`.

    """

    name = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Nivel de log desconocido: {name}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
