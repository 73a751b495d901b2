# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: claves nuevas y fuentes aleatorias deterministas.
# --------------------------------------------------------------

import itertools
from typing import Callable

import pytest

from passpot_core.envelope import generate_key


@pytest.fixture
def key() -> str:
    """Devuelve una clave AES-256 recién generada en Base64.

    Returns:
        str: Clave de 32 bytes codificada.
    """
    return generate_key()


@pytest.fixture
def other_key() -> str:
    """Devuelve una segunda clave válida distinta de `key`."""
    return generate_key()


@pytest.fixture
def counter_rng() -> Callable[[int], bytes]:
    """Fuente determinista: cada llamada devuelve bytes repetidos de un contador.

    Returns:
        Callable[[int], bytes]: Sustituto de `os.urandom` para pruebas estructurales.
    """
    counter = itertools.count(1)

    def _rng(size: int) -> bytes:
        return bytes([next(counter) % 256]) * size

    return _rng
