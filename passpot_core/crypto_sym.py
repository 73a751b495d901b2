# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas AES-256-GCM con fuente de aleatoriedad inyectable."""

import os
from typing import Callable

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16

RandomSource = Callable[[int], bytes]


def random_bytes(rng: RandomSource, size: int) -> bytes:
    """Extrae `size` bytes de la fuente aleatoria comprobando su longitud.

    Args:
        rng (RandomSource): Proveedor de bytes aleatorios (p. ej. `os.urandom`).
        size (int): Número de bytes requeridos.

    Returns:
        bytes: Bytes aleatorios de la longitud solicitada.

    Raises:
        RuntimeError: Si la fuente devuelve una longitud distinta.

    """

    data = rng(size)
    if len(data) != size:
        raise RuntimeError(f"La fuente aleatoria devolvió {len(data)} bytes en lugar de {size}")
    return bytes(data)


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, rng: RandomSource = os.urandom
) -> bytes:
    """Cifra datos con AES-GCM sin datos asociados y un nonce nuevo.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.
        rng (RandomSource): Fuente del nonce de 96 bits.

    Returns:
        bytes: `nonce || ciphertext || tag`.

    """

    nonce = random_bytes(rng, NONCE_SIZE)
    aes = AESGCM(key)
    return nonce + aes.encrypt(nonce, plaintext, None)


def aes_gcm_decrypt_with_key(key: bytes, nonce: bytes, ct_full: bytes) -> bytes:
    """Descifra `ciphertext || tag` con AES-GCM sin datos asociados.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Vector de inicialización de 96 bits.
        ct_full (bytes): Datos cifrados con la etiqueta de 128 bits al final.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la etiqueta no verifica.

    """

    aes = AESGCM(key)
    return aes.decrypt(nonce, ct_full, None)
