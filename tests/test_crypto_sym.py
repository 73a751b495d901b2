# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado y descifrado simétrico con AES-GCM.
# --------------------------------------------------------------

import os

import pytest
from cryptography.exceptions import InvalidTag

from passpot_core.crypto_sym import (
    NONCE_SIZE,
    TAG_SIZE,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    random_bytes,
)


def test_aes_gcm_roundtrip_ok():
    """Comprueba que un cifrado con AES-GCM pueda revertirse correctamente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    key = os.urandom(32)
    plaintext = os.urandom(128)
    sealed = aes_gcm_encrypt_with_key(key, plaintext)
    assert len(sealed) == NONCE_SIZE + len(plaintext) + TAG_SIZE
    recovered = aes_gcm_decrypt_with_key(key, sealed[:NONCE_SIZE], sealed[NONCE_SIZE:])
    assert recovered == plaintext


def test_aes_gcm_detects_tampering_tag():
    """Garantiza que un tag modificado invalide el descifrado.

    Returns:
        None: Se espera InvalidTag durante la verificación.
    """
    key = os.urandom(32)
    sealed = bytearray(aes_gcm_encrypt_with_key(key, b"msg"))
    sealed[-1] ^= 1
    with pytest.raises(InvalidTag):
        aes_gcm_decrypt_with_key(key, bytes(sealed[:NONCE_SIZE]), bytes(sealed[NONCE_SIZE:]))


def test_aes_gcm_uses_injected_rng_for_nonce():
    """Verifica que el nonce provenga de la fuente inyectada.

    Returns:
        None: Las aserciones comparan el prefijo del resultado con la fuente.
    """
    key = os.urandom(32)
    sealed = aes_gcm_encrypt_with_key(key, b"x", rng=lambda n: b"\x07" * n)
    assert sealed[:NONCE_SIZE] == b"\x07" * NONCE_SIZE


def test_aes_gcm_nonce_uniqueness():
    """Evalúa que los nonces aleatorios generados no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    key = os.urandom(32)
    nonces = set()
    for _ in range(200):
        nonce = aes_gcm_encrypt_with_key(key, b"x")[:NONCE_SIZE]
        assert nonce not in nonces
        nonces.add(nonce)


def test_random_bytes_rejects_short_source():
    """Una fuente que devuelve menos bytes de los pedidos es un fallo fatal."""
    with pytest.raises(RuntimeError):
        random_bytes(lambda n: b"\x00" * (n - 1), 12)
