# --------------------------------------------------------------
# File: envelope.py
# Description: Generación de claves y cifrado/descifrado de sobres en Base64.
# --------------------------------------------------------------
"""Códec de sobres `nonce || ciphertext || tag` codificados en Base64 estándar.

El formato no lleva versión, identificador de clave ni algoritmo: los bytes
``[0:12]`` son el nonce y ``[12:]`` el ciphertext con la etiqueta de 16 bytes
al final. Cualquier cambio en esa disposición rompe los sobres existentes.
"""

import base64
import binascii
import logging
import os

from cryptography.exceptions import InvalidTag

from passpot_core.crypto_sym import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    RandomSource,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    random_bytes,
)
from passpot_core.errors import (
    DecryptionFailed,
    EncryptedDataTooShort,
    EncryptionFailed,
    InvalidEncryptedData,
    InvalidKeyFormat,
    InvalidKeyLength,
    InvalidUtf8Plaintext,
)
from passpot_core.models import EnvelopeParts

logger = logging.getLogger(__name__)


def _b64d(value: str) -> bytes:
    """Decodifica Base64 estándar canónico: relleno obligatorio y bits sobrantes a cero."""

    raw = base64.b64decode(value, validate=True)
    if base64.b64encode(raw).decode("ascii") != value:
        raise binascii.Error("Base64 no canónico")
    return raw


def _decode_key(key: str) -> bytes:
    try:
        return _b64d(key)
    except (TypeError, ValueError) as exc:
        logger.debug("Clave rechazada: %s", InvalidKeyFormat.code)
        raise InvalidKeyFormat() from exc


def _require_key_length(key_bytes: bytes) -> None:
    if len(key_bytes) != KEY_SIZE:
        logger.debug("Clave rechazada: %s (%d bytes)", InvalidKeyLength.code, len(key_bytes))
        raise InvalidKeyLength()


def _decode_envelope(envelope: str) -> bytes:
    try:
        return _b64d(envelope)
    except (TypeError, ValueError) as exc:
        logger.debug("Sobre rechazado: %s", InvalidEncryptedData.code)
        raise InvalidEncryptedData() from exc


def generate_key(*, rng: RandomSource = os.urandom) -> str:
    """Genera una clave AES-256 aleatoria.

    Args:
        rng (RandomSource): Fuente criptográficamente segura de bytes.

    Returns:
        str: 32 bytes codificados en Base64 estándar (44 caracteres).

    """

    return base64.b64encode(random_bytes(rng, KEY_SIZE)).decode("ascii")


def encrypt(plaintext: str, key: str, *, rng: RandomSource = os.urandom) -> str:
    """Cifra texto en UTF-8 y devuelve el sobre en Base64.

    Args:
        plaintext (str): Texto en claro.
        key (str): Clave de 32 bytes en Base64 estándar.
        rng (RandomSource): Fuente del nonce, consultada en cada llamada.

    Returns:
        str: Base64 de `nonce || ciphertext || tag`.

    Raises:
        InvalidKeyFormat: Si la clave no es Base64 válido.
        InvalidKeyLength: Si la clave no decodifica a 32 bytes.
        EncryptionFailed: Si el texto no se puede codificar o AES-GCM lo rechaza.

    """

    key_bytes = _decode_key(key)
    _require_key_length(key_bytes)

    try:
        data = plaintext.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.debug("Cifrado rechazado: %s (texto no codificable)", EncryptionFailed.code)
        raise EncryptionFailed() from exc

    try:
        sealed = aes_gcm_encrypt_with_key(key_bytes, data, rng)
    except (OverflowError, ValueError) as exc:
        logger.debug("Cifrado rechazado: %s", EncryptionFailed.code)
        raise EncryptionFailed() from exc

    return base64.b64encode(sealed).decode("ascii")


def decrypt(envelope: str, key: str) -> str:
    """Descifra un sobre en Base64 y devuelve el texto original.

    Args:
        envelope (str): Sobre producido por :func:`encrypt`.
        key (str): Clave de 32 bytes en Base64 estándar.

    Returns:
        str: Texto en claro.

    Raises:
        InvalidKeyFormat: Si la clave no es Base64 válido.
        InvalidEncryptedData: Si el sobre no es Base64 válido.
        EncryptedDataTooShort: Si el sobre no contiene un nonce completo.
        InvalidKeyLength: Si la clave no decodifica a 32 bytes.
        DecryptionFailed: Si la etiqueta no verifica (manipulación o clave errónea).
        InvalidUtf8Plaintext: Si el claro recuperado no es UTF-8.

    """

    key_bytes = _decode_key(key)
    raw = _decode_envelope(envelope)
    if len(raw) < NONCE_SIZE:
        logger.debug("Sobre rechazado: %s (%d bytes)", EncryptedDataTooShort.code, len(raw))
        raise EncryptedDataTooShort()

    nonce, ct_full = raw[:NONCE_SIZE], raw[NONCE_SIZE:]
    _require_key_length(key_bytes)

    try:
        data = aes_gcm_decrypt_with_key(key_bytes, nonce, ct_full)
    except InvalidTag:
        logger.debug("Descifrado rechazado: %s", DecryptionFailed.code)
        raise DecryptionFailed() from None

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.debug("Descifrado rechazado: %s", InvalidUtf8Plaintext.code)
        raise InvalidUtf8Plaintext() from exc


def inspect_envelope(envelope: str) -> EnvelopeParts:
    """Separa un sobre en nonce, ciphertext y tag sin autenticarlo.

    Args:
        envelope (str): Sobre en Base64 estándar.

    Returns:
        EnvelopeParts: Componentes binarios del sobre.

    Raises:
        InvalidEncryptedData: Si el sobre no es Base64 válido.
        EncryptedDataTooShort: Si no caben nonce y etiqueta.

    """

    raw = _decode_envelope(envelope)
    if len(raw) < NONCE_SIZE + TAG_SIZE:
        logger.debug("Inspección rechazada: %s (%d bytes)", EncryptedDataTooShort.code, len(raw))
        raise EncryptedDataTooShort()
    return EnvelopeParts(
        nonce=raw[:NONCE_SIZE],
        ciphertext=raw[NONCE_SIZE:-TAG_SIZE],
        tag=raw[-TAG_SIZE:],
    )
