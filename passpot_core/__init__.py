# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de sobres AES-256-GCM.
# --------------------------------------------------------------
"""Inicializa el paquete `passpot_core` y reexporta las operaciones del códec."""

from passpot_core.envelope import decrypt, encrypt, generate_key, inspect_envelope
from passpot_core.errors import (
    DecryptionFailed,
    EncryptedDataTooShort,
    EncryptionFailed,
    EnvelopeError,
    InvalidEncryptedData,
    InvalidKeyFormat,
    InvalidKeyLength,
    InvalidUtf8Plaintext,
)

__all__ = [
    "DecryptionFailed",
    "EncryptedDataTooShort",
    "EncryptionFailed",
    "EnvelopeError",
    "InvalidEncryptedData",
    "InvalidKeyFormat",
    "InvalidKeyLength",
    "InvalidUtf8Plaintext",
    "decrypt",
    "encrypt",
    "generate_key",
    "inspect_envelope",
]
