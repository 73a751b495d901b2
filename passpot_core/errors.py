# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del códec de sobres cifrados.
# --------------------------------------------------------------
"""Excepciones con código estable que el bridge traduce a valores de texto."""

from typing import Optional


class EnvelopeError(Exception):
    """Error base del códec.

    Attributes:
        code (str): Identificador estable del error, expuesto a la app móvil.
        message (str): Descripción legible para el usuario.

    """

    code = "EnvelopeError"
    message = "Envelope error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidKeyFormat(EnvelopeError):
    """La clave no es Base64 estándar válido."""

    code = "InvalidKeyFormat"
    message = "Invalid key format"


class InvalidKeyLength(EnvelopeError):
    """La clave decodificada no mide exactamente 32 bytes."""

    code = "InvalidKeyLength"
    message = "Invalid key length"


class InvalidEncryptedData(EnvelopeError):
    """El sobre no es Base64 estándar válido."""

    code = "InvalidEncryptedData"
    message = "Invalid encrypted data"


class EncryptedDataTooShort(EnvelopeError):
    """El sobre decodificado no alcanza para contener el nonce."""

    code = "EncryptedDataTooShort"
    message = "Encrypted data too short"


class EncryptionFailed(EnvelopeError):
    """AES-GCM rechazó el texto o éste no se pudo codificar en UTF-8."""

    code = "EncryptionFailed"
    message = "Encryption failed"


class DecryptionFailed(EnvelopeError):
    """Fallo de autenticación: manipulación, truncado o clave incorrecta."""

    code = "DecryptionFailed"
    message = "Decryption failed"


class InvalidUtf8Plaintext(EnvelopeError):
    """El claro autenticado no es UTF-8 válido."""

    code = "InvalidUtf8Plaintext"
    message = "Invalid UTF-8 plaintext"
