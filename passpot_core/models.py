# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

import base64
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict


class EnvelopeParts(BaseModel):
    """Representa un sobre AES-GCM separado en sus tres componentes.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    def to_b64(self) -> Dict[str, str]:
        """Devuelve los componentes codificados en Base64 estándar."""

        return {
            "nonce": base64.b64encode(self.nonce).decode("ascii"),
            "ciphertext": base64.b64encode(self.ciphertext).decode("ascii"),
            "tag": base64.b64encode(self.tag).decode("ascii"),
        }


class BridgeRequest(BaseModel):
    """Mensaje recibido desde la app móvil a través del bridge.

    Attributes:
        op (str): Operación solicitada.
        plaintext (Optional[str]): Texto a cifrar (`encrypt`).
        envelope (Optional[str]): Sobre en Base64 (`decrypt`, `inspect`).
        key (Optional[str]): Clave en Base64 (`encrypt`, `decrypt`).

    """

    model_config = ConfigDict(extra="forbid")

    op: Literal["generate_key", "encrypt", "decrypt", "inspect"]
    plaintext: Optional[str] = None
    envelope: Optional[str] = None
    key: Optional[str] = None


class BridgeError(BaseModel):
    """Error etiquetado que viaja como valor de texto hacia el llamante."""

    code: str
    message: str


class BridgeResponse(BaseModel):
    """Respuesta del bridge: o bien `value`, o bien `error`, nunca ambos.

    Attributes:
        ok (bool): Indica si la operación tuvo éxito.
        value (Optional[str]): Resultado textual cuando `ok` es verdadero.
        error (Optional[BridgeError]): Detalle del fallo cuando `ok` es falso.

    """

    ok: bool
    value: Optional[str] = None
    error: Optional[BridgeError] = None

    @classmethod
    def success(cls, value: str) -> "BridgeResponse":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, code: str, message: str) -> "BridgeResponse":
        return cls(ok=False, error=BridgeError(code=code, message=message))
