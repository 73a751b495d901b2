# --------------------------------------------------------------
# File: services.py
# Description: Servicios del bridge texto-a-texto consumidos por la app móvil.
# --------------------------------------------------------------
"""Capa de servicios que convierte las operaciones del códec en valores JSON.

Ninguna función de este módulo lanza excepciones por entradas incorrectas: los
errores del códec viajan como `BridgeResponse` con `ok=False`. Todo valor que
cruza el bridge es un `str` inmutable devuelto por valor, de modo que el
llamante es su único propietario y no hay nada que liberar.
"""

import json
import logging
from typing import IO

from pydantic import ValidationError

from passpot_core.envelope import decrypt, encrypt, generate_key, inspect_envelope
from passpot_core.errors import EnvelopeError
from passpot_core.models import BridgeRequest, BridgeResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "InvalidRequest"

# Campos obligatorios por operación.
REQUIRED_FIELDS = {
    "generate_key": (),
    "encrypt": ("plaintext", "key"),
    "decrypt": ("envelope", "key"),
    "inspect": ("envelope",),
}


def bridge_generate_key() -> BridgeResponse:
    """Genera una clave nueva.

    Returns:
        BridgeResponse: Clave en Base64 dentro de `value`.
    """

    return BridgeResponse.success(generate_key())


def bridge_encrypt(plaintext: str, key: str) -> BridgeResponse:
    """Cifra `plaintext` con `key` y devuelve el sobre o el error etiquetado.

    Args:
        plaintext (str): Texto en claro.
        key (str): Clave en Base64.

    Returns:
        BridgeResponse: Sobre en `value` o error con su código.
    """

    try:
        return BridgeResponse.success(encrypt(plaintext, key))
    except EnvelopeError as exc:
        return BridgeResponse.failure(exc.code, exc.message)


def bridge_decrypt(envelope: str, key: str) -> BridgeResponse:
    """Descifra `envelope` con `key` y devuelve el texto o el error etiquetado.

    Args:
        envelope (str): Sobre en Base64.
        key (str): Clave en Base64.

    Returns:
        BridgeResponse: Texto en claro en `value` o error con su código.
    """

    try:
        return BridgeResponse.success(decrypt(envelope, key))
    except EnvelopeError as exc:
        return BridgeResponse.failure(exc.code, exc.message)


def bridge_inspect(envelope: str) -> BridgeResponse:
    """Devuelve los componentes del sobre como objeto JSON en `value`."""

    try:
        parts = inspect_envelope(envelope)
    except EnvelopeError as exc:
        return BridgeResponse.failure(exc.code, exc.message)
    return BridgeResponse.success(json.dumps(parts.to_b64(), separators=(",", ":")))


def dispatch(request: BridgeRequest) -> BridgeResponse:
    """Ejecuta la operación indicada por una petición ya validada.

    Args:
        request (BridgeRequest): Petición deserializada.

    Returns:
        BridgeResponse: Resultado de la operación.
    """

    missing = [name for name in REQUIRED_FIELDS[request.op] if getattr(request, name) is None]
    if missing:
        logger.warning("Petición %s sin campos: %s", request.op, ", ".join(missing))
        return BridgeResponse.failure(
            INVALID_REQUEST, f"Missing field(s) for {request.op}: {', '.join(missing)}"
        )

    logger.debug("Operación %s", request.op)
    if request.op == "generate_key":
        return bridge_generate_key()
    if request.op == "encrypt":
        return bridge_encrypt(request.plaintext, request.key)
    if request.op == "decrypt":
        return bridge_decrypt(request.envelope, request.key)
    return bridge_inspect(request.envelope)


def handle_message(raw: str) -> str:
    """Procesa un mensaje JSON y devuelve la respuesta JSON.

    Args:
        raw (str): Petición serializada, p. ej. ``{"op": "encrypt", ...}``.

    Returns:
        str: `BridgeResponse` serializada; nunca lanza por entradas inválidas.
    """

    try:
        request = BridgeRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Petición rechazada: %d error(es) de validación", exc.error_count())
        response = BridgeResponse.failure(INVALID_REQUEST, "Invalid request")
    else:
        response = dispatch(request)
    return response.model_dump_json()


def serve(stdin: IO[str], stdout: IO[str]) -> int:
    """Atiende peticiones JSON-lines hasta EOF.

    Args:
        stdin (IO[str]): Flujo de entrada con una petición por línea.
        stdout (IO[str]): Flujo de salida; una respuesta por petición.

    Returns:
        int: Número de peticiones atendidas.
    """

    handled = 0
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        stdout.write(handle_message(line) + "\n")
        stdout.flush()
        handled += 1
    return handled
