# --------------------------------------------------------------
# File: __init__.py
# Description: Bridge texto-a-texto entre la app móvil y el códec.
# --------------------------------------------------------------
"""Inicializa el paquete `passpot_bridge`."""

from passpot_bridge.services import (
    bridge_decrypt,
    bridge_encrypt,
    bridge_generate_key,
    bridge_inspect,
    handle_message,
    serve,
)

__all__ = [
    "bridge_decrypt",
    "bridge_encrypt",
    "bridge_generate_key",
    "bridge_inspect",
    "handle_message",
    "serve",
]
