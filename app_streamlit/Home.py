# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from passpot_core.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Passpot Crypto", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Passpot Crypto")
st.write("Demo del motor de mensajes: claves AES-256 y sobres AES-GCM en Base64.")
st.info("Ve a **Cifrar y Descifrar** para generar una clave y probar el formato del sobre.")
st.code("sobre = base64( nonce[12] || ciphertext || tag[16] )")
