# --------------------------------------------------------------
# File: 1_Cifrar_y_Descifrar.py
# Description: Genera claves y cifra/descifra mensajes cortos desde Streamlit.
# --------------------------------------------------------------

import json

import streamlit as st

from passpot_bridge.services import bridge_decrypt, bridge_encrypt, bridge_generate_key, bridge_inspect
from passpot_core.config import DEMO_KEY

# Presenta el título general de la página.
st.title("✉️ Cifrar y Descifrar")

# La clave vive solo en la sesión del navegador; la app no la persiste.
if "key_b64" not in st.session_state:
    st.session_state["key_b64"] = DEMO_KEY

if st.button("Generar clave nueva", key="btn_keygen"):
    st.session_state["key_b64"] = bridge_generate_key().value

key_b64 = st.text_input("Clave (Base64, 32 bytes)", key="key_b64", type="password")

tab_enc, tab_dec, tab_ins = st.tabs(["Cifrar", "Descifrar", "Inspeccionar"])

# Sección de cifrado de mensajes.
with tab_enc:
    plaintext = st.text_area("Mensaje", key="enc_plain")
    if st.button("Cifrar", key="btn_encrypt", disabled=not key_b64):
        res = bridge_encrypt(plaintext, key_b64)
        if res.ok:
            st.success("Mensaje cifrado (AES-GCM-256).")
            st.code(res.value)
        else:
            st.error(f"{res.error.code}: {res.error.message}")

# Sección de descifrado de sobres.
with tab_dec:
    envelope = st.text_area("Sobre (Base64)", key="dec_env")
    if st.button("Descifrar", key="btn_decrypt", disabled=not key_b64):
        res = bridge_decrypt(envelope.strip(), key_b64)
        if res.ok:
            st.success("Etiqueta verificada.")
            st.code(res.value)
        else:
            st.error(f"{res.error.code}: {res.error.message}")

# Muestra los componentes del sobre sin autenticarlo.
with tab_ins:
    envelope_i = st.text_area("Sobre (Base64)", key="ins_env")
    if st.button("Inspeccionar", key="btn_inspect"):
        res = bridge_inspect(envelope_i.strip())
        if res.ok:
            st.warning("Sin verificar: la inspección no comprueba la etiqueta.")
            st.json(json.loads(res.value))
        else:
            st.error(f"{res.error.code}: {res.error.message}")
