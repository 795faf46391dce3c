"""Streamlit front end for Promptraits.

Features:
- Prompt text plus optional selfie and reference uploads
- Uploads normalized to JPEG before sending
- In-process generation with Gemini, or a deployed handler endpoint
- Download of the generated prompt
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from promptraits.config import load_settings
from promptraits.errors import InvalidRequest, PromptraitsError
from promptraits.images import encode_image
from promptraits.models import GenerationTrace, PromptRequest
from promptraits.remote import PromptraitsClient
from promptraits.service import PromptraitsService, build_service

load_dotenv()
logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="Promptraits",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource
def get_service(api_key: str) -> PromptraitsService:
    # Built once per key so the knowledge base is read a single time.
    return build_service(load_settings(api_key=api_key or None))


def init_session_state():
    defaults = {
        "last_result": "",
        "last_trace": None,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


init_session_state()

# ============================================================================
# Sidebar: backend selection
# ============================================================================

with st.sidebar:
    st.markdown("### Configuration")

    backend = st.radio(
        "Backend",
        options=["local", "remote"],
        format_func=lambda x: "Gemini (in-process)" if x == "local" else "Deployed endpoint",
    )

    if backend == "local":
        api_key = st.text_input(
            "Gemini API Key",
            value="",
            type="password",
            help="Optional: leave blank to use GEMINI_API_KEY or GOOGLE_API_KEY from your environment/.env.",
        )
        if api_key:
            st.caption("Using Gemini key from sidebar input.")
        elif os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY"):
            st.caption("Using Gemini key from environment (.env).")
        else:
            st.warning("No Gemini key configured.")
        endpoint_url = ""
    else:
        api_key = ""
        endpoint_url = st.text_input(
            "Endpoint URL",
            value=os.environ.get("PROMPTRAITS_ENDPOINT", ""),
            placeholder="https://example.netlify.app/.netlify/functions/gemini-processor",
        )

    max_side = st.slider("Max image side (px)", 512, 2048, 1536, 128)

# ============================================================================
# Main area
# ============================================================================

st.title("Promptraits")
st.caption("Prompts fotorrealistas de retrato a partir de texto, selfie y referencia")

prompt = st.text_area(
    "Describe el retrato",
    height=120,
    placeholder="e.g., retrato editorial en estudio, luz Rembrandt, fondo gris oscuro",
)

col_selfie, col_ref = st.columns(2)
with col_selfie:
    selfie_file = st.file_uploader("Selfie (rostro a preservar)", type=["png", "jpg", "jpeg", "webp"])
    if selfie_file is not None:
        st.image(selfie_file, use_container_width=True)
with col_ref:
    reference_file = st.file_uploader("Referencia (estilo a emular)", type=["png", "jpg", "jpeg", "webp"])
    if reference_file is not None:
        st.image(reference_file, use_container_width=True)

if st.button("Generar prompt", type="primary", use_container_width=True):
    try:
        request = PromptRequest(
            prompt=prompt.strip() or None,
            selfie=encode_image(selfie_file.getvalue(), max_side) if selfie_file else None,
            reference=encode_image(reference_file.getvalue(), max_side) if reference_file else None,
        )
        trace = GenerationTrace()
        with st.spinner("Gemini está generando el prompt..."):
            if backend == "local":
                result = get_service(api_key).generate(request, trace)
            else:
                result = PromptraitsClient(endpoint_url).generate(request)
        st.session_state["last_result"] = result
        st.session_state["last_trace"] = trace if backend == "local" else None
    except InvalidRequest as e:
        st.warning(e.message)
    except (PromptraitsError, ValueError) as e:
        st.error(f"{e}" + (f"\n\n{e.details}" if getattr(e, "details", None) else ""))

result = st.session_state["last_result"]
if result:
    st.subheader("Prompt generado")
    st.code(result, language=None)

    trace = st.session_state["last_trace"]
    if trace is not None:
        m1, m2 = st.columns(2)
        m1.metric("Content parts", trace.part_count)
        m2.metric("Length", f"{trace.output_chars} chars")

    st.download_button(
        "Download prompt",
        data=result,
        file_name="promptraits_prompt.txt",
        mime="text/plain",
    )
