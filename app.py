"""
Streamlit frontend for the AI Logo Animator.

This is the main entry point for the application. It renders the session state
owned by the WorkflowController and wires the widgets to its operations:
design a logo with Imagen, then animate it with Veo.

Environment Variables:
- GEMINI_API_KEY or GOOGLE_GENAI_API_KEY: Gemini key (can also be entered in the sidebar)
- LOGO_IMAGE_MODEL: (Optional) Imagen model (default: imagen-4.0-generate-001)
- LOGO_VIDEO_MODEL: (Optional) Veo model (default: veo-2.0-generate-001)
- LOGO_VIDEO_POLL_SECONDS: (Optional) Veo operation poll interval (default: 10)
- LOGO_ANIMATOR_OUTPUT_DIR: (Optional) Where downloaded clips are stored (default: outputs)
"""

import asyncio
import base64

import streamlit as st
from dotenv import load_dotenv

from logo_animator import (
    AspectRatio,
    ApiKeyCredentialProvider,
    BILLING_DOCS_URL,
    GeminiGenerationClient,
    LogoAnimatorError,
    WorkflowController,
    load_settings,
    split_data_url,
)

# Load environment variables from .env file
load_dotenv()

# ---------- Streamlit Page Configuration ----------
st.set_page_config(
    page_title="AI Logo Animator",
    page_icon="🎨",
    layout="wide"
)


def _image_bytes(data_url: str) -> bytes:
    return base64.b64decode(split_data_url(data_url)[1])


def _run(coro):
    """Run a controller coroutine; failures are already in state.error."""
    try:
        return asyncio.run(coro)
    except LogoAnimatorError:
        return None


def _get_controller() -> WorkflowController:
    controller = st.session_state.get("controller")
    if controller is None or controller.closed:
        settings = load_settings()
        credentials = ApiKeyCredentialProvider(
            api_key=settings.api_key,
            selector=lambda: st.session_state.get("api_key_input", ""),
        )
        controller = WorkflowController(
            client=GeminiGenerationClient(credentials, settings),
            credentials=credentials,
            message_interval=settings.message_interval_seconds,
        )
        st.session_state["controller"] = controller
        _run(controller.refresh_credential_status())
    return controller


controller = _get_controller()
state = controller.state

# ---------- Main UI ----------
st.title("🎨 AI Logo Animator")
st.markdown("_From Concept to Motion in Two Steps._")

# ---------- Sidebar: API Key ----------
with st.sidebar:
    st.markdown("**API Key**")
    st.text_input(
        "Google AI API Key",
        type="password",
        key="api_key_input",
        help="Your API key from Google AI Studio (ai.google.dev). Used when you click 'Select API Key'."
    )
    if state.has_credential:
        st.caption("✅ API key selected")
    else:
        st.caption("⚠️ No API key selected")

if state.error:
    st.error(f"**Error:** {state.error}")

col_logo, col_anim = st.columns(2)

# ---------- Step 1: Design Logo ----------
with col_logo:
    st.header("1️⃣ Design Your Logo")
    st.markdown("_Describe the logo you want to create. Be as specific as possible for the best results._")
    logo_prompt = st.text_area(
        "Logo description",
        value=state.logo_prompt,
        key="logo_prompt_input",
        placeholder="e.g., A majestic lion wearing a crown, in a vector art style...",
        disabled=state.is_generating_logo,
        height=120,
    )
    if not state.is_generating_logo:
        controller.set_logo_prompt(logo_prompt)

    if st.button("Generate Logo", type="primary", disabled=state.is_generating_logo, use_container_width=True):
        with st.spinner("Generating..."):
            _run(controller.request_logo())
        st.rerun()

    if state.generated_logo:
        st.image(_image_bytes(state.generated_logo), caption="Generated Logo")
    else:
        st.info("💡 Your generated logo will appear here.")

# ---------- Step 2: Animate Logo ----------
with col_anim:
    st.header("2️⃣ Animate Your Logo")

    if not state.logo_to_animate:
        st.info("Generate or upload a logo to begin animation.")

    uploaded = st.file_uploader(
        "Upload different" if state.logo_to_animate else "Or upload a logo",
        type=["png", "jpg", "jpeg", "webp"],
        disabled=state.is_generating_video,
        help="Replaces the image that will be animated"
    )
    if uploaded is not None:
        upload_id = getattr(uploaded, "file_id", None) or f"{uploaded.name}:{uploaded.size}"
        if st.session_state.get("last_upload_id") != upload_id:
            st.session_state["last_upload_id"] = upload_id
            try:
                controller.replace_animation_input(uploaded)
            except LogoAnimatorError:
                pass
            st.rerun()

    if state.logo_to_animate:
        st.image(_image_bytes(state.logo_to_animate), caption="Logo to animate", width=200)

        st.markdown("_Describe how you want to animate this logo._")
        animation_prompt = st.text_area(
            "Animation description",
            value=state.animation_prompt,
            key="animation_prompt_input",
            placeholder="e.g., The logo zooms in with a glitch effect...",
            disabled=state.is_generating_video,
            height=100,
        )
        ratio_options = list(AspectRatio)
        ratio = st.radio(
            "Aspect Ratio:",
            ratio_options,
            index=ratio_options.index(state.aspect_ratio),
            format_func=lambda r: r.label,
            horizontal=True,
            disabled=state.is_generating_video,
        )
        if not state.is_generating_video:
            controller.set_animation_prompt(animation_prompt)
            controller.set_aspect_ratio(ratio)

        if not state.has_credential:
            st.warning("Video generation requires an API key.")
            st.caption(f"Billing is required for Veo. [Learn more]({BILLING_DOCS_URL}).")
            if st.button("Select API Key"):
                _run(controller.select_credential())
                st.rerun()
        elif st.button("Generate Animation", type="primary", disabled=state.is_generating_video, use_container_width=True):
            message_placeholder = st.empty()
            controller.progress_listener = lambda msg: message_placeholder.info(f"⏳ {msg}")
            try:
                with st.spinner("Animating..."):
                    _run(controller.request_animation())
            finally:
                controller.progress_listener = None
            st.rerun()

        if state.generated_video:
            st.video(state.generated_video, loop=True, autoplay=True)
        else:
            st.info("💡 Your animated logo will appear here.")

st.caption("Built with Streamlit + Google Gemini (Imagen & Veo).")
