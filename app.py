"""SecureGen -- Streamlit web interface."""

import json

import streamlit as st
import streamlit.components.v1 as components

from securegen import (
    CHARSETS,
    MAX_LENGTH,
    MIN_LENGTH,
    strength_color,
    strength_percent,
)
from securegen.session import GeneratorSession

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=20, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

ICON_FINGERPRINT = _LUCIDE.format(s=20, paths=(
    '<path d="M12 10a2 2 0 0 0-2 2c0 1.02-.1 2.51-.26 4"/>'
    '<path d="M14 13.12c0 2.38 0 6.38-1 8.88"/>'
    '<path d="M17.29 21.02c.12-.6.43-2.3.5-3.02"/>'
    '<path d="M2 12a10 10 0 0 1 18-6"/><path d="M2 16h.01"/>'
    '<path d="M21.8 16c.2-2 .131-5.354 0-6"/>'
    '<path d="M5 19.5C5.5 18 6 15 6 12a6 6 0 0 1 .34-2"/>'
    '<path d="M8.65 22c.21-.66.45-1.32.57-2"/>'
    '<path d="M9 6.8a6 6 0 0 1 9 5.2v2"/>'
))

_TOAST_ICONS = {
    "success": "✅",
    "error": "⚠️",
    "info": "ℹ️",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Secure Generator",
    page_icon="\U0001f511",
    layout="centered",
)

if "session" not in st.session_state:
    st.session_state.session = GeneratorSession()
session: GeneratorSession = st.session_state.session

st.session_state.setdefault("length", session.length)
for _name in CHARSETS:
    st.session_state.setdefault(f"cat_{_name}", session.categories[_name])


def _on_length_change():
    session.on_set_length(st.session_state.length)


def _on_category_change(name: str):
    session.on_toggle(name, st.session_state[f"cat_{name}"])
    # Fallback may have re-enabled a box
    for cat, enabled in session.categories.items():
        st.session_state[f"cat_{cat}"] = enabled


def _on_length_step(delta: int):
    session.on_adjust_length(delta)
    st.session_state.length = session.length


def _copy_to_clipboard(target: str):
    text = session.on_copy(target)
    components.html(
        f"<script>navigator.clipboard.writeText({json.dumps(text)});</script>",
        height=0,
    )


# ── Header ────────────────────────────────────────────────────────────────

st.title("Secure Generator")
st.caption(
    "Random passwords and UUIDs, generated locally with a cryptographically "
    "secure random source. Nothing is sent over the network."
)

tab_password, tab_uuid = st.tabs(["Password", "UUID"])

# ── Password tab ──────────────────────────────────────────────────────────

with tab_password:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_KEY_ROUND} <strong>Generate a password</strong></p>',
        unsafe_allow_html=True,
    )
    col1, col2 = st.columns(2)
    with col1:
        st.slider(
            "Length", MIN_LENGTH, MAX_LENGTH,
            key="length", on_change=_on_length_change,
        )
        minus, plus = st.columns(2)
        minus.button(
            "\u2212", key="length_down",
            on_click=_on_length_step, args=(-1,),
        )
        plus.button(
            "+", key="length_up",
            on_click=_on_length_step, args=(1,),
        )
    with col2:
        for name in CHARSETS:
            st.checkbox(
                name.capitalize(),
                key=f"cat_{name}",
                on_change=_on_category_change,
                args=(name,),
            )

    regen_col, copy_col = st.columns(2)
    if regen_col.button("Regenerate password", key="regen_password", type="primary"):
        session.on_regenerate()
    if copy_col.button("Copy password", key="copy_password"):
        _copy_to_clipboard("password")

    st.code(session.password, language=None)

    label = session.strength["label"]
    color = strength_color(label)
    st.markdown(
        f"**Strength:** <span style='color:{color}'>{label}</span>",
        unsafe_allow_html=True,
    )
    st.progress(strength_percent(session.strength["score"]) / 100)

# ── UUID tab ──────────────────────────────────────────────────────────────

with tab_uuid:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_FINGERPRINT} <strong>Generate a UUID v4</strong></p>',
        unsafe_allow_html=True,
    )
    regen_col, copy_col = st.columns(2)
    if regen_col.button("Regenerate UUID", key="regen_uuid", type="primary"):
        session.on_regenerate_uuid()
    if copy_col.button("Copy UUID", key="copy_uuid"):
        _copy_to_clipboard("uuid")
    st.code(session.uuid, language=None)

# ── Toasts ────────────────────────────────────────────────────────────────

for notice in session.pop_notices():
    st.toast(notice.message, icon=_TOAST_ICONS.get(notice.kind, _TOAST_ICONS["info"]))
