# ui/components/messages.py
import streamlit as st

def flash(message: str, kind: str = "success"):
    """Queue a banner for the next rerun."""
    st.session_state["flash"] = (message, kind)

def render_flash():
    msg = st.session_state.pop("flash", None)
    if not msg:
        return
    text, kind = msg
    if kind == "error":
        st.error(text)
    else:
        st.success(text)
