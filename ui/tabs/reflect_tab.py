# ui/tabs/reflect_tab.py
import streamlit as st

from core.errors import UliError
from core.models import default_scores, with_score
from core.principles import PRINCIPLE_KEYS, PRINCIPLE_LABELS, SCORE_PROMPTS, MIN_SCORE, MAX_SCORE
from core.store import LocalStore
from services.reflection_service import submit_reflection
from ui.components.messages import flash

def render_reflect_tab(store: LocalStore, USER_ID: str):
    st.header("✍️ Reflect & Log Your Inner State")
    st.caption("Take a moment to reflect on your recent experiences and assess your awareness levels (1=Low, 10=High).")

    with st.form("reflection_form", clear_on_submit=True):
        reflection = st.text_area(
            "Your Reflection (Describe a recent experience or insight):", height=160,
            placeholder="E.g., 'Today, I noticed how my frustration with a task was a repeating pattern...'",
        )
        tags_text = st.text_input(
            "Tags (e.g., meditation, work, insight, challenge):",
            placeholder="Separate tags with commas, e.g., focus, clarity, challenge",
        )
        scores = default_scores()
        cols = st.columns(2)
        for i, key in enumerate(PRINCIPLE_KEYS):
            with cols[i % 2]:
                val = st.slider(PRINCIPLE_LABELS[key], MIN_SCORE, MAX_SCORE, scores[key],
                                help=SCORE_PROMPTS[key], key=f"score_{key}")
                scores = with_score(scores, key, val)
        submitted = st.form_submit_button("💾 Log Reflection & Update Scores", use_container_width=True)

    if submitted:
        try:
            submit_reflection(store, USER_ID, reflection, tags_text, scores)
        except UliError as e:
            st.error(f"Failed to log reflection: {e}")
            return
        flash("Reflection logged and scores updated successfully!")
        st.rerun()
