# ui/tabs/train_tab.py
import time
import streamlit as st

from core.errors import UliError
from core.models import default_scores
from core.principles import EXERCISES, PRINCIPLE_KEYS
from core.store import LocalStore
from core.time_utils import utc_now
from data_access.records_repo import load_current_scores
from services.practice_service import (
    new_timer, start_timer, pause_timer, reset_timer, finish_timer,
    remaining_seconds, is_finished, is_paused, progress_fraction, format_clock, validate_feedback
)
from services.scoring_service import recommend_exercise
from ui.components.messages import flash

def _begin_exercise(key: str):
    ex = EXERCISES[key]
    st.session_state["exercise_key"] = key
    st.session_state["practice_timer"] = start_timer(new_timer(ex.duration), utc_now())
    flash(f"Starting exercise: {ex.title}")
    st.rerun()

def _end_exercise():
    st.session_state.pop("exercise_key", None)
    st.session_state.pop("practice_timer", None)

def render_train_tab(store: LocalStore, USER_ID: str):
    st.header("🏋️ Train Your Awareness")
    st.caption("Engage in targeted exercises to cultivate each principle of advanced awareness.")

    try:
        scores = load_current_scores(store, USER_ID) or default_scores()
    except UliError as e:
        st.error(f"Could not load your scores for a recommendation. ({e})")
        scores = default_scores()

    rec = recommend_exercise(scores)
    with st.container(border=True):
        st.subheader("⭐ Recommended Exercise")
        st.write(rec.title)
        if st.button("▶️ Start Recommended", key="start_recommended"):
            _begin_exercise(rec.key)

    cols = st.columns(2)
    for i, key in enumerate(PRINCIPLE_KEYS):
        ex = EXERCISES[key]
        with cols[i % 2]:
            if st.button(f"{ex.short_title}: {ex.subtitle}", key=f"start_{key}", use_container_width=True):
                _begin_exercise(key)

    key = st.session_state.get("exercise_key")
    if key:
        st.divider()
        _render_exercise(key)

def _render_exercise(key: str):
    ex = EXERCISES[key]
    timer = st.session_state.setdefault("practice_timer", new_timer(ex.duration))
    now = utc_now()

    st.subheader(ex.title)
    st.write(ex.prompt)
    st.caption(f"Principle Focus: {ex.focus}")

    if is_finished(timer, now):
        finish_timer(timer)
        st.success("Time's up! Exercise completed.")

    left = remaining_seconds(timer, now)
    st.markdown(
        f"<div style='font-size:2.6rem;font-weight:700;text-align:center;'>{format_clock(left)}</div>",
        unsafe_allow_html=True,
    )
    st.progress(progress_fraction(timer, now))

    b1, b2, b3 = st.columns(3)
    if timer["running"]:
        if b1.button("⏸️ Pause Timer", use_container_width=True, key="btn_pause"):
            pause_timer(timer, utc_now())
            st.rerun()
    elif left > 0:
        label = "▶️ Resume Timer" if is_paused(timer) else "▶️ Start Timer"
        if b1.button(label, use_container_width=True, key="btn_start"):
            start_timer(timer, utc_now())
            st.rerun()
    if b2.button("🔄 Reset Timer", use_container_width=True, key="btn_reset"):
        reset_timer(timer)
        st.rerun()
    if b3.button("⏹️ Cancel Exercise", use_container_width=True, key="btn_cancel"):
        _end_exercise()
        st.rerun()

    with st.form("exercise_feedback", clear_on_submit=True):
        feedback = st.text_area("Your Experience / Feedback:", height=180, placeholder=ex.feedback_prompt)
        sent = st.form_submit_button("📨 Submit Feedback", use_container_width=True)
    if sent:
        try:
            validate_feedback(feedback)
        except UliError as e:
            st.error(str(e))
        else:
            _end_exercise()
            flash("Feedback submitted! Keep practicing to train your advanced awareness.")
            st.rerun()

    if timer["running"]:
        time.sleep(1)
        st.rerun()
