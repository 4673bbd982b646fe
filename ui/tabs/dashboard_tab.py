# ui/tabs/dashboard_tab.py
import streamlit as st

from core.errors import UliError
from core.models import default_scores
from core.principles import PRINCIPLE_KEYS, PRINCIPLE_LABELS, PRINCIPLE_DESCRIPTIONS, ABOUT_ULI
from core.store import LocalStore
from data_access.records_repo import load_current_scores, load_history
from services.scoring_service import compute_aggregate_percent, principle_percent
from services.streak_service import compute_streak, compute_best_streak
from services.trend_service import TrendWindow, InsufficientData, build_trend
from ui.components.trend_chart import trend_figure

def render_dashboard_tab(store: LocalStore, USER_ID: str):
    st.header("🧭 Your Awareness Progress")
    st.caption("Track your current self-assessed levels for each principle of advanced awareness.")

    try:
        scores = load_current_scores(store, USER_ID) or default_scores()
        history = load_history(store, USER_ID)
    except UliError as e:
        st.error(f"Failed to load your progress. Data might be corrupted. ({e})")
        return

    overall = compute_aggregate_percent(scores)
    c1, c2, c3 = st.columns(3)
    with c1: st.metric("🔥 Current Streak", f"{compute_streak(history)} days")
    with c2: st.metric("🏆 Best Streak", f"{compute_best_streak(history)} days")
    with c3: st.metric("🎯 Overall UL-I Score", f"{overall:.1f}%")
    st.progress(overall / 100.0, text="Your combined progress across all UL-I principles.")
    st.caption("Keep logging your reflections daily to maintain your streak!")

    st.divider()
    cols = st.columns(2)
    for i, key in enumerate(PRINCIPLE_KEYS):
        with cols[i % 2]:
            st.markdown(f"**{PRINCIPLE_LABELS[key]}**")
            st.caption(PRINCIPLE_DESCRIPTIONS[key])
            st.progress(principle_percent(scores[key]) / 100.0, text=f"{scores[key]}/10")

    st.divider()
    st.subheader("📈 Overall Progress Trend")
    st.caption("Compare how different aspects of your awareness have evolved over time.")
    selected = st.multiselect(
        "Principles", list(PRINCIPLE_KEYS), default=list(PRINCIPLE_KEYS),
        format_func=lambda k: PRINCIPLE_LABELS[k], key="trend_principles",
    )
    window = st.radio(
        "Timeframe", list(TrendWindow), index=2, horizontal=True,
        format_func=lambda w: w.label, key="trend_window",
    )
    chart = build_trend(history, window, selected)
    if isinstance(chart, InsufficientData):
        st.info(chart.message)
    else:
        st.plotly_chart(trend_figure(chart), use_container_width=True)

    st.divider()
    with st.expander("About Advanced Awareness (UL-I)", expanded=False):
        st.write(ABOUT_ULI)
        for key in PRINCIPLE_KEYS:
            st.markdown(f"- **{PRINCIPLE_LABELS[key]}:** {PRINCIPLE_DESCRIPTIONS[key]}")
