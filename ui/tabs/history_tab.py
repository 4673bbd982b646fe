# ui/tabs/history_tab.py
import streamlit as st

from core.errors import UliError
from core.principles import PRINCIPLE_KEYS, PRINCIPLE_LABELS
from core.store import LocalStore
from core.time_utils import local_display
from data_access.records_repo import load_reflections
from services.reflection_service import ALL_TAGS, all_tags, filter_reflections, reflections_frame

def render_history_tab(store: LocalStore, USER_ID: str):
    st.header("📜 Your Reflection History")

    try:
        reflections = load_reflections(store, USER_ID)
    except UliError as e:
        st.error(f"Failed to load reflection history. ({e})")
        return

    if not reflections:
        st.info('No reflections logged yet. Go to "Reflect & Log" to start your journey!')
        return

    st.caption("Browse through your past reflections and see your self-assessed scores.")
    c1, c2 = st.columns([3, 1])
    with c1:
        search = st.text_input("Search reflections or tags...", key="history_search")
    with c2:
        tag = st.selectbox("Tag", [ALL_TAGS] + all_tags(reflections),
                           format_func=lambda t: "All Tags" if t == ALL_TAGS else t, key="history_tag")

    matches = filter_reflections(reflections, search, tag)
    if not matches:
        st.info("No reflections match your current filters.")
        return

    st.caption(f"{len(matches)} of {len(reflections)} reflections")
    with st.expander("📊 Table view", expanded=False):
        st.dataframe(reflections_frame(matches), use_container_width=True, hide_index=True)

    for entry in matches:
        with st.container(border=True):
            st.caption(f"**Date:** {local_display(entry.moment)}")
            st.text(entry.reflection)
            if entry.tags:
                st.markdown(" ".join(f"`#{t}`" for t in entry.tags))
            cols = st.columns(3)
            for i, key in enumerate(PRINCIPLE_KEYS):
                cols[i % 3].markdown(f"**{PRINCIPLE_LABELS[key]}:** {entry.scores[key]}/10")
