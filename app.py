# app.py
import streamlit as st

from core.config import APP_TITLE, PAGE_ICON, APP_TAGLINE, USER_ID, STORE_FILE, TIMEZONE
from core.logger import setup_logger
from core.store import get_store
from core.time_utils import today_local
from ui.components.messages import render_flash
from ui.tabs.dashboard_tab import render_dashboard_tab
from ui.tabs.reflect_tab import render_reflect_tab
from ui.tabs.train_tab import render_train_tab
from ui.tabs.history_tab import render_history_tab
from ui.tabs.settings_tab import render_settings_tab

setup_logger()
st.set_page_config(page_title=APP_TITLE, page_icon=PAGE_ICON, layout="wide")

store = get_store()

st.title(f"{PAGE_ICON} {APP_TITLE}")
st.caption(APP_TAGLINE)

# Sidebar
st.sidebar.header("⚙️ Local Profile")
st.sidebar.write(f"**User:** `{USER_ID}`")
st.sidebar.write(f"**Store:** `{STORE_FILE}`")
st.sidebar.caption(f"Today ({TIMEZONE}): {today_local().isoformat()}")

render_flash()

# Tabs
tab1, tab2, tab3, tab4, tab5 = st.tabs([
    "🧭 Dashboard", "✍️ Reflect & Log", "🏋️ Train Your Awareness", "📜 Reflection History", "🗄️ Settings"
])

with tab1:
    render_dashboard_tab(store, USER_ID)

with tab2:
    render_reflect_tab(store, USER_ID)

with tab3:
    render_train_tab(store, USER_ID)

with tab4:
    render_history_tab(store, USER_ID)

with tab5:
    render_settings_tab(store, USER_ID)
