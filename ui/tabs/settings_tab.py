# ui/tabs/settings_tab.py
import streamlit as st

from core.errors import UliError
from core.store import LocalStore
from core.time_utils import today_local
from data_access.records_repo import count_user_records
from services.transfer_service import export_filename, export_json, import_json
from ui.components.messages import flash

def render_settings_tab(store: LocalStore, USER_ID: str):
    st.header("🗄️ Data Management")
    st.caption("Manage your personal UL-I training data. All data is stored locally on your device.")

    try:
        counts = count_user_records(store, USER_ID)
        payload = export_json(store, USER_ID)
    except UliError as e:
        st.error(f"Failed to read your data. ({e})")
        return

    c1, c2 = st.columns(2)
    with c1: st.metric("Reflections", counts["reflections"])
    with c2: st.metric("History points", counts["history"])

    st.download_button(
        "⬇️ Export All My Data", data=payload, file_name=export_filename(USER_ID, today_local()),
        mime="application/json", use_container_width=True,
    )

    st.divider()
    uploaded = st.file_uploader("Import Data", type=["json"], key="import_file")
    st.caption("*Importing data will overwrite your current local progress for this user ID.")
    if uploaded is not None and st.button("⬆️ Import", use_container_width=True):
        try:
            import_json(store, USER_ID, uploaded.getvalue().decode("utf-8"))
        except UnicodeDecodeError:
            st.error("Failed to import data: the file is not UTF-8 text.")
            return
        except UliError as e:
            st.error(f"Failed to import data: {e}. Make sure it's a valid JSON file.")
            return
        flash("Data imported successfully!")
        st.rerun()
