import hmac

import pandas as pd
import streamlit as st

from labdesk.core.config import Settings
from labdesk.core.errors import NotFoundError, StorageError
from labdesk.services.collection_store import BOOKINGS, CollectionStore

COLUMNS = ["id", "createdAt", "name", "phone", "tests", "address", "time"]


def bookings_frame(records) -> pd.DataFrame:
    """
    Bookings as a DataFrame, newest first.
    Missing columns are added empty so older records still render.
    """
    df = pd.DataFrame(records, columns=None if records else COLUMNS)
    for column in COLUMNS:
        if column not in df.columns:
            df[column] = None
    df["createdAt"] = pd.to_datetime(df["createdAt"], errors="coerce", utc=True)
    return df.sort_values("createdAt", ascending=False, na_position="last").reset_index(drop=True)


def main():
    settings = Settings()
    store = CollectionStore(settings.DATA_DIR)

    st.set_page_config(page_title="LabDesk Admin", page_icon="🧪", layout="wide")
    st.title("LabDesk - Bookings")

    password = st.text_input("Admin password", type="password")
    if not hmac.compare_digest(password.encode("utf-8"), settings.ADMIN_PASS.encode("utf-8")):
        st.info("Enter the admin password to see bookings.")
        return

    if st.button("Refresh"):
        st.rerun()

    try:
        df = bookings_frame(store.load(BOOKINGS))
    except StorageError as e:
        st.error(f"Could not read bookings: {e}")
        return

    if df.empty:
        st.info("No bookings yet.")
        return

    col1, col2 = st.columns(2)
    col1.metric("Total bookings", len(df))
    col2.metric("With preferred time", int(df["time"].notna().sum()))

    st.subheader("Bookings")
    st.dataframe(
        df[COLUMNS],
        use_container_width=True,
        column_config={
            "createdAt": st.column_config.DatetimeColumn("Created", format="D.M.YYYY HH:mm"),
            "name": "Name",
            "phone": "Phone",
            "tests": "Tests",
            "address": "Address",
            "time": "Preferred time",
            "id": "ID"
        }
    )

    st.subheader("Delete booking")
    booking_id = st.selectbox("Booking ID", df["id"].tolist())
    if st.button("Delete"):
        try:
            removed = store.remove_by_id(BOOKINGS, booking_id)
        except (NotFoundError, StorageError) as e:
            st.error(f"Delete failed: {e}")
        else:
            st.success(f"Removed {removed} record(s)")
            st.rerun()

    st.markdown("---")
    st.caption("LabDesk intake • admin panel")


if __name__ == "__main__":
    main()
