"""
app.py
Streamlit Subscription Manager.
Run: streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from config import Settings, configure_logging
from models import Failure, Kind, Plan, Status, Subscription, format_amount, format_date
from store import SubscriptionStore
import utils

logger = logging.getLogger(__name__)

PLAN_OPTIONS = [p.value for p in Plan]
STATUS_OPTIONS = [s.value for s in Status]
TYPE_OPTIONS = [k.value for k in Kind]


def init_once(settings: Settings) -> SubscriptionStore:
    # One store per browser session, handed explicitly to every page function
    if "store" not in st.session_state:
        initial = utils.sample_subscriptions() if settings.seed_sample_data else []
        st.session_state.store = SubscriptionStore(initial)
        logger.info("Launching Subscription Manager session...")
    if "edit_id" not in st.session_state:
        st.session_state.edit_id = None
    return st.session_state.store


# ---------- Form ----------

def subscription_form(store: SubscriptionStore, existing: Subscription | None = None):
    if existing:
        st.subheader(f"✏️ Edit Subscription ({existing.id})")
        key = f"edit_{existing.id}"
    else:
        st.subheader(f"➕ Add Subscription (next ID: {store.next_id()})")
        key = "add"

    col1, col2, col3 = st.columns(3)
    with col1:
        customer = st.text_input("Customer", value=(existing.customer if existing else ""), key=f"{key}_customer")
        phone = st.text_input("Phone", value=(existing.phone if existing else ""), key=f"{key}_phone")

    with col2:
        next_date = st.text_input(
            "Next Date (MM/dd/yyyy)",
            value=(format_date(existing.next_date) if existing else ""),
            key=f"{key}_next_date",
        )
        recurring = st.text_input(
            "Recurring",
            value=(format_amount(existing.recurring_amount) if existing else ""),
            key=f"{key}_recurring",
        )

    with col3:
        plan = st.selectbox(
            "Plan", options=PLAN_OPTIONS,
            index=(PLAN_OPTIONS.index(existing.plan.value) if existing else 0),
            key=f"{key}_plan",
        )
        status = st.selectbox(
            "Status", options=STATUS_OPTIONS,
            index=(STATUS_OPTIONS.index(existing.status.value) if existing else 0),
            key=f"{key}_status",
        )
        kind = st.selectbox(
            "Type", options=TYPE_OPTIONS,
            index=(TYPE_OPTIONS.index(existing.type) if existing else 0),
            key=f"{key}_type",
        )

    if st.button("Save", type="primary", key=f"{key}_save"):
        if existing:
            result = store.update(existing.id, customer, phone, next_date, recurring, plan, status, kind)
        else:
            result = store.create(customer, phone, next_date, recurring, plan, status, kind)

        if isinstance(result, Failure):
            st.error(result.message)
            return

        st.session_state.edit_id = None
        st.success(f"Subscription {result.id} saved.")
        st.rerun()


# ---------- Pages ----------

def subscriptions_page(store: SubscriptionStore):
    st.header("📋 Subscriptions")

    with st.sidebar:
        st.subheader("Search")
        keyword = st.text_input("Keyword (any column)")

    rows = store.filter(keyword)
    df = utils.subscriptions_to_dataframe(rows)
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.caption(f"{len(rows)} of {len(store)} subscription(s) shown.")
    logger.debug("Table refreshed. %d subscriptions shown.", len(rows))

    if rows:
        st.download_button(
            "Download subscriptions.csv",
            data=utils.subscriptions_to_csv_bytes(rows),
            file_name="subscriptions.csv",
            mime="text/csv",
        )

    st.divider()

    colA, colB = st.columns([1, 2])
    with colA:
        st.subheader("Select subscription")
        selected_id = st.selectbox("Subscription ID", options=["(none)"] + [s.id for s in rows])

    with colB:
        if selected_id != "(none)":
            st.subheader("Subscription actions")
            c1, c2 = st.columns(2)
            with c1:
                if st.button("Edit"):
                    st.session_state.edit_id = selected_id
                    st.rerun()
            with c2:
                delete_confirm = st.checkbox("Confirm remove", value=False, key="del_confirm")
                if st.button("Remove", type="secondary", disabled=not delete_confirm):
                    result = store.remove(selected_id)
                    if isinstance(result, Failure):
                        st.error(result.message)
                    else:
                        if st.session_state.edit_id == selected_id:
                            st.session_state.edit_id = None
                        st.success(f"Subscription {selected_id} removed.")
                        st.rerun()

    st.divider()

    if st.session_state.edit_id:
        existing = store.find_by_id(st.session_state.edit_id)
        if isinstance(existing, Failure):
            # selection went stale (removed in the meantime)
            st.warning(existing.message)
            st.session_state.edit_id = None
        else:
            subscription_form(store, existing=existing)
        if st.button("Cancel edit"):
            st.session_state.edit_id = None
            st.rerun()
    else:
        subscription_form(store)


# --------- App entry ---------

def run():
    settings = Settings()
    configure_logging(settings.log_level)
    st.set_page_config(page_title=settings.app_title, layout="wide")
    st.title(f"🧾 {settings.app_title}")

    try:
        store = init_once(settings)
    except Exception:
        logger.exception("Failed to initialize the subscription store")
        st.error("Fatal error during application startup.")
        st.stop()

    subscriptions_page(store)


if __name__ == "__main__":
    run()
