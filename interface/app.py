# interface/app.py
"""
Cart Parser - Streamlit page

Upload a cart CSV (or Excel export), validate it and show the parsed items
with the cart total, or the list of validation errors.

Run with: streamlit run interface/app.py
"""

import sys
from pathlib import Path

import streamlit as st

sys.path.append(str(Path(__file__).parent.parent))
from config import CART_HEADERS, MAX_FILE_SIZE_MB  # noqa: E402
from identifiers import SequentialIdGenerator  # noqa: E402
from interface.processor import process_uploaded_file  # noqa: E402
from utils.logger import setup_logger  # noqa: E402

setup_logger()

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Cart Parser",
    page_icon="🛒",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "processed" not in st.session_state:
    st.session_state.processed = False
if "cart" not in st.session_state:
    st.session_state.cart = None
if "items_df" not in st.session_state:
    st.session_state.items_df = None
if "errors_df" not in st.session_state:
    st.session_state.errors_df = None
if "error" not in st.session_state:
    st.session_state.error = None

# ============================================================================
# MAIN APP FLOW
# ============================================================================
st.title("🛒 Cart Parser")
st.caption(f"Expected header: {','.join(CART_HEADERS)} (max {MAX_FILE_SIZE_MB} MB)")

sequential_ids = st.toggle("Sequential item ids", value=False)
uploaded_file = st.file_uploader("Cart file", type=["csv", "txt", "xlsx", "xlsm"])

if uploaded_file and st.button("Parse cart", type="primary"):
    with st.spinner("🔄 Parsing cart..."):
        success, cart, items_df, errors_df, error = process_uploaded_file(
            uploaded_file,
            id_generator=SequentialIdGenerator() if sequential_ids else None,
        )

    st.session_state.processed = success
    st.session_state.cart = cart
    st.session_state.items_df = items_df
    st.session_state.errors_df = errors_df
    st.session_state.error = error

# ============================================================================
# RESULTS SECTION
# ============================================================================
if st.session_state.error:
    st.error(f"❌ {st.session_state.error}")
    if st.session_state.errors_df is not None:
        st.dataframe(st.session_state.errors_df, hide_index=True, width="stretch")

if st.session_state.processed and st.session_state.cart is not None:
    st.success(f"✅ Parsed {len(st.session_state.cart['items'])} item(s)")
    st.dataframe(st.session_state.items_df, hide_index=True, width="stretch")
    st.metric("Total", f"{st.session_state.cart['total']:.2f}")

    st.download_button(
        label="📥 Download items (CSV)",
        data=st.session_state.items_df.to_csv(index=False).encode("utf-8"),
        file_name="cart_items.csv",
        mime="text/csv",
    )

if st.button("Reset"):
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()
