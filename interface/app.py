# interface/app.py
"""
Lot Intake Tool - Main Application

Streamlit review screen: upload a seller sheet, confirm the header row and
column mapping, pick extra columns, review manufacturer lots, then write the
approved lots.
"""

import streamlit as st

from config import DEFAULT_CURRENCY, OUTPUT_ROOT, configure_logging
from domain.canonical import MAPPED_FIELDS
from extraction import ImportOverrides, locate_header, manual_record, map_columns, run_import
from extraction.columns import column_labels
from fields.normalization import to_decimal
from grouping import SplitMode, materialize_lots
from processor import decode_uploaded_file, grid_preview, records_to_dataframe
from writers import XlsxLotMaterializer

configure_logging()

FIELD_TITLES = {
    "model": "Model",
    "description": "Description",
    "quantity": "Quantity",
    "asking_price": "Asking price",
    "cost": "Cost",
    "manufacturer": "Manufacturer (OEM)",
}

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Lot Intake",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "grid" not in st.session_state:
    st.session_state.grid = None
if "upload_name" not in st.session_state:
    st.session_state.upload_name = None
if "results" not in st.session_state:
    st.session_state.results = None
if "manual_records" not in st.session_state:
    st.session_state.manual_records = []

# ============================================================================
# LOT DETAILS
# ============================================================================
st.title("New lot")
st.caption("1) Pick the header row. 2) Map your columns. 3) Choose extra columns to include for buyers. Lines can also be added by hand.")

col_a, col_b, col_c = st.columns(3)
base_title = col_a.text_input("Lot title", value="")
currency = col_b.text_input("Currency", value=DEFAULT_CURRENCY)
cost_paid = col_c.text_input("Cost paid (private)", value="")

uploaded_file = st.file_uploader("Seller sheet (.xlsx)", type=["xlsx"])

if uploaded_file is not None and uploaded_file.name != st.session_state.upload_name:
    success, grid, error = decode_uploaded_file(uploaded_file)
    st.session_state.upload_name = uploaded_file.name
    st.session_state.results = None
    st.session_state.grid = grid if success else None
    if not success:
        st.error(f"❌ Error: {error}")
    elif not grid:
        st.warning("The first sheet has no values")

grid = st.session_state.grid or []
manual_records = tuple(st.session_state.manual_records)

# ============================================================================
# MANUAL LINES
# ============================================================================
with st.expander(f"Add a line manually ({len(manual_records)} added)", expanded=not grid):
    with st.form("manual_line", clear_on_submit=True):
        m_cols = st.columns([2, 2, 1, 1, 1])
        manual_model = m_cols[0].text_input("Model")
        manual_desc = m_cols[1].text_input("Description")
        manual_qty = m_cols[2].text_input("Qty")
        manual_ask = m_cols[3].text_input("Asking")
        manual_cost = m_cols[4].text_input("Cost (private)")
        if st.form_submit_button("Add line"):
            record = manual_record(manual_model, manual_desc, manual_qty, manual_ask, manual_cost)
            if record is None:
                st.warning("Enter a model or description and a positive quantity")
            else:
                st.session_state.manual_records.append(record)
                st.rerun()
    if manual_records:
        st.dataframe(records_to_dataframe(manual_records), width="stretch")
        if st.button("Clear manual lines"):
            st.session_state.manual_records = []
            st.rerun()

header_row = None
field_overrides = {}
extra_columns = None

# ============================================================================
# MAPPING SECTION
# ============================================================================
if grid:
    st.dataframe(grid_preview(grid), width="stretch")

    guess = locate_header(grid)
    header_row = st.number_input(
        "Header row (1-based)", min_value=1, max_value=len(grid), value=guess + 1, step=1
    ) - 1

    labels = column_labels(grid, header_row)
    guessed_mapping, guessed_extras = map_columns(grid, header_row)
    options = [None] + list(range(len(labels)))

    def _label(i):
        return "(none)" if i is None else f"{labels[i]} (col {i + 1})"

    mapping_cols = st.columns(len(MAPPED_FIELDS))
    for col, name in zip(mapping_cols, MAPPED_FIELDS):
        current = getattr(guessed_mapping, name)
        field_overrides[name] = col.selectbox(
            FIELD_TITLES[name],
            options,
            index=options.index(current),
            format_func=_label,
            key=f"map_{name}_{header_row}",
        )

    extra_columns = frozenset(
        st.multiselect(
            "Extra columns (kept as line detail)",
            list(range(len(labels))),
            default=sorted(guessed_extras),
            format_func=_label,
            key=f"extras_{header_row}",
        )
    )

# ============================================================================
# PREVIEW
# ============================================================================
if grid or manual_records:
    preview = run_import(
        grid,
        ImportOverrides(
            header_row=header_row,
            field_overrides=field_overrides,
            extra_columns=extra_columns,
            base_title=base_title,
            manual_records=manual_records,
        ),
    )

    if preview.is_empty:
        st.warning("Nothing to import: no rows below the header row have values.")
        st.stop()

    # ========================================================================
    # GROUPS SECTION
    # ========================================================================
    requested_mode = SplitMode.AUTO
    split_mode = preview.split_mode
    if len(preview.groups) > 1:
        st.markdown(f"**Multiple OEMs detected ({len(preview.groups)}).**")
        choice = st.radio(
            "Lots",
            ["Split list into OEM sub-lots", "Keep as one lot"],
            index=0 if split_mode is SplitMode.SPLIT else 1,
            horizontal=True,
        )
        split_mode = SplitMode.SPLIT if choice.startswith("Split") else SplitMode.KEEP
        requested_mode = split_mode

    approvals = {}
    buyer_invites = {}
    if split_mode is SplitMode.SPLIT:
        for g in preview.groups:
            with st.expander(f"{g.title(base_title)} - {len(g.records)} lines", expanded=False):
                approvals[g.manufacturer] = st.checkbox("Create this lot", value=True, key=f"ok_{g.manufacturer}")
                buyers = st.text_input("Invite buyers (ids, comma separated)", key=f"buyers_{g.manufacturer}")
                buyer_invites[g.manufacturer] = frozenset(b.strip() for b in buyers.split(",") if b.strip())
                st.dataframe(records_to_dataframe(g.records[:10]), width="stretch")
    else:
        combined = preview.proposals[0]
        st.markdown(f"**{combined.title}** - {len(preview.records)} lines")
        if requested_mode is SplitMode.AUTO:
            approvals[combined.manufacturer] = st.checkbox("Create this lot", value=True, key="ok_combined")
        buyers = st.text_input("Invite buyers (ids, comma separated)", key="buyers_combined")
        buyer_invites[combined.manufacturer] = frozenset(b.strip() for b in buyers.split(",") if b.strip())
        st.dataframe(records_to_dataframe(preview.records[:10]), width="stretch")

    # ========================================================================
    # CREATE LOTS
    # ========================================================================
    if st.button("Create lots", type="primary"):
        result = run_import(
            grid,
            ImportOverrides(
                header_row=header_row,
                field_overrides=field_overrides,
                extra_columns=extra_columns,
                split_mode=requested_mode,
                base_title=base_title,
                approvals=approvals,
                buyer_invites=buyer_invites,
                manual_records=manual_records,
            ),
        )
        if not result.proposals:
            st.error("Select at least one OEM lot to create")
        else:
            cost = to_decimal(cost_paid) if cost_paid.strip() else None
            materializer = XlsxLotMaterializer(OUTPUT_ROOT, currency=currency, cost_amount=cost)
            with st.spinner("🔄 Writing lots..."):
                st.session_state.results = (materialize_lots(result.proposals, materializer), materializer.paths)

# ============================================================================
# RESULTS SECTION
# ============================================================================
if st.session_state.results:
    results, paths = st.session_state.results
    for r in results:
        if r.ok:
            st.success(f"✅ {r.title}: {paths.get(r.lot_id, r.lot_id)}")
        else:
            st.error(f"❌ {r.title}: {r.error}")
