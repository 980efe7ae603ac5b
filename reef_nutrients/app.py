"""
Reef Nutrients Streamlit App

Interactive dashboard for logging phosphate and nitrate test results and
following their trend against the target ranges.
"""

import logging
import streamlit as st
from datetime import date, datetime
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from reef_nutrients.config import TrackerConfig, load_config
from reef_nutrients.analyzers import ReadingAnalyzer, ChartProjector
from reef_nutrients.loaders import (
    EntryStore,
    build_entry,
    entries_to_dataframe,
    dataframe_to_csv,
)
from reef_nutrients.metrics import Entry
from reef_nutrients.utils import format_reading, format_delta, format_ratio
from reef_nutrients.visualizers import PlotlyVisualizer

logger = logging.getLogger(__name__)


# =============================================================================
# Page Config
# =============================================================================

st.set_page_config(
    page_title="Reef Nutrients",
    page_icon="🐠",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }

    div[data-testid="stMetricValue"] {
        font-size: 1.5rem;
        font-weight: 700;
    }
</style>
""", unsafe_allow_html=True)


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """Initialize session state variables."""
    if 'config' not in st.session_state:
        st.session_state.config = load_config()
    if 'editing_id' not in st.session_state:
        st.session_state.editing_id = None
    if 'form_version' not in st.session_state:
        st.session_state.form_version = 0


init_session_state()


def get_store() -> EntryStore:
    return EntryStore(st.session_state.config.storage.data_path)


def reset_form():
    """Leave edit mode and clear the form widgets."""
    st.session_state.editing_id = None
    # New widget keys give fresh, empty widgets
    st.session_state.form_version += 1


# =============================================================================
# Sidebar - Configuration
# =============================================================================

def render_sidebar():
    """Render sidebar with storage and target range settings."""
    with st.sidebar:
        st.title("🐠 Reef Nutrients")

        config = st.session_state.config

        st.subheader("Storage")
        config.storage.data_path = st.text_input(
            "Data file",
            value=config.storage.data_path,
        )

        with st.expander("Target Ranges (ppm)"):
            t = config.targets
            t.po4_min = st.number_input("PO4 min", value=float(t.po4_min), min_value=0.0, step=0.01, format="%.3f")
            t.po4_max = st.number_input("PO4 max", value=float(t.po4_max), min_value=0.0, step=0.01, format="%.3f")
            t.no3_min = st.number_input("NO3 min", value=float(t.no3_min), min_value=0.0, step=0.5, format="%.1f")
            t.no3_max = st.number_input("NO3 max", value=float(t.no3_max), min_value=0.0, step=0.5, format="%.1f")

            if st.button("Reset to Defaults"):
                st.session_state.config = TrackerConfig()
                st.rerun()


# =============================================================================
# Main Content
# =============================================================================

def render_main():
    """Render main dashboard content."""
    render_sidebar()

    config = st.session_state.config
    store = get_store()
    analyzer = ReadingAnalyzer(store.load())

    st.header("Reef Nutrients")

    render_summary(analyzer, config)
    render_charts(analyzer, config)
    render_form(store, analyzer, config)
    render_history(store, analyzer, config)

    st.caption(
        "Tip: keep your testing routine consistent (same kit, same time of day, "
        "same conditions) for comparable readings."
    )


def render_summary(analyzer: ReadingAnalyzer, config: TrackerConfig):
    """Render latest reading, change since previous and NO3:PO4 ratio."""
    summary = analyzer.summary
    d = config.display
    latest = summary.latest

    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("**Latest reading**")
        st.metric("Date", latest.date if latest else d.placeholder)
        st.metric(
            "PO4 (ppm)",
            format_reading(latest.po4 if latest else None, d.po4_decimals, d.placeholder),
        )
        st.metric(
            "NO3 (ppm)",
            format_reading(latest.no3 if latest else None, d.no3_decimals, d.placeholder),
        )

    with col2:
        st.markdown("**Change vs. previous**")
        st.metric("Δ PO4 (ppm)", format_delta(summary.delta_po4, d.po4_decimals, d.placeholder))
        st.metric("Δ NO3 (ppm)", format_delta(summary.delta_no3, d.no3_decimals, d.placeholder))

    with col3:
        st.markdown("**NO3:PO4 ratio**")
        st.metric("Current", format_ratio(summary.current_ratio, d.ratio_decimals, d.placeholder))
        st.metric("Average", format_ratio(summary.average_ratio, d.ratio_decimals, d.placeholder))


def render_charts(analyzer: ReadingAnalyzer, config: TrackerConfig):
    """Render PO4 and NO3 trend charts with target bands."""
    projector = ChartProjector(config.chart)
    viz = PlotlyVisualizer(config)
    labels = analyzer.labels

    col1, col2 = st.columns(2)
    charts = [
        (col1, 'po4', "Phosphate (ppm)", 3),
        (col2, 'no3', "Nitrate (ppm)", 1),
    ]

    for col, metric, title, decimals in charts:
        with col:
            series = analyzer.series(metric)
            if not series:
                st.markdown(f"**{title}**")
                st.info("No data to chart yet.")
                continue
            target_min, target_max = config.targets.for_metric(metric)
            projection = projector.project(series, target_min, target_max)
            fig = viz.create_nutrient_chart(projection, labels, title, unit="ppm", decimals=decimals)
            st.plotly_chart(fig, use_container_width=True)
            st.caption("Unit: ppm")


def render_form(store: EntryStore, analyzer: ReadingAnalyzer, config: TrackerConfig):
    """Render the add/edit reading form."""
    editing = None
    if st.session_state.editing_id is not None:
        editing = next((e for e in analyzer.entries if e.id == st.session_state.editing_id), None)
        if editing is None:
            reset_form()

    v = st.session_state.form_version
    key_suffix = f"{v}_{editing.id if editing else 'new'}"

    with st.form(key=f"reading_form_{key_suffix}"):
        st.subheader("Edit reading" if editing else "Add reading")

        reading_date = st.date_input(
            "Date",
            value=datetime.strptime(editing.date, "%Y-%m-%d").date() if editing else date.today(),
        )
        po4_text = st.text_input(
            "Phosphate (ppm)",
            value="" if editing is None or editing.po4 is None else str(editing.po4),
        )
        no3_text = st.text_input(
            "Nitrate (ppm)",
            value="" if editing is None or editing.no3 is None else str(editing.no3),
        )
        notes = st.text_area("Notes", value=editing.notes if editing else "")

        col1, col2 = st.columns([1, 5])
        with col1:
            submitted = st.form_submit_button("Save" if editing else "Add")
        with col2:
            cancelled = st.form_submit_button("Cancel") if editing else False

    if cancelled:
        reset_form()
        st.rerun()

    if submitted:
        try:
            entry = build_entry(
                reading_date.isoformat(),
                po4_text,
                no3_text,
                notes,
                entry_id=editing.id if editing else None,
            )
        except ValueError as e:
            st.error(f"Invalid date: {e}")
            return

        if entry is None:
            st.warning("Enter at least one reading (PO4 or NO3).")
            return

        store.upsert(entry)
        logger.info("Saved reading %s for %s", entry.id, entry.date)
        reset_form()
        st.rerun()


def render_history(store: EntryStore, analyzer: ReadingAnalyzer, config: TrackerConfig):
    """Render reading history with ratio column and edit/delete actions."""
    d = config.display
    st.subheader("History")

    history = analyzer.history
    if not history:
        st.caption("No readings yet.")
        return

    header = st.columns([2, 2, 2, 2, 1, 1])
    for col, label in zip(header, ["Date", "PO4 (ppm)", "NO3 (ppm)", "NO3:PO4", "", ""]):
        col.markdown(f"**{label}**")

    for entry in history:
        render_history_row(store, entry, d)

    df = entries_to_dataframe(history)
    st.download_button(
        "Download CSV",
        dataframe_to_csv(df),
        file_name=f"reef_nutrients_{datetime.now().strftime('%Y%m%d')}.csv",
        mime="text/csv"
    )


def render_history_row(store: EntryStore, entry: Entry, d):
    cols = st.columns([2, 2, 2, 2, 1, 1])
    cols[0].write(entry.date)
    cols[1].write(format_reading(entry.po4, d.po4_decimals, d.placeholder))
    cols[2].write(format_reading(entry.no3, d.no3_decimals, d.placeholder))
    cols[3].write(format_ratio(entry.ratio, d.ratio_decimals, d.placeholder))

    if cols[4].button("Edit", key=f"edit_{entry.id}"):
        st.session_state.editing_id = entry.id
        st.session_state.form_version += 1
        st.rerun()

    if cols[5].button("Delete", key=f"delete_{entry.id}", type="secondary"):
        store.delete(entry.id)
        logger.info("Deleted reading %s", entry.id)
        if st.session_state.editing_id == entry.id:
            reset_form()
        st.rerun()

    if entry.notes.strip():
        st.caption(f"Notes: {entry.notes}")


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    render_main()
