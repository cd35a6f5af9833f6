import logging

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from parsing import config
from services.batch import parse_documents, scan_folder
from services.documents import SUPPORTED_EXTENSIONS
from services.export import CALLER_COLUMNS, frame_to_csv, frame_to_xlsx, results_frame

load_dotenv()
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- Page Config ---
st.set_page_config(
    page_title="Resume Extraction | Review",
    page_icon="📄",
    layout="wide",
)

CUSTOM_CSS = """
<style>
.block-container { padding-top: 1.25rem; max-width: 1200px; }
.muted { color: rgba(250,250,250,0.6); font-size: 0.9rem; }
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# --- Session State ---
def _init_state():
    ss = st.session_state
    ss.setdefault("results", [])
    ss.setdefault("extras", [])

_init_state()


# --- Step 1: Upload ---
def step_upload():
    st.subheader("1) Upload resumes")
    files = st.file_uploader(
        "Drop resumes (PDF/DOCX/TXT)",
        type=[e.lstrip(".") for e in SUPPORTED_EXTENSIONS],
        accept_multiple_files=True,
    )
    if files and st.button("Extract fields", type="primary"):
        with st.spinner(f"Parsing {len(files)} resume(s)…"):
            _store_results(parse_documents([(f.name, f.getvalue()) for f in files]))

    folder = st.text_input("…or parse every resume in a folder on this machine", placeholder="/path/to/resumes")
    if folder and st.button("Scan folder"):
        try:
            with st.spinner(f"Scanning {folder}…"):
                results = scan_folder(folder)
        except FileNotFoundError as e:
            st.error(str(e))
            return
        if not results:
            st.info("No PDF, DOCX or TXT files in that folder.")
            return
        _store_results(results)


def _store_results(results):
    st.session_state.results = results
    st.session_state.extras = []
    failed = [r for r in results if not r.ok]
    if failed:
        st.warning(f"{len(failed)} file(s) could not be read.")
    st.toast(f"Parsed {len(results) - len(failed)} resume(s)", icon="✅")


# --- Step 2: Review ---
def step_review():
    st.subheader("2) Review")
    results = st.session_state.results
    if not results:
        st.info("Upload resumes first.")
        return

    df = results_frame(results, st.session_state.extras)
    edited = st.data_editor(
        df,
        use_container_width=True,
        hide_index=True,
        disabled=[c for c in df.columns if c not in CALLER_COLUMNS],
        key="results_editor",
    )
    # by row position: two uploads may share a file name
    st.session_state.extras = [
        {c: row[c] for c in CALLER_COLUMNS}
        for _, row in edited.iterrows()
    ]

    for r in results:
        label = r.resume.full_name or r.file_name
        with st.expander(f"{label} ({r.file_name})", expanded=False):
            if r.ok:
                st.json(r.resume.to_dict())
            else:
                st.error(r.error)

    export = pd.DataFrame(edited)
    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Download CSV",
            data=frame_to_csv(export),
            file_name="resumes.csv",
            mime="text/csv",
        )
    with c2:
        st.download_button(
            "Download Excel",
            data=frame_to_xlsx(export),
            file_name="resumes.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )


# --- Main ---
st.title("Resume field extraction")
st.markdown("<p class='muted'>Upload resumes, check the extracted fields, fill in pay and notice details, export.</p>",
            unsafe_allow_html=True)
step_upload()
st.divider()
step_review()
