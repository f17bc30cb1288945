"""
Flip 7 Assistant Replay Viewer
Streamlit interface for stepping through a recorded game transcript.
"""

import json

import pandas as pd
import streamlit as st

from flip7_assist.demo import sample_transcript
from flip7_assist.engine.board import Status
from flip7_assist.transcript import BoardSnapshot, load_transcript, replay

# Page config
st.set_page_config(
    page_title="Flip 7 Assistant",
    page_icon="🎴",
    layout="wide"
)

st.title("🎴 Flip 7 Assistant")
st.markdown("*Replay a recorded game and see the deck count and advice at every step*")

# Sidebar for settings
st.sidebar.header("Transcript")

uploaded = st.sidebar.file_uploader("Transcript JSON", type=["json"])
if uploaded is not None:
    transcript = load_transcript(json.load(uploaded))
elif "transcript" in st.session_state:
    # Preloaded by an embedding page
    transcript = load_transcript(st.session_state["transcript"])
else:
    transcript = load_transcript(sample_transcript())
    st.sidebar.caption("Using the built-in sample game")

st.sidebar.markdown(f"**Players:** {', '.join(transcript.roster) or 'none'}")
st.sidebar.markdown(f"**Observations:** {len(transcript)}")

if len(transcript) == 0:
    st.warning("Transcript has no observations")
    st.stop()

if len(transcript) == 1:
    step = 1  # slider needs min < max
else:
    step = st.slider("Step", min_value=1, max_value=len(transcript), value=len(transcript))
session = replay(transcript, until=step)

current = transcript.observations[step - 1]
if isinstance(current, BoardSnapshot):
    st.info(f"Board snapshot for player {current.player}: {', '.join(current.sprites) or 'empty'}")
else:
    st.info(f"Log: {current.text}")

st.divider()

# Player advice
st.subheader("🧑 Players")
STATUS_ICONS = {Status.BUSTED: "❌ Busted", Status.FROZEN: "❄️ Frozen", Status.STAYED: "🛑 Stayed"}

reports = session.reports()
if reports:
    cols = st.columns(len(reports))
    for col, report in zip(cols, reports):
        with col:
            st.markdown(f"**{report.name}**")
            if not report.active:
                st.markdown(STATUS_ICONS[report.status])
                continue
            st.metric("Score", report.stats.current_score)
            st.metric("Safe", f"{report.stats.survival_rate}%")
            if report.advice.is_hit:
                st.success(f"HIT: {report.advice.reason}")
            else:
                st.error(f"STOP: {report.advice.reason}")
else:
    st.markdown("*No roster*")

st.divider()

# Deck composition
st.subheader("🂠 Remaining Deck")
col1, col2 = st.columns([2, 1])

breakdown = session.deck_breakdown()
deck_data = pd.DataFrame({
    'Card': [str(e.kind) for e in breakdown],
    'Count': [e.count for e in breakdown],
    'Share %': [e.percent for e in breakdown],
    'Density': [e.density.value for e in breakdown],
})

with col1:
    st.bar_chart(deck_data.set_index('Card')['Count'])
with col2:
    st.metric("Cards left", session.deck.total_remaining())
    st.dataframe(deck_data, hide_index=True)

# History
with st.expander("📜 Session history"):
    summary = session.history.to_dict()["summary"]
    st.json(summary)
    for entry in session.history.entries:
        st.code(f"{entry.sequence:>3} {entry.kind:<9} {entry.data}")

# Footer
st.divider()
st.markdown("*Built with the flip7_assist engine*")
