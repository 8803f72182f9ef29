# ──────────────────────────────────────────────────────────────────────────────
# Bootstrap: path + page config FIRST (must be the first Streamlit command)
# ──────────────────────────────────────────────────────────────────────────────
import os
import sys
import random
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Rock Paper Scissors Game",
    layout="centered",
    page_icon="✊",
)

from loguru import logger  # noqa: E402

from strategy_rps.config import load_config, setup_logging  # noqa: E402
from strategy_rps.game_logic import MOVES, Outcome  # noqa: E402
from strategy_rps.session import SessionState, play_round  # noqa: E402

# ──────────────────────────────────────────────────────────────────────────────
# Config + session state
# ──────────────────────────────────────────────────────────────────────────────
@st.cache_resource
def get_config():
    cfg = load_config()
    setup_logging(cfg)
    return cfg

CFG = get_config()

if "session" not in st.session_state:
    st.session_state.session = SessionState()
    st.session_state.rng = random.Random(CFG.get("ai", {}).get("seed"))
session = st.session_state.session

st.markdown(
    """
    <style>
      .metric { text-align:center; padding:10px; border:1px solid #ddd; border-radius:12px; }
      .metric .k { font-size:13px; opacity:.75; }
      .metric .v { font-size:28px; font-weight:800; }
      .win { color:#289628; } .lose { color:#be2828; } .tie { color:#787878; }
    </style>
    """,
    unsafe_allow_html=True,
)

# ──────────────────────────────────────────────────────────────────────────────
# Buttons
# ──────────────────────────────────────────────────────────────────────────────
st.markdown("### Choose your move")
cols = st.columns(4)
for col, move in zip(cols, MOVES):
    if col.button(move.value, width="stretch"):
        play_round(session, move, st.session_state.rng)

if cols[3].button("Quit", width="stretch"):
    logger.info(f"Quit after {session.tally.rounds} rounds")
    # no persistence step: end the server process right here
    os._exit(0)

# ──────────────────────────────────────────────────────────────────────────────
# Scoreboard
# ──────────────────────────────────────────────────────────────────────────────
t = session.tally
c1, c2, c3 = st.columns(3)
c1.markdown(f"<div class='metric'><div class='k'>Player Wins</div><div class='v win'>{t.player_wins}</div></div>", unsafe_allow_html=True)
c2.markdown(f"<div class='metric'><div class='k'>Computer Wins</div><div class='v lose'>{t.computer_wins}</div></div>", unsafe_allow_html=True)
c3.markdown(f"<div class='metric'><div class='k'>Ties</div><div class='v tie'>{t.ties}</div></div>", unsafe_allow_html=True)

# ──────────────────────────────────────────────────────────────────────────────
# Results log
# ──────────────────────────────────────────────────────────────────────────────
st.markdown("#### Results")
st.text_area(
    "Results",
    value="\n".join(session.log_lines()),
    height=260,
    disabled=True,
    label_visibility="collapsed",
)
if session.log:
    last = session.log[-1]
    css = {Outcome.PLAYER_WIN: "win", Outcome.COMPUTER_WIN: "lose", Outcome.TIE: "tie"}[last.outcome]
    st.markdown(f"<div class='{css}'>Last round: <strong>{last.describe()}</strong></div>", unsafe_allow_html=True)
